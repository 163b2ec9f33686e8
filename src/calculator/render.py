from tower import TowerElement


def monomial(index: int) -> str:
    """Monomial ``index`` of the tower basis: X_j for every set bit j."""
    if index == 0:
        return "1"
    return "".join(f"X{j}" for j in range(index.bit_length()) if index >> j & 1)


def render(element: TowerElement) -> str:
    terms = [monomial(i) for i, bit in enumerate(element.bits.bits()) if bit]
    if not terms:
        return "0"
    return " + ".join(terms)
