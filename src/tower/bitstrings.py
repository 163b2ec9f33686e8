from .bit_vector import BitVector
from .element import TowerElement


def parse(bitstring: str) -> TowerElement:
    """Read an element from its canonical bitstring, constant term first.

    ``"1000"`` is 1 and ``"0100"`` is X0 in T2. Raises ``BitstringSyntaxError``
    on characters other than 0/1 and ``ShapeError`` when the length is not a
    power of two.
    """
    return TowerElement(BitVector.from_bitstring(bitstring))


def format_element(element: TowerElement) -> str:
    return element.bits.to_bitstring()
