from .errors import BitstringSyntaxError, ShapeError


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def log2(n: int) -> int:
    if not is_power_of_two(n):
        raise ShapeError(f"length {n} is not a power of two")
    return n.bit_length() - 1


class BitVector:
    """Immutable bit sequence whose length is a power of two.

    Bit ``i`` of ``value`` is character ``i`` of the bitstring, so the low half
    of the integer is the left half of the string.
    """

    __slots__ = ("value", "length")

    def __init__(self, value: int, length: int):
        if not is_power_of_two(length):
            raise ShapeError(f"length {length} is not a power of two")
        if value < 0 or value.bit_length() > length:
            raise ShapeError(f"value {value:#x} does not fit in {length} bits")
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "length", length)

    def __setattr__(self, name, value):
        raise AttributeError("BitVector is immutable")

    @classmethod
    def zero(cls, length: int) -> "BitVector":
        return cls(0, length)

    @classmethod
    def one(cls, length: int) -> "BitVector":
        # lo = one(n/2), hi = zero(n/2) all the way down: the unit is bit 0
        return cls(1, length)

    @classmethod
    def from_bitstring(cls, bits: str) -> "BitVector":
        if not bits:
            raise BitstringSyntaxError("expected a bitstring")
        bad = [ch for ch in bits if ch not in "01"]
        if bad:
            raise BitstringSyntaxError(f"unexpected character {bad[0]!r}")
        value = 0
        for i, ch in enumerate(bits):
            if ch == "1":
                value |= 1 << i
        return cls(value, len(bits))

    @classmethod
    def join(cls, hi: "BitVector", lo: "BitVector") -> "BitVector":
        if hi.length != lo.length:
            raise ShapeError(
                f"cannot join halves of length {hi.length} and {lo.length}"
            )
        return cls(hi.value << lo.length | lo.value, hi.length << 1)

    def split(self) -> tuple["BitVector", "BitVector"]:
        if self.length < 2:
            raise ShapeError("cannot split a single bit")
        half = self.length >> 1
        mask = (1 << half) - 1
        return BitVector(self.value >> half, half), BitVector(self.value & mask, half)

    def xor(self, other: "BitVector") -> "BitVector":
        if self.length != other.length:
            raise ShapeError(
                f"length mismatch: {self.length} and {other.length}"
            )
        return BitVector(self.value ^ other.value, self.length)

    __xor__ = xor

    def zero_extend(self, length: int) -> "BitVector":
        if length < self.length:
            raise ShapeError(f"cannot shrink {self.length} bits to {length}")
        return BitVector(self.value, length)

    def is_zero(self) -> bool:
        return self.value == 0

    def to_bitstring(self) -> str:
        return "".join(
            "1" if self.value >> i & 1 else "0" for i in range(self.length)
        )

    def bits(self) -> list[int]:
        return [self.value >> i & 1 for i in range(self.length)]

    def __len__(self) -> int:
        return self.length

    def __hash__(self) -> int:
        return hash(("BitVector", self.length, self.value))

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.length == other.length and self.value == other.value

    def __repr__(self) -> str:
        return f"BitVector({self.to_bitstring()!r})"
