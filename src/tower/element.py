import random

from .bit_vector import BitVector, log2
from .errors import LevelMismatchError, ShapeError


class TowerElement:

    __slots__ = ("bits",)

    def __init__(self, bits: BitVector):
        assert isinstance(bits, BitVector)
        object.__setattr__(self, "bits", bits)

    def __setattr__(self, name, value):
        raise AttributeError("TowerElement is immutable")

    @classmethod
    def zero(cls, level: int) -> "TowerElement":
        return cls(BitVector.zero(1 << level))

    @classmethod
    def one(cls, level: int) -> "TowerElement":
        return cls(BitVector.one(1 << level))

    @classmethod
    def generator(cls, level: int) -> "TowerElement":
        """The newest generator X_{level-1} of T_level (1 in T0)."""
        if level == 0:
            return cls.one(0)
        half = 1 << (level - 1)
        return cls(BitVector.join(BitVector.one(half), BitVector.zero(half)))

    @classmethod
    def from_int(cls, value: int, level: int) -> "TowerElement":
        return cls(BitVector(value, 1 << level))

    @classmethod
    def random_element(cls, level: int) -> "TowerElement":
        return cls.from_int(random.getrandbits(1 << level), level)

    @classmethod
    def elements(cls, level: int):
        for value in range(1 << (1 << level)):
            yield cls.from_int(value, level)

    @property
    def level(self) -> int:
        return log2(self.bits.length)

    @property
    def bit_length(self) -> int:
        return self.bits.length

    @property
    def value(self) -> int:
        return self.bits.value

    def is_zero(self) -> bool:
        return self.bits.is_zero()

    def check_level(self, other: "TowerElement") -> int:
        if self.bits.length != other.bits.length:
            raise LevelMismatchError(self.level, other.level)
        return self.level

    def split(self) -> tuple["TowerElement", "TowerElement"]:
        hi, lo = self.bits.split()
        return TowerElement(hi), TowerElement(lo)

    @classmethod
    def join(cls, hi: "TowerElement", lo: "TowerElement") -> "TowerElement":
        hi.check_level(lo)
        return cls(BitVector.join(hi.bits, lo.bits))

    def lift(self, level: int) -> "TowerElement":
        # T_j sits inside T_k as the elements whose upper bits are all zero
        if level < self.level:
            raise ShapeError(f"cannot lift an element of T{self.level} into T{level}")
        return TowerElement(self.bits.zero_extend(1 << level))

    def __hash__(self) -> int:
        return hash(("TowerElement", self.bits))

    def __eq__(self, other) -> bool:
        if not isinstance(other, TowerElement):
            return NotImplemented
        return self.bits == other.bits

    def __repr__(self) -> str:
        return f"TowerElement({self.bits.to_bitstring()!r})"

    def __str__(self) -> str:
        return self.bits.to_bitstring()

    # arithmetic through the default tower configuration

    def __add__(self, other: "TowerElement") -> "TowerElement":
        from .field_ops import DEFAULT_OPS

        return DEFAULT_OPS.add(self, other)

    __sub__ = __add__

    def __neg__(self) -> "TowerElement":
        return self

    def __mul__(self, other: "TowerElement") -> "TowerElement":
        from .field_ops import DEFAULT_OPS

        return DEFAULT_OPS.multiply(self, other)

    def __truediv__(self, other: "TowerElement") -> "TowerElement":
        from .field_ops import DEFAULT_OPS

        return DEFAULT_OPS.divide(self, other)

    def __pow__(self, n: int) -> "TowerElement":
        from .field_ops import DEFAULT_OPS

        return DEFAULT_OPS.pow(self, n)

    def inv(self) -> "TowerElement":
        from .field_ops import DEFAULT_OPS

        return DEFAULT_OPS.invert(self)
