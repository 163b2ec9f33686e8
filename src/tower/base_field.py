"""T0 = GF(2): the level where every tower recursion stops."""

from .bit_vector import BitVector
from .errors import DivisionByZeroError

ZERO = BitVector(0, 1)
ONE = BitVector(1, 1)


def add(a: BitVector, b: BitVector) -> BitVector:
    assert a.length == 1 and b.length == 1
    return BitVector(a.value ^ b.value, 1)


def multiply(a: BitVector, b: BitVector) -> BitVector:
    assert a.length == 1 and b.length == 1
    return BitVector(a.value & b.value, 1)


def invert(a: BitVector) -> BitVector:
    assert a.length == 1
    if a.value == 0:
        raise DivisionByZeroError("0 has no inverse in T0")
    return a
