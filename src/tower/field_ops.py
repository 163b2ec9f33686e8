"""Recursive arithmetic in the Wiedemann tower.

Every operation at level k splits its operands into (hi, lo) halves in
T_{k-1}, recurses, and joins the results; level 0 is handed to ``base_field``.
The generator X of T_k over T_{k-1} satisfies X^2 = c_k X + 1, where c_k comes
from the configuration.
"""

import logging

from . import base_field
from .bit_vector import BitVector
from .config import TowerConfig
from .element import TowerElement
from .errors import DivisionByZeroError, UnsupportedLevelError

logger = logging.getLogger(__name__)


class FieldOps:

    def __init__(self, config: TowerConfig | None = None):
        self.config = config if config is not None else TowerConfig.default()
        self._constants = {k: c.bits for k, c in self.config.constants.items()}
        # levels whose constant is the previous generator, so c_k * x is a shift
        self._canonical = frozenset(
            k for k in self._constants if self.config.is_canonical(k)
        )
        logger.debug(
            "field ops up to T%d, canonical constants at levels %s",
            self.config.max_level,
            sorted(self._canonical),
        )

    @property
    def max_level(self) -> int:
        return self.config.max_level

    def _level(self, *elems: TowerElement) -> int:
        first = elems[0]
        for e in elems[1:]:
            first.check_level(e)
        level = first.level
        if level > self.config.max_level:
            raise UnsupportedLevelError(level, self.config.max_level)
        return level

    def add(self, a: TowerElement, b: TowerElement) -> TowerElement:
        self._level(a, b)
        return TowerElement(a.bits ^ b.bits)

    sub = add

    def multiply(self, a: TowerElement, b: TowerElement) -> TowerElement:
        level = self._level(a, b)
        return TowerElement(self._multiply(a.bits, b.bits, level))

    def square(self, a: TowerElement) -> TowerElement:
        return self.multiply(a, a)

    def invert(self, a: TowerElement) -> TowerElement:
        level = self._level(a)
        if a.is_zero():
            raise DivisionByZeroError(f"0 has no inverse in T{level}")
        return TowerElement(self._invert(a.bits, level))

    def divide(self, a: TowerElement, b: TowerElement) -> TowerElement:
        self._level(a, b)
        return self.multiply(a, self.invert(b))

    def pow(self, a: TowerElement, n: int) -> TowerElement:
        level = self._level(a)
        if n < 0:
            a, n = self.invert(a), -n
        result = BitVector.one(a.bit_length)
        base = a.bits
        while n > 0:
            if n & 1:
                result = self._multiply(result, base, level)
            n >>= 1
            base = self._multiply(base, base, level)
        return TowerElement(result)

    def multiply_by_generator(self, a: TowerElement) -> TowerElement:
        level = self._level(a)
        return TowerElement(self._times_generator(a.bits, level))

    def is_irreducible(self, level: int) -> bool:
        """Whether X^2 + c_level X + 1 has no root in T_{level-1}."""
        if not 1 <= level <= self.config.max_level:
            raise UnsupportedLevelError(level, self.config.max_level)
        c = self._constants[level]
        one = BitVector.one(c.length)
        for root in TowerElement.elements(level - 1):
            r = root.bits
            value = self._multiply(r, r, level - 1) ^ self._multiply(c, r, level - 1)
            if value == one:
                logger.debug("T%d: %s is a root of the defining polynomial", level, r)
                return False
        return True

    def _multiply(self, a: BitVector, b: BitVector, level: int) -> BitVector:
        if level == 0:
            return base_field.multiply(a, b)
        a1, a0 = a.split()
        b1, b0 = b.split()
        p11 = self._multiply(a1, b1, level - 1)
        p10 = self._multiply(a1, b0, level - 1)
        p01 = self._multiply(a0, b1, level - 1)
        p00 = self._multiply(a0, b0, level - 1)
        # X^2 = c X + 1
        hi = p10 ^ p01 ^ self._scale(p11, level)
        lo = p00 ^ p11
        return BitVector.join(hi, lo)

    def _invert(self, a: BitVector, level: int) -> BitVector:
        # Fan & Paar, "On Efficient Inversion in Tower Fields of Characteristic
        # Two" (1997): (a1 X + a0)^-1 = (a1 X + a0 + c a1) / N(a)
        if level == 0:
            return base_field.invert(a)
        a1, a0 = a.split()
        t = a0 ^ self._scale(a1, level)
        norm = self._multiply(a0, t, level - 1) ^ self._multiply(a1, a1, level - 1)
        # a zero norm for nonzero a means c_level does not give a field; the
        # error from T0 propagates unchanged
        norm_inv = self._invert(norm, level - 1)
        return BitVector.join(
            self._multiply(norm_inv, a1, level - 1),
            self._multiply(norm_inv, t, level - 1),
        )

    def _scale(self, x: BitVector, level: int) -> BitVector:
        """c_level * x for x in T_{level-1}."""
        if level in self._canonical:
            return self._times_generator(x, level - 1)
        return self._multiply(self._constants[level], x, level - 1)

    def _times_generator(self, x: BitVector, level: int) -> BitVector:
        # X (x1 X + x0) = (x0 + c x1) X + x1
        if level == 0:
            return x
        x1, x0 = x.split()
        return BitVector.join(x0 ^ self._scale(x1, level), x1)


DEFAULT_OPS = FieldOps()
