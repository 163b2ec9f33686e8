import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .bit_vector import BitVector
from .element import TowerElement
from .errors import ShapeError

logger = logging.getLogger(__name__)

DEFAULT_MAX_LEVEL = 7


def wiedemann_constant(level: int) -> TowerElement:
    """c_k for the extension T_{k-1} -> T_k, where X_{k-1}^2 = c_k X_{k-1} + 1.

    c_1 is the unit of T0 and every later c_k is X_{k-2}, the newest generator
    of T_{k-1}.
    """
    assert level >= 1
    return TowerElement.generator(level - 1)


@dataclass(frozen=True)
class TowerConfig:
    max_level: int = DEFAULT_MAX_LEVEL
    constants: Mapping[int, TowerElement] = field(default=None)

    def __post_init__(self):
        if self.max_level < 0:
            raise ShapeError(f"max_level must be non-negative, got {self.max_level}")
        constants = self.constants
        if constants is None:
            constants = {
                k: wiedemann_constant(k) for k in range(1, self.max_level + 1)
            }
        checked = {}
        for k in range(1, self.max_level + 1):
            if k not in constants:
                raise ShapeError(f"missing extension constant for level {k}")
            c = constants[k]
            if c.level != k - 1:
                raise ShapeError(
                    f"extension constant for level {k} must lie in T{k - 1}, "
                    f"got an element of T{c.level}"
                )
            checked[k] = c
        object.__setattr__(self, "constants", MappingProxyType(checked))
        logger.debug("tower configured up to T%d", self.max_level)

    @classmethod
    def default(cls, max_level: int = DEFAULT_MAX_LEVEL) -> "TowerConfig":
        return cls(max_level)

    @classmethod
    def from_dict(cls, options: Mapping) -> "TowerConfig":
        unknown = set(options) - {"max_level", "constants"}
        if unknown:
            raise ShapeError(f"unknown tower options: {sorted(unknown)}")
        max_level = int(options.get("max_level", DEFAULT_MAX_LEVEL))
        constants = options.get("constants")
        if constants is not None:
            constants = {
                int(k): (
                    v
                    if isinstance(v, TowerElement)
                    else TowerElement(BitVector.from_bitstring(v))
                )
                for k, v in constants.items()
            }
        return cls(max_level, constants)

    def constant(self, level: int) -> TowerElement:
        return self.constants[level]

    def is_canonical(self, level: int) -> bool:
        return self.constants[level] == wiedemann_constant(level)
