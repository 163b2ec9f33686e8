from .errors import (
    TowerError,
    ShapeError,
    UnsupportedLevelError,
    LevelMismatchError,
    DivisionByZeroError,
    BitstringSyntaxError,
)
from .bit_vector import BitVector, is_power_of_two, log2
from .element import TowerElement
from .config import TowerConfig, DEFAULT_MAX_LEVEL, wiedemann_constant
from .field_ops import FieldOps, DEFAULT_OPS
from .bitstrings import parse, format_element
from . import base_field
