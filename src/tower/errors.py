class TowerError(Exception):
    pass


class ShapeError(TowerError, ValueError):
    pass


class UnsupportedLevelError(ShapeError):

    def __init__(self, level: int, max_level: int):
        super().__init__(
            f"tower level {level} exceeds the configured maximum {max_level}"
        )
        self.level = level
        self.max_level = max_level


class LevelMismatchError(TowerError, ValueError):

    def __init__(self, left: int, right: int):
        super().__init__(f"operands live in T{left} and T{right}")
        self.left = left
        self.right = right


class DivisionByZeroError(TowerError, ZeroDivisionError):
    pass


class BitstringSyntaxError(TowerError, ValueError):
    pass
