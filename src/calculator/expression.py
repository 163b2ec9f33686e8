from collections.abc import Callable

from tower import FieldOps, TowerElement, TowerError, parse


class ExpressionError(TowerError, ValueError):
    pass


class ExpressionParser:
    """Recursive-descent evaluator for calculator input.

    expression = term { '+' term }
    term       = factor { ('*' | '/') factor }
    factor     = bitstring | '_' | '(' expression ')'

    Operands of different levels are lifted into the larger field first.
    """

    def __init__(
        self,
        text: str,
        ops: FieldOps,
        previous: TowerElement | None = None,
    ):
        self.text = text
        self.pos = 0
        self.ops = ops
        self.previous = previous

    def evaluate(self) -> TowerElement:
        value = self._expression()
        if self._peek() is not None:
            raise ExpressionError(f"Unexpected character at position {self.pos + 1}")
        return value

    def _expression(self) -> TowerElement:
        value = self._term()
        while self._peek() == "+":
            self.pos += 1
            value = self._apply(self.ops.add, value, self._term())
        return value

    def _term(self) -> TowerElement:
        value = self._factor()
        while True:
            ch = self._peek()
            if ch == "*":
                self.pos += 1
                value = self._apply(self.ops.multiply, value, self._factor())
            elif ch == "/":
                self.pos += 1
                value = self._apply(self.ops.divide, value, self._factor())
            else:
                return value

    def _factor(self) -> TowerElement:
        ch = self._peek()
        if ch is None:
            raise ExpressionError("Unexpected end of input")
        if ch == "(":
            self.pos += 1
            inner = self._expression()
            if self._peek() != ")":
                raise ExpressionError("Expected ')'")
            self.pos += 1
            return inner
        if ch == "_":
            self.pos += 1
            if self.previous is None:
                raise ExpressionError("No previous result available")
            return self.previous
        if ch in "01":
            start = self.pos
            while self.pos < len(self.text) and self.text[self.pos] in "01":
                self.pos += 1
            return parse(self.text[start : self.pos])
        raise ExpressionError(f"Unexpected character {ch!r}")

    def _peek(self) -> str | None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    @staticmethod
    def _apply(
        op: Callable[[TowerElement, TowerElement], TowerElement],
        lhs: TowerElement,
        rhs: TowerElement,
    ) -> TowerElement:
        level = max(lhs.level, rhs.level)
        return op(lhs.lift(level), rhs.lift(level))


def evaluate(
    text: str, ops: FieldOps, previous: TowerElement | None = None
) -> TowerElement:
    return ExpressionParser(text, ops, previous).evaluate()
