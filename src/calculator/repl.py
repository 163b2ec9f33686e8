import logging
import sys
from typing import TextIO

from tower import FieldOps, TowerElement, TowerError, format_element

from .expression import evaluate
from .render import render

logger = logging.getLogger(__name__)

BANNER = """\
Bitstrings represent elements of the Wiedemann tower and must be length a power of 2.
Examples:
T1: 00 = 0, 10 = 1, 01 = X0, 11 = 1 + X0
T2: 0000 = 0, 1000 = 1, .., 1010 = 1 + X1, .., 1001 = 1 + X0X1
Enter expressions using 0/1, '*', '/', '+', '()', and '_' for the previous result.
Type 'exit' or press Ctrl+D to quit.
"""


class Session:

    def __init__(self, ops: FieldOps, show_monomials: bool = False):
        self.ops = ops
        self.show_monomials = show_monomials
        self.previous: TowerElement | None = None

    def evaluate_line(self, line: str) -> str:
        result = evaluate(line, self.ops, self.previous)
        self.previous = result
        out = "=" + format_element(result)
        if self.show_monomials:
            out += "  (" + render(result) + ")"
        return out

    def run(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        stderr = stderr or sys.stderr
        print(BANNER, file=stdout)
        for line in stdin:
            line = line.strip()
            if not line:
                continue
            if line.lower() == "exit":
                break
            try:
                print(self.evaluate_line(line), file=stdout)
            except TowerError as e:
                logger.debug("rejected %r: %r", line, e)
                print(f"Error: {e}", file=stderr)
        print("Goodbye!", file=stdout)
