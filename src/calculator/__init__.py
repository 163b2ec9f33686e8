from .expression import ExpressionError, ExpressionParser, evaluate
from .render import monomial, render
from .repl import BANNER, Session
