"""Errors raised by the lexer, the parser and the interpreter.

Every stage raises its own kind and lets it propagate untouched; only the
driver turns an `ArithError` into a message and an exit status.
"""

from __future__ import annotations
from arith.frontend.utils import Token, Operator

class ArithError(Exception):
    pass

class LexError(ArithError):
    pass

class ParseError(ArithError):
    pass

class EvalError(ArithError):
    pass

class UnrecognisedCharacter(LexError):
    def __init__(self, ch: str) -> None:
        super().__init__(f'unrecognised character {ch!r}')
        self.ch = ch

class NumberOverflow(LexError):
    def __init__(self, text: str) -> None:
        super().__init__(f'number {text} does not fit in a 64-bit integer')
        self.text = text

class ExpectedNumber(ParseError):
    def __init__(self, found: Token|None) -> None:
        what = 'end of input' if found is None else f'{found.text!r}'
        super().__init__(f'expected a number, but found {what}')
        self.found = found

    @property
    def at_end(self) -> bool:
        return self.found is None

class UnexpectedToken(ParseError):
    def __init__(self, found: Token) -> None:
        super().__init__(f'unexpected {found.text!r} after complete expression')
        self.found = found

class DivideByZero(EvalError):
    def __init__(self) -> None:
        super().__init__('division by zero')

class Overflow(EvalError):
    def __init__(self, op: Operator, left: int, right: int) -> None:
        super().__init__(f'integer overflow in {left} {op.symbol} {right}')
        self.op = op
        self.left = left
        self.right = right
