from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

# Signed 64-bit range; every literal and intermediate value must fit
INT_MIN = -2**63
INT_MAX = 2**63 - 1

class TokenId(Enum):
    NUMBER = auto()
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()

@dataclass(frozen=True)
class Token:
    token_id: TokenId
    text: str
    value: int|None = None

    def __repr__(self) -> str:
        if self.token_id == TokenId.NUMBER:
            return f'Token({self.token_id.name}, {self.value})'
        return f'Token({self.token_id.name})'

    def __str__(self) -> str:
        return f'({self.token_id.name}, {self.text!r})'

class Operator(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @property
    def symbol(self) -> str:
        return self.value

token_to_op = {
    TokenId.OP_PLUS: Operator.ADD,
    TokenId.OP_MINUS: Operator.SUBTRACT,
    TokenId.OP_MUL: Operator.MULTIPLY,
    TokenId.OP_DIV: Operator.DIVIDE,
}

@dataclass(frozen=True)
class Number:
    value: int

    def __str__(self, level=0) -> str:
        return dump_tree(self, level)

@dataclass(frozen=True)
class BinaryOp:
    op: Operator
    left: AstNode
    right: AstNode

    def __str__(self, level=0) -> str:
        return dump_tree(self, level)

AstNode = Union[Number, BinaryOp]

def dump_tree(tree: AstNode, level=0) -> str:
    """Renders `tree` one node per line, children indented one tab deeper.
    Iterative, since a chain of n operators nests n levels deep.
    """
    lines = []
    stack = [(tree, level)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, Number):
            lines.append("\t" * depth + str(node.value) + "\n")
        else:
            lines.append("\t" * depth + node.op.symbol + "\n")
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))
    return "".join(lines)
