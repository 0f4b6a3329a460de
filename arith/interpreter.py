#!/usr/bin/env python3

from __future__ import annotations
import logging

from arith.frontend.utils import AstNode, Number, Operator, INT_MIN, INT_MAX
from arith.frontend.errors import DivideByZero, Overflow

logger = logging.getLogger(__name__)

def truncating_div(x: int, y: int) -> int:
    """Integer division rounding toward zero, so -7 / 2 is -3 rather than -4."""
    if y == 0:
        raise DivideByZero()
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q

op_map = {
    Operator.ADD: lambda x, y: x + y,
    Operator.SUBTRACT: lambda x, y: x - y,
    Operator.MULTIPLY: lambda x, y: x * y,
    Operator.DIVIDE: truncating_div,
}

def apply_op(op: Operator, lhs: int, rhs: int) -> int:
    result = op_map[op](lhs, rhs)
    if not INT_MIN <= result <= INT_MAX:
        raise Overflow(op, lhs, rhs)
    return result

def evaluate(tree: AstNode) -> int:
    """Evaluates `tree` in post-order: left child, right child, then the operator.
    Walks with an explicit stack so deeply nested chains don't hit the
    recursion limit.
    """
    values = []
    stack = [(tree, False)]
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, Number):
            values.append(node.value)
        elif children_done:
            rhs = values.pop()
            lhs = values.pop()
            values.append(apply_op(node.op, lhs, rhs))
        else:
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
    return values.pop()
