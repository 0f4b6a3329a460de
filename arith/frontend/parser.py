from __future__ import annotations
from typing import List
import logging

from arith.frontend.utils import Token, TokenId, AstNode, Number, BinaryOp, token_to_op
from arith.frontend.errors import ExpectedNumber, UnexpectedToken

logger = logging.getLogger(__name__)

# Grammar:
# expression = term, { add_op, term } ;
# term       = factor, { mul_op, factor } ;
# factor     = number ;
# add_op     = "+" | "-" ;
# mul_op     = "*" | "/" ;
# number     = digit, { digit } ;
# digit      = ? regex [0-9] ? ;

add_ops = [TokenId.OP_PLUS, TokenId.OP_MINUS]
mul_ops = [TokenId.OP_MUL, TokenId.OP_DIV]

class Parser:
    def __init__(self, tokens: List[Token]) -> None:
        self.tokens = tokens
        self.pos = 0

    def look(self) -> TokenId|None:
        return self.tokens[self.pos].token_id if self.pos < len(self.tokens) else None

    def next(self) -> Token|None:
        if self.pos >= len(self.tokens):
            return None
        self.pos += 1
        return self.tokens[self.pos - 1]

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def parse_expr(self) -> AstNode:
        tree = self.parse_term()
        while self.look() in add_ops:
            op = token_to_op[self.next().token_id]
            rhs = self.parse_term()
            tree = BinaryOp(op, tree, rhs)
        return tree

    def parse_term(self) -> AstNode:
        tree = self.parse_factor()
        while self.look() in mul_ops:
            op = token_to_op[self.next().token_id]
            rhs = self.parse_factor()
            tree = BinaryOp(op, tree, rhs) # LHS of '*' in a/b*c is a/b
        return tree

    def parse_factor(self) -> AstNode:
        tok = self.next()
        if tok is None or tok.token_id != TokenId.NUMBER:
            raise ExpectedNumber(tok)
        return Number(tok.value)

def parse(tokens: List[Token]) -> AstNode:
    """Parses a whole token list into a single expression tree.
    Tokens left over once the expression is complete are an error.
    """
    parser = Parser(tokens)
    tree = parser.parse_expr()
    if not parser.at_end():
        raise UnexpectedToken(parser.next())
    logger.debug('parsed tree:\n%s', tree)
    return tree
