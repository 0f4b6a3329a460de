from __future__ import annotations
from typing import List, NamedTuple
import logging

from arith.frontend.utils import Token, AstNode
from arith.frontend.lexer import tokenize
from arith.frontend.parser import parse
from arith.interpreter import evaluate

logger = logging.getLogger(__name__)

class Pipeline(NamedTuple):
    tokens: List[Token]
    tree: AstNode
    result: int

def run_stages(src: str) -> Pipeline:
    """Tokenizes, parses and evaluates `src`, keeping every intermediate stage.
    Any `ArithError` from a stage propagates as is.
    """
    tokens = tokenize(src)
    tree = parse(tokens)
    result = evaluate(tree)
    logger.debug('%r evaluated to %d', src, result)
    return Pipeline(tokens, tree, result)

def run(src: str) -> int:
    return run_stages(src).result

def format_result(src: str, value: int) -> str:
    return f'{src} = {value}'
