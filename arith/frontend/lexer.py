from __future__ import annotations
from typing import List
import logging
import re

from arith.frontend.utils import Token, TokenId, INT_MAX
from arith.frontend.errors import UnrecognisedCharacter, NumberOverflow

logger = logging.getLogger(__name__)

# Unicode White_Space only; \s would also accept the separators \x1c-\x1f
_whitespace = r'\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000'

# Longest run of significant digits that can still fit in 64 bits
_max_digits = len(str(INT_MAX))

_token_map = {
    re.compile(f'[{_whitespace}]+'): None,
    re.compile(r'[0-9]+'): TokenId.NUMBER,
    re.compile(r'\+'): TokenId.OP_PLUS,
    re.compile(r'-'): TokenId.OP_MINUS,
    re.compile(r'\*'): TokenId.OP_MUL,
    re.compile(r'/'): TokenId.OP_DIV,
}

def make_token(token_id: TokenId, text: str) -> Token:
    if token_id != TokenId.NUMBER:
        return Token(token_id, text)
    digits = text.lstrip('0') or '0'
    if len(digits) > _max_digits:
        raise NumberOverflow(text)
    value = int(digits)
    if value > INT_MAX:
        raise NumberOverflow(text)
    return Token(token_id, text, value)

def tokenize(src: str, token_map=_token_map) -> List[Token]:
    """Splits `src` into tokens, skipping whitespace.
    Raises on the first character no pattern accepts; nothing is returned in
    that case.
    """
    parts = []
    pos = 0
    while pos < len(src):
        for pattern, token_id in token_map.items():
            if (m := pattern.match(src, pos)):
                if token_id:
                    parts.append(make_token(token_id, m[0]))
                pos = m.end()
                break
        else:
            raise UnrecognisedCharacter(src[pos])
    logger.debug('tokenized %r into %d tokens', src, len(parts))
    return parts
