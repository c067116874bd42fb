from typing import List
import logging
import re

from .opcodes import Token, resolve


logger = logging.getLogger(__name__)

WORD = re.compile(r"\S+")


def lex(source: str) -> List[Token]:
    """
    Split source text on whitespace and resolve every word, in order.
    Line breaks carry no meaning; they are only recorded for diagnostics.
    >>> [str(t) for t in lex("PUSH1 0x01\\n\\tpop")]
    ['PUSH1', "'0x01'", 'POP']
    >>> lex("   ")
    []
    >>> t = lex("add\\n  mload")[1]
    >>> t.encoding, t.line, t.col
    ('51', 2, 3)
    """
    tokens: List[Token] = []
    for lineno, line in enumerate(source.splitlines(), start=1):
        for match in WORD.finditer(line):
            instruction, encoding = resolve(match.group())
            tokens.append(Token(instruction, encoding, lineno, match.start() + 1))
    logger.debug(f"Lexed {len(tokens)} tokens")
    return tokens
