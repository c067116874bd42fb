# evmasm/asm.py
from typing import List

from .emitter import emit
from .lexer import lex


def assemble(source: str) -> List[str]:
    """
    Assemble source text into one hex string per opcode or operand.
    >>> assemble("PUSH1 0x80 PUSH1 0x40 MSTORE")
    ['60', '80', '60', '40', '52']
    """
    return emit(lex(source))


def assemble_hex(source: str) -> str:
    """
    >>> assemble_hex("push1 2a\\nreturn")
    '602af3'
    """
    return "".join(assemble(source))
