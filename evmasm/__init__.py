# evmasm/__init__.py
from .opcodes import Op, Literal, Token, MNEMONICS, resolve, is_operand_carrying
from .lexer import lex
from .emitter import Emitter, State, emit
from .asm import assemble, assemble_hex
from .assembler import Assembler
from .errors import AssemblyError, MissingOperandError, MalformedOperandError, SourceReadError

__version__ = "0.1.0"
