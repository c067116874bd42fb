from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple, Union


class Op(Enum):
    """
    Fixed instruction vocabulary. The value of each member is its one-byte
    opcode as two lowercase hex digits.
    >>> Op.MSTORE.value
    '52'
    >>> Op.CREATE.encoding
    'f0'
    """
    STOP = "00"
    ADD = "01"
    MUL = "02"
    SUB = "03"
    DIV = "04"
    MOD = "06"
    LT = "10"
    GT = "11"
    EQ = "14"
    ISZERO = "15"
    AND = "16"
    OR = "17"
    XOR = "18"
    NOT = "19"
    EXTCODECOPY = "3c"
    POP = "50"
    MLOAD = "51"
    MSTORE = "52"
    PUSH1 = "60"
    DUP1 = "80"
    SWAP1 = "90"
    CREATE = "f0"
    RETURN = "f3"

    @property
    def encoding(self) -> str:
        return self.value

    @property
    def takes_operand(self) -> bool:
        return self in OPERAND_OPS


@dataclass(frozen=True)
class Literal:
    """Any word that is not a known mnemonic, carried through as raw text."""
    text: str


Instruction = Union[Op, Literal]

OPERAND_OPS = frozenset({Op.PUSH1})

# Upper-cased mnemonic -> Op
MNEMONICS = MappingProxyType({op.name: op for op in Op})


@dataclass(frozen=True)
class Token:
    instruction: Instruction
    encoding: Optional[str]
    line: int = 0
    col: int = 0

    @property
    def is_literal(self) -> bool:
        return isinstance(self.instruction, Literal)

    def __str__(self) -> str:
        if isinstance(self.instruction, Literal):
            return f"'{self.instruction.text}'"
        return self.instruction.name


def resolve(word: str) -> Tuple[Instruction, Optional[str]]:
    """
    Resolve a word to its instruction and encoding, ignoring letter case.
    Unknown words become a Literal with no encoding.
    >>> resolve("push1")
    (<Op.PUSH1: '60'>, '60')
    >>> resolve("Swap1")
    (<Op.SWAP1: '90'>, '90')
    >>> resolve("0x2a")
    (Literal(text='0x2a'), None)
    """
    # ASCII only: str.upper() folds some non-ASCII letters onto mnemonic names
    op = MNEMONICS.get(word.upper()) if word.isascii() else None
    if op is None:
        return Literal(word), None
    return op, op.encoding


def is_operand_carrying(instruction: Instruction) -> bool:
    """
    >>> is_operand_carrying(Op.PUSH1), is_operand_carrying(Op.POP)
    (True, False)
    >>> is_operand_carrying(Literal("PUSH1"))
    False
    """
    return isinstance(instruction, Op) and instruction.takes_operand
