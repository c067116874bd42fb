from enum import Enum
from typing import List, Optional
import logging

from .errors import MalformedOperandError, MissingOperandError
from .opcodes import Token, is_operand_carrying


logger = logging.getLogger(__name__)

class State(Enum):
    EXPECT_INSTRUCTION = "expect-instruction"
    EXPECT_OPERAND = "expect-operand"


def strip_hex_prefix(text: str) -> str:
    """
    >>> strip_hex_prefix("0x01"), strip_hex_prefix("0X2A"), strip_hex_prefix("2a")
    ('01', '2A', '2a')
    """
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


class Emitter:
    """
    Single pass over a token sequence, turning each token into hex.
    >>> from evmasm.lexer import lex
    >>> Emitter(lex("PUSH1 0x01 DUP1 ADD")).run()
    ['60', '01', '80', '01']
    """
    def __init__(self, tokens: List[Token]) -> None:
        self.tokens: List[Token] = tokens
        self.cursor: int = 0
        self.state: State = State.EXPECT_INSTRUCTION
        self.pending: Optional[Token] = None
        self.out: List[str] = []

    def step(self) -> bool:
        """Consume the token under the cursor. Returns False once input is exhausted."""
        if self.cursor >= len(self.tokens):
            if self.state is State.EXPECT_OPERAND:
                raise MissingOperandError(
                    f"{self.pending} expects an operand but input ended",
                    line=self.pending.line, col=self.pending.col)
            return False
        token = self.tokens[self.cursor]
        self.cursor += 1
        if self.state is State.EXPECT_OPERAND:
            if not token.is_literal:
                raise MalformedOperandError(
                    f"{self.pending} expects a literal operand, got {token}",
                    line=token.line, col=token.col)
            self.out.append(strip_hex_prefix(token.instruction.text))
            self.state = State.EXPECT_INSTRUCTION
            self.pending = None
        elif token.is_literal:
            # standalone literal: raw data spliced into the stream
            self.out.append(strip_hex_prefix(token.instruction.text))
        else:
            self.out.append(token.encoding)
            if is_operand_carrying(token.instruction):
                self.state = State.EXPECT_OPERAND
                self.pending = token
        return True

    def run(self) -> List[str]:
        logger.debug(f"Emitting {len(self.tokens)} tokens")
        while self.step():
            pass
        logger.debug(f"Emitted: {''.join(self.out)}")
        return self.out


def emit(tokens: List[Token]) -> List[str]:
    """
    >>> from evmasm.lexer import lex
    >>> emit(lex("pop dup1 swap1"))
    ['50', '80', '90']
    >>> emit([])
    []
    """
    return Emitter(tokens).run()
