from __future__ import annotations

from evmasm.lexer import lex
from evmasm.opcodes import Literal, Op


def _kinds(src: str) -> list[tuple[object, object]]:
    return [(t.instruction, t.encoding) for t in lex(src)]


def test_tokens_basic() -> None:
    assert _kinds("PUSH1 0x01 pop") == [
        (Op.PUSH1, "60"),
        (Literal("0x01"), None),
        (Op.POP, "50"),
    ]


def test_whitespace_and_line_breaks_do_not_matter() -> None:
    flat = _kinds("push1 2a dup1 swap1 mstore")
    spread = _kinds("  PUSH1\t2a\n\nDup1\r\n   SWAP1   \n\tMStore\n")
    assert flat == spread


def test_tokens_locations() -> None:
    toks = lex("PUSH1 0x01\n  mstore\n")
    mstore = toks[-1]
    assert (mstore.line, mstore.col) == (2, 3)
    assert (toks[1].line, toks[1].col) == (1, 7)


def test_empty_input() -> None:
    assert lex("") == []
    assert lex(" \n\t \n") == []


def test_no_token_dropped() -> None:
    assert len(lex("a b c\nd\te")) == 5


def test_relexing_is_deterministic() -> None:
    src = "PUSH1 0x80 PUSH1 0x40 MSTORE\nfoo CREATE"
    assert lex(src) == lex(src)
