from __future__ import annotations

from pathlib import Path
from unittest.mock import Mock

import pytest

from evmasm.asm import assemble, assemble_hex
from evmasm.assembler import Assembler
from evmasm.errors import MalformedOperandError, MissingOperandError, SourceReadError


def test_assemble_pipeline() -> None:
    assert assemble("PUSH1 0x2a PUSH1 0x00 MSTORE") == ["60", "2a", "60", "00", "52"]
    assert assemble_hex("PUSH1 0x2a PUSH1 0x00 MSTORE") == "602a600052"
    assert assemble("") == []


def test_load_writes_one_line_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    Assembler().load("push1 0x01\npop")
    assert capsys.readouterr().out == "600150\n"


def test_failed_load_keeps_previous_state() -> None:
    a = Assembler(capture_output=True)
    a.load("pop")
    with pytest.raises(MissingOperandError):
        a.load("dup1 push1")
    assert a.codes == ["50"]
    assert a.output.output_buffer == ["50"]


def test_load_notifies_app() -> None:
    app = Mock()
    a = Assembler(app=app)
    a.load("stop")
    app.write_output.assert_called_with("00")
    app.update_repr.assert_called_once()


def test_load_file(tmp_path: Path) -> None:
    p = tmp_path / "prog.asm"
    p.write_text("PUSH1 0x80\nPUSH1 0x40\nMSTORE\n", encoding="utf-8")
    assert Assembler(capture_output=True).load_file(str(p)) == ["60", "80", "60", "40", "52"]


def test_load_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError) as exc:
        Assembler(capture_output=True).load_file(str(tmp_path / "nope.asm"))
    assert isinstance(exc.value.__cause__, OSError)


def test_load_file_not_utf8(tmp_path: Path) -> None:
    p = tmp_path / "bad.asm"
    p.write_bytes(b"PUSH1 \xff\xfe")
    with pytest.raises(SourceReadError) as exc:
        Assembler(capture_output=True).load_file(str(p))
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_listing_and_repr() -> None:
    a = Assembler(capture_output=True)
    assert repr(a) == "<empty>"
    a.load("pop\n  0x01")
    lines = a.listing().splitlines()
    assert lines[0].split() == ["0000", "POP", "50", "1:1"]
    assert lines[1].split() == ["0001", "'0x01'", "--", "2:3"]


def test_malformed_operand_surfaces_from_session() -> None:
    with pytest.raises(MalformedOperandError):
        Assembler(capture_output=True).load("PUSH1 create")
