from __future__ import annotations

import asyncio

from textual.widgets import Input

from evmasm.main import AsmApp


def _submit(source: str) -> AsmApp:
    async def scenario() -> AsmApp:
        app = AsmApp()
        async with app.run_test() as pilot:
            app.query_one(Input).value = source
            await pilot.press("enter")
            await pilot.pause()
        return app

    return asyncio.run(scenario())


def test_submitted_source_is_assembled() -> None:
    app = _submit("PUSH1 0x2a RETURN")
    assert app.assembler.codes == ["60", "2a", "f3"]
    assert len(app.assembler.tokens) == 3


def test_submitted_error_keeps_app_running() -> None:
    app = _submit("PUSH1")
    assert app.assembler.codes == []


def test_bracketed_literal_is_written_as_plain_text() -> None:
    app = _submit("[/x] pop")
    assert app.assembler.codes == ["[/x]", "50"]
