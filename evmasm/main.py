import logging
from rich.markup import escape
from textual.app import App, ComposeResult
from textual.widgets import RichLog, Input, Static, Footer
from .assembler import Assembler
from .config import configure_logging, load_settings
from .errors import AssemblyError


logger = logging.getLogger(__name__)

class AsmApp(App):
    CSS = """
    RichLog#output {
        height: 60%;
        border: tall white;
        margin: 1;
        background: black;
        min-height: 10;
    }
    Input {
        height: 10%;
        margin: 1;
        &:focus {
            border: heavy green;
        }
    }
    Static#repr {
        height: 25%;
        border: round green;
        padding: 1;
        background: darkblue;
        min-height: 4;
    }
    Footer {
        height: 5%;
    }
    """

    BINDINGS = [("escape", "quit", "Quit")]

    def compose(self) -> ComposeResult:
        yield RichLog(id="output", markup=True)
        yield Input(placeholder="Enter assembly, e.g. PUSH1 0x2a PUSH1 0x00 MSTORE")
        yield Static(id="repr", classes="repr", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        logger.info("TUI starting...")
        self.assembler = Assembler(app=self)
        self.query_one(Input).focus()
        logger.debug("Input widget focused")
        self.update_repr()

    def write_output(self, text: str) -> None:
        logger.debug(f"Writing to RichLog: {text}")
        self.query_one(RichLog).write(text)

    def update_repr(self) -> None:
        self.query_one("#repr", Static).update(repr(self.assembler))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        source = event.value
        logger.debug(f"Input submitted: {source}")
        self.write_output(f"> {escape(source)}")
        try:
            self.assembler.load(source)
        except AssemblyError as exc:
            logger.warning(f"Assembly failed: {exc}")
            self.assembler.output.error(str(exc))
        event.input.value = ""
        self.query_one(Input).focus()


def run() -> None:
    settings = load_settings()
    # Keep the terminal clean for the UI: log to a file only.
    configure_logging(settings.log_level, settings.log_file or 'tui_debug.log', stream=False)
    AsmApp().run()


if __name__ == "__main__":
    run()
