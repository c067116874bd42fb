from typing import List, Optional
import sys
from io import StringIO
from rich.markup import escape


class HexOutput:
    """
    Destination for assembled hex and diagnostics.
    >>> o = HexOutput()
    >>> o.write(["60", "01"])
    6001
    >>> o = HexOutput(capture_output=True)
    >>> o.write(["50"])
    >>> o.output_buffer
    ['50']
    """
    def __init__(self, app: Optional[object] = None, capture_output: bool = False) -> None:
        """
        :param app: Optional Textual app that receives output through write_output.
        :param capture_output: If True, keep hex lines in output_buffer and errors in error_buffer.
        """
        self.app = app
        self.capture_output = capture_output
        self.output_buffer: Optional[List[str]] = [] if capture_output else None
        self.error_buffer: Optional[List[str]] = [] if capture_output else None

    def write(self, codes: List[str]) -> None:
        """
        Join codes without separators and emit them as a single line.
        >>> from unittest.mock import Mock
        >>> app = Mock()
        >>> HexOutput(app=app).write(["60", "2a", "f3"])
        >>> app.write_output.assert_called_with('602af3')
        """
        line = "".join(codes)
        if self.capture_output:
            self.output_buffer.append(line)
        elif self.app:
            self.app.write_output(escape(line))
        else:
            print(line, flush=True)

    def error(self, message: str) -> None:
        """
        Emit a diagnostic to stderr, the Textual app, or error_buffer.
        >>> o = HexOutput()
        >>> old_stderr = sys.stderr
        >>> sys.stderr = StringIO()
        >>> o.error("boom")
        >>> sys.stderr.getvalue()
        'error: boom\\n'
        >>> sys.stderr = old_stderr
        >>> o = HexOutput(capture_output=True)
        >>> o.error("boom")
        >>> o.error_buffer
        ['boom']
        """
        if self.capture_output:
            self.error_buffer.append(message)
        elif self.app:
            self.app.write_output(f"[red]Error: {escape(message)}[/red]")
        else:
            print(f"error: {message}", flush=True, file=sys.stderr)
