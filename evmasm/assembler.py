import logging
from typing import Optional, List
from .errors import SourceReadError
from .lexer import lex
from .emitter import emit
from .opcodes import Token
from .output import HexOutput


logger = logging.getLogger(__name__)

class Assembler:
    """
    Assembly session: runs the pipeline and forwards results to an output sink.
    >>> a = Assembler()
    >>> a.load("PUSH1 0x2a RETURN")
    602af3
    ['60', '2a', 'f3']
    >>> len(a.tokens)
    3
    """
    def __init__(self, app: Optional[object] = None, capture_output: bool = False) -> None:
        """
        :param app: Optional Textual app notified after each successful load.
        :param capture_output: If True, hex output is kept in output.output_buffer.
        >>> a = Assembler(capture_output=True)
        >>> _ = a.load("pop")
        >>> a.output.output_buffer
        ['50']
        """
        self.app: Optional[object] = app
        self.output: HexOutput = HexOutput(app=app, capture_output=capture_output)
        self.tokens: List[Token] = []
        self.codes: List[str] = []

    def load_file(self, file_path: str) -> List[str]:
        """
        Assemble a UTF-8 source file.
        >>> import tempfile, os
        >>> with tempfile.NamedTemporaryFile("w", suffix=".asm", delete=False) as f:
        ...     _ = f.write("push1 01\\npop\\n")
        >>> Assembler(capture_output=True).load_file(f.name)
        ['60', '01', '50']
        >>> os.unlink(f.name)
        """
        logger.debug(f"Reading source from {file_path}")
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceReadError(f"cannot read {file_path}: {exc}") from exc
        return self.load(source)

    def load(self, source: str) -> List[str]:
        logger.debug(f"Assembling source of length {len(source)}")
        tokens = lex(source)
        codes = emit(tokens)
        self.tokens = tokens
        self.codes = codes
        self.output.write(codes)
        self.update_repr()
        return codes

    def listing(self) -> str:
        """
        >>> a = Assembler(capture_output=True)
        >>> _ = a.load("PUSH1 0xff")
        >>> print(a.listing())
        0000  PUSH1        60  1:1
        0001  '0xff'       --  1:7
        """
        rows = []
        for i, token in enumerate(self.tokens):
            rows.append(f"{i:04x}  {str(token):<11}  {token.encoding or '--'}  {token.line}:{token.col}")
        return "\n".join(rows)

    def update_repr(self) -> None:
        """
        Refresh the attached Textual app, if any.
        >>> a = Assembler()
        >>> a.update_repr()  # No crash if app is None
        """
        if self.app:
            self.app.update_repr()

    def __repr__(self) -> str:
        return self.listing() or "<empty>"
