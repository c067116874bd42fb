from typing import Optional


class AssemblyError(Exception):
    """Base class for every condition that aborts a translation."""

    def __init__(self, message: str, *, line: Optional[int] = None, col: Optional[int] = None) -> None:
        self.line = line
        self.col = col
        prefix = ""
        if line is not None and col is not None:
            prefix = f"line {line} col {col}: "
        super().__init__(prefix + str(message))


class MissingOperandError(AssemblyError):
    """An operand-carrying instruction ran into the end of input."""


class MalformedOperandError(AssemblyError):
    """The operand slot held a recognized instruction instead of a literal."""


class SourceReadError(AssemblyError):
    """The source file could not be read as UTF-8 text."""
