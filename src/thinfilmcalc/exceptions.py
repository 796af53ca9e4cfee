"""
Error Types
===========
Exceptions raised by the library store, the IO layer and the console.

Fatal errors carry the process exit status so that only ``main()`` decides
when to terminate. Everything else is recoverable by the workflow.
"""
from __future__ import annotations

from typing import Optional

from thinfilmcalc.config import EXIT_LOAD_FAILURE


class ThinFilmCalcError(Exception):
    """Base class for all errors raised by this package."""


class FileOpenError(ThinFilmCalcError):
    """A library or results file could not be opened. Fatal."""

    def __init__(self, message: str, path: Optional[str] = None, exit_code: int = EXIT_LOAD_FAILURE) -> None:
        super().__init__(message)
        self.path = path
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.args[0] if self.args else "File failed to open."


class InvalidIndexError(ThinFilmCalcError, IndexError):
    """A library position outside the current range was requested."""

    def __init__(self, position: int, size: int) -> None:
        self.position = position
        self.size = size
        if size == 0:
            message = "The thin film library is empty."
        else:
            message = f"Position {position} is out of range (1-{size})."
        super().__init__(message)


class MalformedInputError(ThinFilmCalcError, ValueError):
    """Text typed by the user is not a finite number."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"'{text}' is not a valid number.")


class BlankNameError(ThinFilmCalcError, ValueError):
    """A material without a name cannot be written as a library record."""

    def __init__(self) -> None:
        super().__init__("A thin film needs a non-blank name to be stored in the library.")
