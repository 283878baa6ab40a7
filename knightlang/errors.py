"""Error type and diagnostic output for the interpreter."""

from __future__ import annotations

import sys
from typing import TextIO


class KnightError(Exception):
    """Raised when a program cannot be read, lexed, parsed or evaluated."""


class Reporter:
    """Writes prefixed diagnostic lines; debug, info and warn only when verbose."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The stream written to; standard error unless another was given."""
        return self._stream if self._stream is not None else sys.stderr

    def _write(self, prefix: str, message: str) -> None:
        print(f"{prefix} {message}", file=self.stream)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._write("[DEBUG]", message)

    def info(self, message: str) -> None:
        if self.verbose:
            self._write("[INFO]", message)

    def warn(self, message: str) -> None:
        if self.verbose:
            self._write("[WARN]", message)

    def error(self, message: str) -> None:
        self._write("[ERROR]", message)