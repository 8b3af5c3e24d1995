"""Error types that carry a business error code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Errno(Exception):
    """An error code with a user-facing message."""

    code: int
    message: str

    def __str__(self) -> str:
        return self.message


class Err(Exception):
    """An error code and message wrapping an underlying error."""

    def __init__(self, code: int, message: str, err: Optional[BaseException] = None) -> None:
        super().__init__(code, message, err)
        self.code = code
        self.message = message
        self.err = err

    def add(self, message: str) -> "Err":
        """Append ``message`` to the error message and return the error."""
        self.message += " " + message
        return self

    def addf(self, format: str, *args: Any) -> "Err":
        """Append a %-formatted message to the error message and return the error."""
        text = format % args if args else format
        self.message += " " + text
        return self

    def __str__(self) -> str:
        inner = "<nil>" if self.err is None else str(self.err)
        return f"Err - code: {self.code}, message: {self.message}, error: {inner}"

    def __repr__(self) -> str:
        return f"Err(code={self.code!r}, message={self.message!r}, err={self.err!r})"


def new(errno: Errno, err: Optional[BaseException]) -> Err:
    """Create an Err from ``errno`` wrapping ``err``."""
    return Err(errno.code, errno.message, err)