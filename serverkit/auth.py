"""Password hashing and verification with bcrypt."""

from __future__ import annotations

import bcrypt

DEFAULT_COST = 10


class PasswordMismatchError(ValueError):
    """Raised when a plain text does not match a bcrypt hash."""

    def __init__(self) -> None:
        super().__init__("hashedPassword is not the hash of the given password")


def _hash(plain: str) -> str:
    hashed = bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(rounds=DEFAULT_COST))
    return hashed.decode("ascii")


def encrypt(source: str) -> str:
    """Return the bcrypt hash of ``source``."""
    return _hash(source)


def compare(hashed_password: str, password: str) -> None:
    """Check ``password`` against ``hashed_password``.

    Raises PasswordMismatchError if they differ and ValueError if the
    hash is malformed.
    """
    if not bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8")):
        raise PasswordMismatchError()


def shadow(password: str) -> str:
    """Hash an already hashed password again to expose a fake hash."""
    return _hash(password)