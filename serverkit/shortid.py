"""Short, year-prefixed random identifiers."""

from __future__ import annotations

import datetime
import secrets
import string

_ALPHABET = string.ascii_lowercase + string.digits
_RANDOM_LENGTH = 6


def gen_short_id() -> str:
    """Return a lower-case id: the current year followed by random characters."""
    year = datetime.date.today().year
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_RANDOM_LENGTH))
    return f"{year}{suffix}".lower()