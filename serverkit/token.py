"""Signing and parsing of HMAC JSON web tokens."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

import jwt

_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
_LIFETIME_SECONDS = 100000 * 3600


class MissingHeaderError(ValueError):
    """Raised when the Authorization header is empty."""

    def __init__(self) -> None:
        super().__init__("the length of the `Authorization` header is zero")


@dataclass
class _Config:
    key: str
    identity_key: str


_config = _Config(key="secret", identity_key="identityKey")
_init_lock = threading.Lock()
_initialized = False


def init(key: str, identity_key: str) -> None:
    """Set the signing key and identity claim name; only the first call has effect."""
    global _initialized
    with _init_lock:
        if _initialized:
            return
        _initialized = True
        if key:
            _config.key = key
        if identity_key:
            _config.identity_key = identity_key


def sign(identity_key: str) -> str:
    """Return a token carrying ``identity_key``, signed with the configured key."""
    now = int(time.time())
    claims = {
        _config.identity_key: identity_key,
        "nbf": now,
        "iat": now,
        "exp": now + _LIFETIME_SECONDS,
    }
    return jwt.encode(claims, _config.key, algorithm="HS256")


def parse(token_string: str, secret: str) -> str:
    """Validate ``token_string`` with ``secret`` and return its identity claim."""
    claims = jwt.decode(token_string, secret, algorithms=_HMAC_ALGORITHMS)
    identity = claims.get(_config.identity_key)
    if not isinstance(identity, str):
        raise jwt.InvalidTokenError(
            f"token has no string claim {_config.identity_key!r}"
        )
    return identity


def parse_request(header: str) -> str:
    """Parse a ``Bearer`` Authorization header value and return its identity."""
    if not header:
        raise MissingHeaderError()
    parts = header.split()
    token_string = parts[1] if len(parts) >= 2 and parts[0] == "Bearer" else ""
    return parse(token_string, _config.key)