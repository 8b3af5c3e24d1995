"""Small helpers for strings and lists of strings."""

from __future__ import annotations

import base64
from typing import Iterable


def diff(base: Iterable[str], exclude: Iterable[str]) -> list[str]:
    """Return the items of ``base`` that are not in ``exclude``, in order."""
    excluded = set(exclude)
    return [s for s in base if s not in excluded]


def unique(ss: Iterable[str]) -> list[str]:
    """Return the distinct items of ``ss``, keeping first-seen order."""
    return list(dict.fromkeys(ss))


def camel_case_to_underscore(s: str) -> str:
    """Convert ``CamelCase`` to ``camel_case``; digits stay in their segment."""
    segments: list[str] = []
    segment: list[str] = []
    for c in s:
        if not c.islower() and c != "_" and not c.isnumeric():
            if segment:
                segments.append("".join(segment))
            segment = []
        segment.append(c.lower())
    if segment:
        segments.append("".join(segment))
    return "_".join(segments)


def _is_separator(c: str) -> bool:
    if c.isalnum() or c == "_":
        return False
    if c.isascii():
        return True
    return c.isspace()


def underscore_to_camel_case(s: str) -> str:
    """Convert ``under_score`` to ``UnderScore``."""
    words = s.lower().replace("_", " ")
    out: list[str] = []
    previous_separates = True
    for c in words:
        out.append(c.upper() if previous_separates else c)
        previous_separates = _is_separator(c)
    return "".join(out).replace(" ", "")


def find_string(array: Iterable[str], s: str) -> int:
    """Return the index of ``s`` in ``array``, or -1."""
    return next((index for index, item in enumerate(array) if item == s), -1)


def string_in(s: str, array: Iterable[str]) -> bool:
    """Return whether ``s`` is in ``array``."""
    return find_string(array, s) > -1


def reverse(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def decode_base64(s: str) -> bytes:
    """Decode standard, padded base64; line breaks are ignored."""
    cleaned = s.replace("\r", "").replace("\n", "")
    return base64.b64decode(cleaned, validate=True)