"""Plain data describing the requirements of a field selector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Operator(str, Enum):
    """Operators that relate a field to a value in a requirement."""

    EQUALS = "="
    DOUBLE_EQUALS = "=="
    NOT_EQUALS = "!="

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Requirement:
    """A field, a value and the operator that relates them.

    A list of requirements is the logical AND of all of them.
    """

    operator: Operator
    field: str
    value: str