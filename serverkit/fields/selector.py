"""A simple field system: parsing and matching selectors against sets of fields."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Mapping, Optional

from serverkit.fields.requirements import Operator, Requirement

TransformFunc = Callable[[str, str], "tuple[str, str]"]


class InvalidEscapeSequence(ValueError):
    """Raised when a selector value holds an unknown escape sequence."""

    def __init__(self, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(f"invalid field selector: invalid escape sequence: {sequence}")


class UnescapedRune(ValueError):
    """Raised when a selector value holds an unescaped ',' or '='."""

    def __init__(self, rune: str) -> None:
        self.rune = rune
        super().__init__(
            f"invalid field selector: unescaped character in value: {ord(rune)}"
        )


class SelectorParseError(ValueError):
    """Raised when a selector term cannot be understood."""

    def __init__(self, selector: str, part: str) -> None:
        self.selector = selector
        self.part = part
        super().__init__(f"invalid selector: '{selector}'; can't understand '{part}'")


def _lookup(fields: Any, field: str) -> str:
    value = fields.get(field)
    return "" if value is None else value


class Selector(ABC):
    """A field selector."""

    @abstractmethod
    def matches(self, fields: Any) -> bool:
        """Return True if this selector matches the given fields."""

    @abstractmethod
    def empty(self) -> bool:
        """Return True if this selector does not restrict the selection space."""

    @abstractmethod
    def requires_exact_match(self, field: str) -> Optional[str]:
        """Return the value the selector requires for ``field``, or None."""

    @abstractmethod
    def transform(self, fn: TransformFunc) -> "Selector":
        """Return a new selector with ``fn`` applied to every term.

        A term whose field and value both become empty is dropped.
        """

    @abstractmethod
    def requirements(self) -> list[Requirement]:
        """Return the requirements this selector is made of."""

    @abstractmethod
    def deep_copy(self) -> "Selector":
        """Return an independent copy of the selector."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the selector in the form parse_selector accepts."""


class NothingSelector(Selector):
    """A selector that matches nothing."""

    def matches(self, fields: Any) -> bool:
        return False

    def empty(self) -> bool:
        return False

    def requires_exact_match(self, field: str) -> Optional[str]:
        return None

    def transform(self, fn: TransformFunc) -> Selector:
        return self

    def requirements(self) -> list[Requirement]:
        return []

    def deep_copy(self) -> Selector:
        return self

    def __str__(self) -> str:
        return ""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NothingSelector)

    def __hash__(self) -> int:
        return hash(NothingSelector)

    def __repr__(self) -> str:
        return "NothingSelector()"


@dataclass(frozen=True)
class HasTerm(Selector):
    """Matches when ``field`` equals ``value``."""

    field: str = ""
    value: str = ""

    def matches(self, fields: Any) -> bool:
        return _lookup(fields, self.field) == self.value

    def empty(self) -> bool:
        return False

    def requires_exact_match(self, field: str) -> Optional[str]:
        return self.value if self.field == field else None

    def transform(self, fn: TransformFunc) -> Selector:
        field, value = fn(self.field, self.value)
        if not field and not value:
            return everything()
        return HasTerm(field, value)

    def requirements(self) -> list[Requirement]:
        return [Requirement(Operator.EQUALS, self.field, self.value)]

    def deep_copy(self) -> Selector:
        return replace(self)

    def __str__(self) -> str:
        return f"{self.field}={escape_value(self.value)}"


@dataclass(frozen=True)
class NotHasTerm(Selector):
    """Matches when ``field`` differs from ``value``."""

    field: str = ""
    value: str = ""

    def matches(self, fields: Any) -> bool:
        return _lookup(fields, self.field) != self.value

    def empty(self) -> bool:
        return False

    def requires_exact_match(self, field: str) -> Optional[str]:
        return None

    def transform(self, fn: TransformFunc) -> Selector:
        field, value = fn(self.field, self.value)
        if not field and not value:
            return everything()
        return NotHasTerm(field, value)

    def requirements(self) -> list[Requirement]:
        return [Requirement(Operator.NOT_EQUALS, self.field, self.value)]

    def deep_copy(self) -> Selector:
        return replace(self)

    def __str__(self) -> str:
        return f"{self.field}!={escape_value(self.value)}"


@dataclass(frozen=True)
class AndTerm(Selector):
    """The logical AND of several selectors."""

    terms: tuple[Selector, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))

    def matches(self, fields: Any) -> bool:
        return all(term.matches(fields) for term in self.terms)

    def empty(self) -> bool:
        return all(term.empty() for term in self.terms)

    def requires_exact_match(self, field: str) -> Optional[str]:
        for term in self.terms:
            value = term.requires_exact_match(field)
            if value is not None:
                return value
        return None

    def transform(self, fn: TransformFunc) -> Selector:
        transformed = (term.transform(fn) for term in self.terms)
        return AndTerm(tuple(term for term in transformed if not term.empty()))

    def requirements(self) -> list[Requirement]:
        return [req for term in self.terms for req in term.requirements()]

    def deep_copy(self) -> Selector:
        return AndTerm(tuple(term.deep_copy() for term in self.terms))

    def __str__(self) -> str:
        return ",".join(str(term) for term in self.terms)


def nothing() -> Selector:
    """Return a selector that matches no fields."""
    return NothingSelector()


def everything() -> Selector:
    """Return a selector that matches all fields."""
    return AndTerm()


def selector_from_set(ls: Optional[Mapping[str, str]]) -> Selector:
    """Return a selector matching exactly the given fields; None means everything."""
    if ls is None:
        return everything()
    items = [HasTerm(field, value) for field, value in ls.items()]
    if len(items) == 1:
        return items[0]
    return AndTerm(tuple(items))


_ESCAPES = str.maketrans({"\\": "\\\\", ",": "\\,", "=": "\\="})


def escape_value(s: str) -> str:
    """Escape a literal string for use as a field selector value."""
    return s.translate(_ESCAPES)


def unescape_value(s: str) -> str:
    """Unescape a field selector value back to its literal form."""
    if not any(c in s for c in "\\,="):
        return s

    out: list[str] = []
    in_slash = False
    for c in s:
        if in_slash:
            if c not in "\\,=":
                raise InvalidEscapeSequence("\\" + c)
            out.append(c)
            in_slash = False
        elif c == "\\":
            in_slash = True
        elif c in ",=":
            raise UnescapedRune(c)
        else:
            out.append(c)

    if in_slash:
        raise InvalidEscapeSequence("\\")
    return "".join(out)


def split_terms(field_selector: str) -> list[str]:
    """Split a selector on unescaped commas, keeping escapes in the terms."""
    if not field_selector:
        return []

    terms: list[str] = []
    start = 0
    in_slash = False
    for i, c in enumerate(field_selector):
        if in_slash:
            in_slash = False
        elif c == "\\":
            in_slash = True
        elif c == ",":
            terms.append(field_selector[start:i])
            start = i + 1
    terms.append(field_selector[start:])
    return terms


_TERM_OPERATORS = (Operator.NOT_EQUALS, Operator.DOUBLE_EQUALS, Operator.EQUALS)


def split_term(term: str) -> Optional[tuple[str, str, str]]:
    """Split a term at its first operator into (lhs, operator, rhs).

    The rhs is returned still escaped. Returns None if no operator is found.
    """
    for i in range(len(term)):
        remaining = term[i:]
        for op in _TERM_OPERATORS:
            if remaining.startswith(op.value):
                return term[:i], op.value, term[i + len(op.value):]
    return None


def _identity(field: str, value: str) -> tuple[str, str]:
    return field, value


def _parse(selector: str, fn: TransformFunc) -> Selector:
    items: list[Selector] = []
    for part in sorted(split_terms(selector)):
        if not part:
            continue
        split = split_term(part)
        if split is None:
            raise SelectorParseError(selector, part)
        lhs, op, rhs = split
        value = unescape_value(rhs)
        if op == Operator.NOT_EQUALS.value:
            items.append(NotHasTerm(lhs, value))
        else:
            items.append(HasTerm(lhs, value))
    if len(items) == 1:
        return items[0].transform(fn)
    return AndTerm(tuple(items)).transform(fn)


def parse_selector(selector: str) -> Selector:
    """Parse a selector string into a selector."""
    return _parse(selector, _identity)


def parse_and_transform_selector(selector: str, fn: TransformFunc) -> Selector:
    """Parse a selector string and run its terms through ``fn``."""
    return _parse(selector, fn)


def one_term_equal_selector(k: str, v: str) -> Selector:
    """Return a selector matching where field ``k`` equals ``v``."""
    return HasTerm(k, v)


def one_term_not_equal_selector(k: str, v: str) -> Selector:
    """Return a selector matching where field ``k`` does not equal ``v``."""
    return NotHasTerm(k, v)


def and_selectors(*args: Selector) -> Selector:
    """Return the logical AND of the given selectors."""
    return AndTerm(tuple(args))


__all__: Iterable[str] = (
    "AndTerm",
    "HasTerm",
    "InvalidEscapeSequence",
    "NotHasTerm",
    "NothingSelector",
    "Selector",
    "SelectorParseError",
    "TransformFunc",
    "UnescapedRune",
    "and_selectors",
    "escape_value",
    "everything",
    "nothing",
    "one_term_equal_selector",
    "one_term_not_equal_selector",
    "parse_and_transform_selector",
    "parse_selector",
    "selector_from_set",
    "split_term",
    "split_terms",
    "unescape_value",
)