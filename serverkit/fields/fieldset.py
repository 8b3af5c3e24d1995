"""A mapping of field names to values that selectors can match against."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Iterator, Union

from serverkit.fields.selector import Selector, selector_from_set


class FieldSet(Mapping):
    """A read-only map of field to value."""

    def __init__(
        self,
        items: Union[Mapping[str, str], Iterable[tuple[str, str]]] = (),
        /,
        **kwargs: str,
    ) -> None:
        self._data: dict[str, str] = dict(items, **kwargs)

    def __getitem__(self, field: str) -> str:
        return self._data[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FieldSet({self._data!r})"

    def __str__(self) -> str:
        """Return the fields sorted, in the form parse_selector accepts."""
        return ",".join(sorted(f"{key}={value}" for key, value in self._data.items()))

    def has(self, field: str) -> bool:
        """Return whether the field is present."""
        return field in self._data

    def get(self, field: str) -> str:  # type: ignore[override]
        """Return the field's value, or an empty string if it is absent."""
        return self._data.get(field, "")

    def as_selector(self) -> Selector:
        """Return a selector that matches exactly these fields."""
        return selector_from_set(self._data)