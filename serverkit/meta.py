"""Option and metadata types common to all API versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ListOptions:
    """Query options for a list call."""

    label_selector: str = ""
    field_selector: str = ""
    offset: Optional[int] = None
    limit: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out unset options."""
        data: dict[str, Any] = {}
        if self.label_selector:
            data["labelSelector"] = self.label_selector
        if self.field_selector:
            data["fieldSelector"] = self.field_selector
        if self.offset is not None:
            data["offset"] = self.offset
        if self.limit is not None:
            data["limit"] = self.limit
        return data


@dataclass
class GetOptions:
    """Query options for a get call."""


@dataclass
class DeleteOptions:
    """Options for deleting an object."""

    unscoped: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form."""
        return {"unscoped": self.unscoped}


@dataclass
class CreateOptions:
    """Options for creating an object; ``dry_run`` may hold ``All``."""

    dry_run: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out an empty dry run list."""
        return {"dryRun": list(self.dry_run)} if self.dry_run else {}


@dataclass
class UpdateOptions:
    """Options for updating an object; ``dry_run`` may hold ``All``."""

    dry_run: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out an empty dry run list."""
        return {"dryRun": list(self.dry_run)} if self.dry_run else {}


@dataclass
class ListMeta:
    """Metadata of list results."""

    total_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out a zero count."""
        return {"totalCount": self.total_count} if self.total_count else {}