"""Version information collected at build time."""

from __future__ import annotations

import json
import platform
import sys
from dataclasses import dataclass

GIT_VERSION = "v0.0.0-master+$Format:%h$"
BUILD_DATE = "1970-01-01T00:00:00Z"
GIT_COMMIT = "$Format:%H$"
GIT_TREE_STATE = ""

_MAX_COL_WIDTH = 80
_ELLIPSIS = "..."


def _fit(value: str, width: int) -> str:
    if len(value) > width:
        value = value[: width - len(_ELLIPSIS)] + _ELLIPSIS
    return value.ljust(width)


@dataclass(frozen=True)
class Info:
    """Versioning information."""

    git_version: str
    git_commit: str
    git_tree_state: str
    build_date: str
    python_version: str
    compiler: str
    platform: str

    def _rows(self) -> list[tuple[str, str]]:
        return [
            ("gitVersion:", self.git_version),
            ("gitCommit:", self.git_commit),
            ("gitTreeState:", self.git_tree_state),
            ("buildDate:", self.build_date),
            ("pythonVersion:", self.python_version),
            ("compiler:", self.compiler),
            ("platform:", self.platform),
        ]

    def text(self) -> str:
        """Return the information as a two-column table, labels right aligned."""
        rows = self._rows()
        label_width = min(max(len(label) for label, _ in rows), _MAX_COL_WIDTH)
        value_width = min(max(len(value) for _, value in rows), _MAX_COL_WIDTH)
        return "\n".join(
            f"{label.rjust(label_width)} {_fit(value, value_width)}" for label, value in rows
        )

    def to_json(self) -> str:
        """Return the information as a compact JSON object."""
        data = {
            "gitVersion": self.git_version,
            "gitCommit": self.git_commit,
            "gitTreeState": self.git_tree_state,
            "buildDate": self.build_date,
            "pythonVersion": self.python_version,
            "compiler": self.compiler,
            "platform": self.platform,
        }
        return json.dumps(data, separators=(",", ":"))

    def __str__(self) -> str:
        return self.text()


def get() -> Info:
    """Return the version information of the running code."""
    return Info(
        git_version=GIT_VERSION,
        git_commit=GIT_COMMIT,
        git_tree_state=GIT_TREE_STATE,
        build_date=BUILD_DATE,
        python_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine().lower()}",
    )