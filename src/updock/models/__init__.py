"""Data models for updock."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class UpdateLevel(enum.Enum):
    NO_UPDATES = "no-updates"
    COMPATIBLE_UPDATE = "compatible"
    BREAKING_UPDATE = "breaking"
    FAILURE = "failure"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_SEVERITY: dict[UpdateLevel, int] = {
    UpdateLevel.NO_UPDATES: 0,
    UpdateLevel.COMPATIBLE_UPDATE: 1,
    UpdateLevel.BREAKING_UPDATE: 2,
    UpdateLevel.FAILURE: 3,
}

_EXIT_CODES: dict[UpdateLevel, int] = {
    UpdateLevel.NO_UPDATES: 0,
    UpdateLevel.COMPATIBLE_UPDATE: 1,
    UpdateLevel.BREAKING_UPDATE: 2,
    UpdateLevel.FAILURE: 10,
}


@dataclass(frozen=True)
class Update:
    """Most recent compatible and breaking tags found by one search."""

    compatible: str | None = None
    breaking: str | None = None

    @property
    def level(self) -> UpdateLevel:
        if self.breaking:
            return UpdateLevel.BREAKING_UPDATE
        if self.compatible:
            return UpdateLevel.COMPATIBLE_UPDATE
        return UpdateLevel.NO_UPDATES
