"""Per-image check results and the aggregated report."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

from updock.models import Update, UpdateLevel
from updock.models.image import Image


@dataclass
class ImageCheck:
    image: Image
    pattern: str | None
    update: Update | None = None
    error: Exception | None = None
    line: int | None = None

    @property
    def level(self) -> UpdateLevel:
        if self.error is not None or self.update is None:
            return UpdateLevel.FAILURE
        return self.update.level


@dataclass
class ServiceCheck:
    service: str
    checks: list[ImageCheck] = field(default_factory=list)
    error: Exception | None = None


@dataclass
class Report:
    path: str = ""
    failures: dict[str, str] = field(default_factory=dict)
    no_updates: list[str] = field(default_factory=list)
    compatible_updates: dict[str, str] = field(default_factory=dict)
    breaking_updates: dict[str, str] = field(default_factory=dict)

    @property
    def update_level(self) -> UpdateLevel:
        levels = [UpdateLevel.NO_UPDATES]
        if self.failures:
            levels.append(UpdateLevel.FAILURE)
        if self.breaking_updates:
            levels.append(UpdateLevel.BREAKING_UPDATE)
        if self.compatible_updates:
            levels.append(UpdateLevel.COMPATIBLE_UPDATE)
        return max(levels, key=lambda level: level.severity)

    def add(self, key: str, check: ImageCheck) -> None:
        if check.error is not None or check.update is None:
            self.failures[key] = str(check.error or "no result")
            return
        update = check.update
        if update.breaking:
            self.breaking_updates[key] = update.breaking
        if update.compatible:
            self.compatible_updates[key] = update.compatible
        if not update.breaking and not update.compatible:
            self.no_updates.append(key)

    @classmethod
    def from_checks(cls, checks: list[ImageCheck], path: str = "") -> Report:
        report = cls(path=path)
        report.add_checks(checks)
        return report

    def add_checks(self, checks: list[ImageCheck], prefix: str = "") -> None:
        counts = Counter(str(c.image) for c in checks)
        for check in checks:
            key = prefix + str(check.image)
            # The same image pinned twice is told apart by its FROM line
            if counts[str(check.image)] > 1 and check.line is not None:
                key += f" (line {check.line})"
            self.add(key, check)

    @classmethod
    def from_services(cls, services: list[ServiceCheck], path: str = "") -> Report:
        report = cls(path=path)
        for service in services:
            if service.error is not None:
                report.failures[service.service] = str(service.error)
                continue
            report.add_checks(service.checks, prefix=f"{service.service}: ")
        return report

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "update_level": self.update_level.value,
            "failures": dict(self.failures),
            "no_updates": list(self.no_updates),
            "compatible_updates": dict(self.compatible_updates),
            "breaking_updates": dict(self.breaking_updates),
        }
