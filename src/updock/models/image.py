"""Docker image references."""

from __future__ import annotations

import re
from dataclasses import dataclass

from updock.core.errors import InvalidImageError

_IMAGE_RE = re.compile(
    r"^(?:(?P<user>[\w-]+)/)?(?P<name>[\w.-]+)(?::(?P<tag>[\w][\w.-]*))?$"
)

DEFAULT_TAG = "latest"
OFFICIAL_NAMESPACE = "library"


@dataclass(frozen=True)
class ImageName:
    user: str | None
    name: str

    @property
    def namespace(self) -> str:
        """Docker Hub namespace; official images live under ``library``."""
        return self.user or OFFICIAL_NAMESPACE

    @classmethod
    def parse(cls, reference: str) -> ImageName:
        match = _IMAGE_RE.match(reference.strip())
        if not match or match.group("tag"):
            raise InvalidImageError(reference)
        return cls(user=match.group("user"), name=match.group("name"))

    def __str__(self) -> str:
        return f"{self.user}/{self.name}" if self.user else self.name


@dataclass(frozen=True)
class Image:
    name: ImageName
    tag: str = DEFAULT_TAG

    @classmethod
    def parse(cls, reference: str, line: int | None = None) -> Image:
        match = _IMAGE_RE.match(reference.strip())
        if not match:
            raise InvalidImageError(reference, line=line)
        return cls(
            name=ImageName(user=match.group("user"), name=match.group("name")),
            tag=match.group("tag") or DEFAULT_TAG,
        )

    def __str__(self) -> str:
        return f"{self.name}:{self.tag}"
