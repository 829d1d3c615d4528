"""Recognize tags that follow a version pattern and parse their numbers."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from updock.core.errors import VersionOverflowError
from updock.core.pattern import VersionPattern, compile_pattern

logger = logging.getLogger(__name__)

Version = tuple[int, ...]

# Components are unsigned 64-bit integers; larger runs fail instead of wrapping.
MAX_COMPONENT = 2**64 - 1


class VersionExtractor:
    """Extracts Versions from tags using a compiled pattern."""

    def __init__(self, pattern: str | VersionPattern):
        if isinstance(pattern, VersionPattern):
            self.pattern = pattern
        else:
            self.pattern = compile_pattern(pattern)

    @property
    def breaking_degree(self) -> int | None:
        return self.pattern.breaking_degree

    def extract_from(self, tag: str) -> Version | None:
        """Return the Version encoded in ``tag``, or None if it does not match."""
        captures = self.pattern.match(tag)
        if captures is None:
            return None
        components = []
        for digits in captures:
            value = int(digits)
            if value > MAX_COMPONENT:
                raise VersionOverflowError(tag, digits)
            components.append(value)
        return tuple(components)

    def matches(self, tag: str) -> bool:
        return self.pattern.match(tag) is not None

    def filter(self, tags: Iterable[str]) -> Iterator[str]:
        """Lazily yield the tags that match the pattern."""
        for tag in tags:
            if self.matches(tag):
                yield tag
            else:
                logger.debug("Tag %s does not match %s", tag, self.pattern)

    def __str__(self) -> str:
        return self.pattern.source

    def __repr__(self) -> str:
        return f"VersionExtractor({self.pattern.source!r})"
