from __future__ import annotations

from typing import Iterable, Iterator

import pytest

from updock.core.errors import TagFetchError
from updock.core.version_extractor import VersionExtractor


class CountingSource:
    """Iterator over fixed tags that records how many were pulled.

    An Exception instance in ``items`` is raised when reached, ending the
    iteration the way a failed page fetch does.
    """

    def __init__(self, items: Iterable[str | Exception]):
        self._items = list(items)
        self.pulled = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.pulled >= len(self._items):
            raise StopIteration
        item = self._items[self.pulled]
        self.pulled += 1
        if isinstance(item, Exception):
            self._items = self._items[:self.pulled]
            raise item
        return item


@pytest.fixture
def major_minor():
    return VersionExtractor("<!>.<>")


@pytest.fixture
def fetch_error():
    return TagFetchError("registry unavailable")


class FakeFetcher:
    """Tag fetcher serving canned tag lists keyed by image name."""

    def __init__(self, tags: dict[str, list[str | Exception]]):
        self.tags = tags
        self.sources: dict[str, CountingSource] = {}

    def fetch(self, image) -> CountingSource:
        source = CountingSource(self.tags.get(str(image), []))
        self.sources[str(image)] = source
        return source


@pytest.fixture
def fake_fetcher():
    return FakeFetcher({
        "ubuntu": ["20.04", "18.10", "18.04", "16.04", "14.04"],
        "node": ["20.1.0-alpine", "18.2.0-alpine", "18.1.0-alpine"],
        "bitnami/redis": ["7.2", "7.0"],
        "broken": [TagFetchError("registry unavailable")],
    })
