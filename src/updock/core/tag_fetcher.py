"""Lazy, page-by-page tag sources.

A tag source is a plain iterator of tag names in registry order (most recent
first). A failing pull raises :class:`TagFetchError` from ``next()``, which
also ends the iterator, so nothing is produced past a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol

import requests

from updock.config.settings import settings
from updock.core.errors import TagFetchError
from updock.models.image import ImageName

logger = logging.getLogger(__name__)


@dataclass
class Page:
    tags: list[str] = field(default_factory=list)
    next_url: str | None = None


class TagFetcher(Protocol):
    def fetch(self, image: ImageName) -> Iterator[str]:
        ...


class DockerHubTagFetcher:
    """Walks the Docker Hub tag listing of one repository, one page at a time."""

    def __init__(
        self,
        session: requests.Session | None = None,
        registry_url: str | None = None,
        page_size: int | None = None,
        timeout: float | None = None,
    ):
        self.session = session or requests.Session()
        self.registry_url = (registry_url or settings.registry_url).rstrip("/")
        self.page_size = page_size or settings.page_size
        self.timeout = timeout or settings.request_timeout

    def tags_url(self, image: ImageName) -> str:
        return f"{self.registry_url}/v2/repositories/{image.namespace}/{image.name}/tags"

    def fetch(self, image: ImageName) -> Iterator[str]:
        """Return a lazy iterator over the tags of ``image``.

        No request is made until the first tag is pulled, and the next page
        is only requested once the current one is exhausted.
        """
        return self._iter_tags(image)

    def _iter_tags(self, image: ImageName) -> Iterator[str]:
        url: str | None = self.tags_url(image)
        params: dict[str, Any] | None = {"page_size": self.page_size}
        page_number = 0
        while url:
            page_number += 1
            page = self.fetch_page(url, params=params)
            logger.debug("Fetched page %d of %s (%d tags)", page_number, image, len(page.tags))
            if not page.tags:
                return
            yield from page.tags
            # `next` links already carry the query string
            url, params = page.next_url, None

    def fetch_page(self, url: str, params: dict[str, Any] | None = None) -> Page:
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            raise TagFetchError(f"Registry answered {status} for {url}") from e
        except ValueError as e:
            raise TagFetchError(f"Registry returned invalid JSON for {url}") from e
        except requests.RequestException as e:
            raise TagFetchError(f"Request to {url} failed: {e}") from e
        return self._decode_page(url, data)

    @staticmethod
    def _decode_page(url: str, data: Any) -> Page:
        try:
            results = data["results"]
            tags = [entry["name"] for entry in results]
            next_url = data.get("next") or None
        except (KeyError, TypeError) as e:
            raise TagFetchError(f"Unexpected tag listing format from {url}") from e
        if not all(isinstance(t, str) for t in tags):
            raise TagFetchError(f"Unexpected tag listing format from {url}")
        return Page(tags=tags, next_url=next_url)
