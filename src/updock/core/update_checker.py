"""Check the images pinned in Dockerfiles and Compose files for updates."""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Callable, Iterator

from updock.config.settings import settings
from updock.core.errors import MissingPattern, UpdockError
from updock.core.tag_fetcher import DockerHubTagFetcher, TagFetcher
from updock.core.update_search import find_update
from updock.core.version_extractor import VersionExtractor
from updock.models import Update
from updock.models.image import Image, ImageName
from updock.models.report import ImageCheck, ServiceCheck
from updock.utils.compose_parser import FolderContext, parse_compose
from updock.utils.dockerfile_parser import parse_dockerfile

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class Updock:
    """Runs update searches against a tag fetcher.

    ``max_tags`` is the search horizon: at most that many tags are pulled
    per image, after which the source counts as exhausted.
    """

    def __init__(self, fetcher: TagFetcher | None = None, max_tags: int | None = None):
        self.fetcher = fetcher or DockerHubTagFetcher()
        self.max_tags = max_tags if max_tags is not None else settings.max_tags

    def tags(self, image: ImageName) -> Iterator[str]:
        tags = self.fetcher.fetch(image)
        if self.max_tags is not None:
            return itertools.islice(tags, self.max_tags)
        return tags

    def find_update(self, image: Image, extractor: VersionExtractor) -> Update:
        logger.info("Searching updates for %s with pattern %s", image, extractor)
        return find_update(self.tags(image.name), image.tag, extractor)

    def check_image(self, image: Image, pattern: str | None, line: int | None = None) -> ImageCheck:
        """Check one image, recording any failure on the result."""
        check = ImageCheck(image=image, pattern=pattern, line=line)
        try:
            if pattern is None:
                raise MissingPattern(str(image))
            check.update = self.find_update(image, VersionExtractor(pattern))
        except UpdockError as e:
            logger.debug("Check of %s failed: %s", image, e)
            check.error = e
        return check

    def check_dockerfile(
        self,
        text: str,
        on_progress: ProgressCallback | None = None,
    ) -> list[ImageCheck]:
        statements = parse_dockerfile(text)
        checks: list[ImageCheck] = []
        total = len(statements)
        for i, statement in enumerate(statements, 1):
            if on_progress:
                on_progress(i, total, str(statement.image))
            checks.append(self.check_image(statement.image, statement.pattern, line=statement.line))
        return checks

    def check_compose(
        self,
        path: Path,
        on_progress: ProgressCallback | None = None,
    ) -> list[ServiceCheck]:
        services = parse_compose(path.read_text(encoding="utf-8"))
        compose_dir = path.parent
        results: list[ServiceCheck] = []
        total = len(services)

        for i, (name, context) in enumerate(services, 1):
            if on_progress:
                on_progress(i, total, name)
            service = ServiceCheck(service=name)
            if isinstance(context, FolderContext):
                dockerfile = compose_dir / context.path / "Dockerfile"
                try:
                    text = dockerfile.read_text(encoding="utf-8")
                    service.checks = self.check_dockerfile(text)
                except OSError as e:
                    service.error = UpdockError(f"Failed to read file `{dockerfile}`: {e.strerror or e}")
                except UpdockError as e:
                    service.error = e
            else:
                service.checks = [self.check_image(context.image, context.pattern)]
            results.append(service)

        return results
