"""Single-pass search for the newest compatible and breaking tags."""

from __future__ import annotations

import logging
from typing import Iterable

from updock.core.errors import (
    CurrentTagNotEncountered,
    CurrentTagPatternConflict,
    FetchFailed,
    TagFetchError,
)
from updock.core.version_extractor import VersionExtractor
from updock.models import Update
from updock.utils.version_compare import UpdateType, is_newer, update_type

logger = logging.getLogger(__name__)


def find_update(
    tags: Iterable[str],
    current_tag: str,
    extractor: VersionExtractor,
) -> Update:
    """Search ``tags`` for updates of ``current_tag``.

    The tags must be produced most-recent-first. They are pulled one at a
    time and the search stops as soon as either the current tag or a
    compatible update is reached, so a lazy source is never read further
    than needed.

    Raises CurrentTagPatternConflict if the current tag does not follow the
    pattern, FetchFailed if pulling a tag fails and CurrentTagNotEncountered
    if the source runs out before the current tag shows up (unless a
    breaking update was already found).

    A pattern-matching tag whose number exceeds ``MAX_COMPONENT`` raises
    VersionOverflowError, whether it is the current tag or a candidate
    pulled before the current tag is reached.
    """
    current = extractor.extract_from(current_tag)
    if current is None:
        raise CurrentTagPatternConflict(current_tag, str(extractor))

    degree = extractor.breaking_degree
    breaking: str | None = None
    examined = 0
    iterator = iter(tags)

    while True:
        try:
            tag = next(iterator)
        except StopIteration:
            break
        except TagFetchError as e:
            raise FetchFailed(e) from e
        examined += 1

        if tag == current_tag:
            logger.debug("Reached current tag %s after %d tags", tag, examined)
            return Update(compatible=None, breaking=breaking)

        candidate = extractor.extract_from(tag)
        if candidate is None or not is_newer(candidate, current):
            continue

        if update_type(candidate, current, degree) is UpdateType.COMPATIBLE:
            logger.debug("Compatible update %s found after %d tags", tag, examined)
            return Update(compatible=tag, breaking=breaking)
        if breaking is None:
            logger.debug("Breaking update %s found, continuing", tag)
            breaking = tag

    if breaking is not None:
        return Update(compatible=None, breaking=breaking)
    raise CurrentTagNotEncountered(examined)
