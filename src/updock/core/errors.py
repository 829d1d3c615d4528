"""Exception hierarchy shared by the pattern, search and scanning layers."""

from __future__ import annotations


class UpdockError(Exception):
    """Base class for every error raised by updock."""


class PatternSyntaxError(UpdockError):
    """The version pattern is malformed or declares no placeholder."""

    def __init__(self, pattern: str, reason: str, position: int | None = None):
        self.pattern = pattern
        self.reason = reason
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid pattern `{pattern}`{where}: {reason}")


class VersionOverflowError(UpdockError):
    """A digit run does not fit in a version component."""

    def __init__(self, tag: str, digits: str):
        self.tag = tag
        self.digits = digits
        super().__init__(f"Version component `{digits}` of tag `{tag}` is too large")


class TagFetchError(UpdockError):
    """A tag source could not produce its next item."""


class FetchFailed(UpdockError):
    """The update search aborted because a tag source pull failed."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"Failed to fetch tags: {error}")


class CurrentTagPatternConflict(UpdockError):
    """The current tag does not match the declared pattern."""

    def __init__(self, tag: str, pattern: str):
        self.tag = tag
        self.pattern = pattern
        super().__init__(f"The current tag `{tag}` does not match the pattern `{pattern}`")


class CurrentTagNotEncountered(UpdockError):
    """The tag source ran out before the current tag was seen."""

    def __init__(self, examined: int):
        self.examined = examined
        super().__init__(
            f"Searched {examined} tags but did not encounter the current tag; "
            "the result cannot be trusted"
        )


class InvalidImageError(UpdockError):
    """An image reference could not be parsed."""

    def __init__(self, reference: str, line: int | None = None):
        self.reference = reference
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"The image definition `{reference}` is invalid{where}")


class ComposeError(UpdockError):
    """A Docker Compose file could not be interpreted."""


class MalformedComposeFile(ComposeError):
    def __init__(self, detail: str = ""):
        super().__init__("The Docker Compose file seems to be invalid" + (f": {detail}" if detail else ""))


class MissingField(ComposeError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Failed to find `{field}`")


class UnsupportedBuildContext(ComposeError):
    def __init__(self, service: str):
        self.service = service
        super().__init__(
            f"No build context was found for service `{service}` "
            "(only the `build` and `image` fields containing strings are supported)"
        )


class MissingPattern(UpdockError):
    """An image was pinned without declaring a version pattern."""

    def __init__(self, image: str):
        self.image = image
        super().__init__(f"No version pattern is declared for image `{image}`")
