"""Version pattern compilation and tag matching.

A pattern mixes literal text with two placeholder markers:

* ``<!>`` - a numeric component whose change breaks compatibility;
* ``<>``  - a plain numeric component.

``<!>.<>`` therefore describes tags such as ``14.04`` where a change of the
first number is a breaking update and a change of the second is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from updock.core.errors import PatternSyntaxError

BREAKING_MARKER = "<!>"
PLAIN_MARKER = "<>"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    breaking: bool = False


Segment = Union[Literal, Placeholder]


@dataclass(frozen=True)
class VersionPattern:
    source: str
    segments: tuple[Segment, ...]

    @property
    def placeholder_count(self) -> int:
        return sum(1 for s in self.segments if isinstance(s, Placeholder))

    @property
    def breaking_degree(self) -> int | None:
        """Index of the last breaking placeholder, or None if none is flagged."""
        degree = None
        index = 0
        for segment in self.segments:
            if isinstance(segment, Placeholder):
                if segment.breaking:
                    degree = index
                index += 1
        return degree

    def match(self, tag: str) -> list[str] | None:
        """Scan ``tag`` left to right, returning the digit run of each placeholder.

        Returns None unless the whole tag is consumed and every placeholder
        captured at least one digit.
        """
        pos = 0
        captures: list[str] = []
        for segment in self.segments:
            if isinstance(segment, Literal):
                if not tag.startswith(segment.text, pos):
                    return None
                pos += len(segment.text)
            else:
                end = pos
                while end < len(tag) and tag[end] in "0123456789":
                    end += 1
                if end == pos:
                    return None
                captures.append(tag[pos:end])
                pos = end
        if pos != len(tag):
            return None
        return captures

    def __str__(self) -> str:
        return self.source


def compile_pattern(source: str) -> VersionPattern:
    """Compile a pattern string into an immutable sequence of segments."""
    segments: list[Segment] = []
    literal: list[str] = []
    pos = 0

    def flush() -> None:
        if literal:
            segments.append(Literal("".join(literal)))
            literal.clear()

    while pos < len(source):
        if source.startswith(BREAKING_MARKER, pos):
            flush()
            segments.append(Placeholder(breaking=True))
            pos += len(BREAKING_MARKER)
        elif source.startswith(PLAIN_MARKER, pos):
            flush()
            segments.append(Placeholder(breaking=False))
            pos += len(PLAIN_MARKER)
        elif source[pos] == "<":
            raise PatternSyntaxError(source, "unterminated or unknown placeholder", pos)
        elif source[pos] == ">":
            raise PatternSyntaxError(source, "unexpected `>` outside of a placeholder", pos)
        else:
            literal.append(source[pos])
            pos += 1
    flush()

    pattern = VersionPattern(source=source, segments=tuple(segments))
    if pattern.placeholder_count == 0:
        raise PatternSyntaxError(source, "at least one `<>` or `<!>` placeholder is required")
    return pattern
