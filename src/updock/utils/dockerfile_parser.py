"""Find pattern-annotated ``FROM`` instructions in a Dockerfile.

Only base images announced by a pattern comment are considered::

    # updock pattern: "<!>.<>"
    FROM ubuntu:14.04
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from updock.config.settings import settings
from updock.models.image import Image


@dataclass(frozen=True)
class FromStatement:
    image: Image
    pattern: str
    line: int


def _pattern_comment_re() -> re.Pattern[str]:
    return re.compile(
        r"^#\s*" + re.escape(settings.pattern_comment) + r"\s*\"(?P<pattern>[^\"]*)\"\s*$",
        re.IGNORECASE,
    )


_FROM_RE = re.compile(r"^FROM\s+(?P<args>.+)$", re.IGNORECASE)


def parse_dockerfile(text: str) -> list[FromStatement]:
    """Return the annotated FROM statements of a Dockerfile, in file order."""
    comment_re = _pattern_comment_re()
    statements: list[FromStatement] = []
    pending: str | None = None

    for number, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            match = comment_re.match(line)
            if match:
                pending = match.group("pattern")
            continue

        from_match = _FROM_RE.match(line)
        if from_match and pending is not None:
            reference = _image_argument(from_match.group("args"))
            statements.append(FromStatement(
                image=Image.parse(reference, line=number),
                pattern=pending,
                line=number,
            ))
        # A pattern only applies to the instruction right below it
        pending = None

    return statements


def _image_argument(args: str) -> str:
    """Skip ``--platform=...`` style flags and return the image reference."""
    for token in args.split():
        if not token.startswith("--"):
            return token
    return args
