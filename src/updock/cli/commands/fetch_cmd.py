"""updock fetch <image> - List the most recent tags of an image."""

from __future__ import annotations

import itertools
from typing import Optional

import typer

from updock.cli.options import EXIT_ERROR, OutputOption
from updock.core.errors import UpdockError
from updock.core.tag_fetcher import DockerHubTagFetcher
from updock.core.version_extractor import VersionExtractor
from updock.models.image import ImageName
from updock.output.formatters import output_tags


def fetch(
    image: str = typer.Argument(help="Image name, e.g. ubuntu or user/image"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="Only show tags matching this pattern"),
    amount: int = typer.Option(25, "--amount", "-a", min=1, help="Number of tags to fetch"),
    output: str = OutputOption,
) -> None:
    """Fetch the most recent tags of an image, optionally filtered by a pattern."""
    try:
        name = ImageName.parse(image)
        extractor = VersionExtractor(pattern) if pattern else None
        tags = list(itertools.islice(DockerHubTagFetcher().fetch(name), amount))
    except UpdockError as e:
        typer.echo(f"Failed to fetch tags: {e}", err=True)
        raise typer.Exit(code=EXIT_ERROR)

    shown = list(extractor.filter(tags)) if extractor else tags
    output_tags(str(name), shown, output, fetched=len(tags), pattern=pattern)
