"""Shared CLI options."""

from __future__ import annotations

import typer

from updock.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
MaxTagsOption = typer.Option(
    None, "--max-tags", "-m", min=1, help="Search horizon: stop after this many tags per image",
)

EXIT_ERROR = 10
