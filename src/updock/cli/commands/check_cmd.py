"""updock check <dockerfile> - Check the images of a Dockerfile."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from updock.cli.options import EXIT_ERROR, MaxTagsOption, OutputOption
from updock.core.errors import UpdockError
from updock.core.update_checker import Updock
from updock.models.report import Report
from updock.output.formatters import output_report

console = Console(stderr=True)


def check(
    file: Path = typer.Argument(help="Path to the Dockerfile"),
    output: str = OutputOption,
    max_tags: Optional[int] = MaxTagsOption,
) -> None:
    """Check every pattern-annotated FROM instruction for updates."""
    path = file.resolve()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Failed to read file `{file}`: {e.strerror or e}", err=True)
        raise typer.Exit(code=EXIT_ERROR)

    updock = Updock(max_tags=max_tags)
    with console.status("[bold cyan]Checking images…") as status:

        def on_progress(i: int, total: int, image: str) -> None:
            status.update(f"[bold cyan]Checking images… [dim]({i}/{total})[/dim] {image}")

        try:
            checks = updock.check_dockerfile(text, on_progress=on_progress)
        except UpdockError as e:
            typer.echo(f"Failed to check `{file}`: {e}", err=True)
            raise typer.Exit(code=EXIT_ERROR)

    report = Report.from_checks(checks, path=str(path))
    output_report(report, output)
    raise typer.Exit(code=report.update_level.exit_code)
