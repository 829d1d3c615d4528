"""updock check-compose <file> - Check the images of a Docker Compose file."""

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


def check_compose(
    file: Path = typer.Argument(help="Path to the Docker Compose file"),
    output: str = OutputOption,
    max_tags: Optional[int] = MaxTagsOption,
) -> None:
    """Check the Dockerfiles and images of every Compose service for updates."""
    path = file.resolve()
    updock = Updock(max_tags=max_tags)

    with console.status("[bold cyan]Checking services…") as status:

        def on_progress(i: int, total: int, service: str) -> None:
            status.update(f"[bold cyan]Checking services… [dim]({i}/{total})[/dim] {service}")

        try:
            services = updock.check_compose(path, on_progress=on_progress)
        except OSError as e:
            typer.echo(f"Failed to read file `{file}`: {e.strerror or e}", err=True)
            raise typer.Exit(code=EXIT_ERROR)
        except UpdockError as e:
            typer.echo(f"Failed to parse Docker Compose file `{file}`: {e}", err=True)
            raise typer.Exit(code=EXIT_ERROR)

    report = Report.from_services(services, path=str(path))
    output_report(report, output)
    raise typer.Exit(code=report.update_level.exit_code)
