"""Root Typer application, registers the commands."""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from updock.config.settings import settings

app = typer.Typer(
    name="updock",
    help="Updock - Find compatible and breaking updates of pinned Docker images.",
    no_args_is_help=True,
)


def _register_commands() -> None:
    from updock.cli.commands.fetch_cmd import fetch
    from updock.cli.commands.check_cmd import check
    from updock.cli.commands.compose_cmd import check_compose

    app.command(name="fetch", help="List the most recent tags of an image")(fetch)
    app.command(name="check", help="Check the images of a Dockerfile")(check)
    app.command(name="check-compose", help="Check the images of a Docker Compose file")(check_compose)


_register_commands()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def main() -> None:
    configure_logging()
    app()
