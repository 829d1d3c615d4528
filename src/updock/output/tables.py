"""Rich table builders for each command."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from updock.models import UpdateLevel
from updock.models.report import Report
from updock.output.themes import LEVEL_COLORS, styled_level


def tag_list_table(image: str, tags: list[str], title: str | None = None) -> Table:
    table = Table(title=title or f"Tags of {image}", expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tag", style="bold")
    for i, tag in enumerate(tags, 1):
        table.add_row(str(i), tag)
    return table


def report_table(report: Report) -> Table:
    table = Table(title=f"Report for {report.path}" if report.path else "Report", expand=True)
    table.add_column("Image", style="magenta", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Compatible", style="yellow")
    table.add_column("Breaking", style="red")

    for key in report.no_updates:
        table.add_row(key, styled_level(UpdateLevel.NO_UPDATES), "-", "-")

    updated = list(dict.fromkeys([*report.breaking_updates, *report.compatible_updates]))
    for key in updated:
        level = UpdateLevel.BREAKING_UPDATE if key in report.breaking_updates else UpdateLevel.COMPATIBLE_UPDATE
        table.add_row(
            key,
            styled_level(level),
            report.compatible_updates.get(key, "-"),
            report.breaking_updates.get(key, "-"),
        )
    return table


def failures_panel(report: Report) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Image", style="bold", no_wrap=True)
    table.add_column("Error")
    for key, message in report.failures.items():
        table.add_row(key, message)
    color = LEVEL_COLORS[UpdateLevel.FAILURE]
    return Panel(table, title=f"[{color}]Failures[/{color}]", border_style="red")
