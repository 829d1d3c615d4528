"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json

import yaml
from rich.console import Console

from updock.models.report import Report
from updock.output.themes import styled_level

console = Console()
err_console = Console(stderr=True)


def output_tags(image: str, tags: list[str], fmt: str, fetched: int, pattern: str | None = None) -> None:
    if fmt == "json":
        data = {"image": image, "fetched": fetched, "pattern": pattern, "tags": tags}
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = {"image": image, "fetched": fetched, "pattern": pattern, "tags": tags}
        console.print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), markup=False)
    else:
        from updock.output.tables import tag_list_table
        if pattern:
            title = f"Fetched {fetched} tags. Found {len(tags)} matching `{pattern}`"
        else:
            title = f"Fetched {fetched} tags"
        console.print(tag_list_table(image, tags, title=title))


def output_report(report: Report, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(report.to_dict(), indent=2))
    elif fmt == "yaml":
        console.print(yaml.safe_dump(report.to_dict(), default_flow_style=False, sort_keys=False), markup=False)
    else:
        from updock.output.tables import failures_panel, report_table
        if report.failures:
            err_console.print(failures_panel(report))
        console.print(report_table(report))
        console.print(f"\nOverall: {styled_level(report.update_level)}")
