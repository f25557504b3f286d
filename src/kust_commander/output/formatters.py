"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from kust_commander.models import ChartUpdate, OutputFormat

console = Console()


def _update_to_dict(u: ChartUpdate) -> dict[str, Any]:
    return {
        "name": u.name,
        "old_version": u.old_version,
        "new_version": u.new_version,
    }


def output_chart_updates(updates: list[ChartUpdate], fmt: OutputFormat | str) -> None:
    if fmt == OutputFormat.JSON:
        data = [_update_to_dict(u) for u in updates]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == OutputFormat.YAML:
        data = [_update_to_dict(u) for u in updates]
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif not updates:
        console.print("[dim]No matching helm charts.[/dim]")
    else:
        from kust_commander.output.tables import chart_update_table
        console.print(chart_update_table(updates))
