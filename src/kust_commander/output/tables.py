"""Rich table builders for each command."""

from __future__ import annotations

from rich.table import Table

from kust_commander.models import ChartUpdate


def chart_update_table(updates: list[ChartUpdate]) -> Table:
    table = Table(title="Helm Chart Versions", expand=True, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Chart", style="magenta", no_wrap=True)
    table.add_column("Old Version", style="dim")
    table.add_column("New Version", style="bold green")

    for u in updates:
        table.add_row(
            str(u.index),
            u.name,
            u.old_version or "-",
            u.new_version if u.changed else f"[dim]{u.new_version}[/dim]",
        )
    return table
