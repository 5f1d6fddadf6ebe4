"""Rich terminal reporter — one table per status group."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from hgstatus.groups.classifier import relative_path
from hgstatus.groups.models import MergeStatus, Resource, Status
from hgstatus.groups.resource_group import ResourceGroup, StatusGroups

_STATUS_STYLE = {
    Status.MODIFIED: "yellow",
    Status.ADDED: "green",
    Status.RENAMED: "green",
    Status.DELETED: "red",
    Status.MISSING: "red",
    Status.UNTRACKED: "bright_black",
    Status.IGNORED: "dim",
    Status.CLEAN: "dim",
}

_MERGE_STYLE = {
    MergeStatus.UNRESOLVED: "bold white on red",
    MergeStatus.RESOLVED: "bold black on green",
}


def _path_cell(resource: Resource, root: Path) -> Text:
    style = _STATUS_STYLE.get(resource.status, "")
    if resource.strike_through:
        style = f"{style} strike"
    return Text(relative_path(resource.uri, root), style=style)


def _merge_cell(merge_status: MergeStatus) -> Text:
    if merge_status is MergeStatus.NONE:
        return Text("-", style="dim")
    return Text(f" {merge_status.value.upper()} ", style=_MERGE_STYLE[merge_status])


def _group_table(group: ResourceGroup, root: Path) -> Table:
    table = Table(
        title=f"{group.label} ({len(group)})",
        title_style="bold",
        border_style="dim",
        title_justify="left",
    )
    table.add_column("", justify="center", width=3)
    table.add_column("Status", style="cyan")
    table.add_column("Merge", justify="center")
    table.add_column("Path")
    table.add_column("Renamed from", style="magenta")

    for resource in group:
        table.add_row(
            Text(resource.letter, style=_STATUS_STYLE.get(resource.status, "")),
            resource.tooltip,
            _merge_cell(resource.merge_status),
            _path_cell(resource, root),
            relative_path(resource.rename_uri, root) if resource.rename_uri else "",
        )
    return table


def render(
    groups: StatusGroups,
    root: Path,
    *,
    is_merge: bool = False,
    show_empty_groups: bool = False,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print status groups to the terminal using Rich."""
    console = console or Console()

    if is_merge:
        console.print("[bold yellow]Merge in progress[/bold yellow]")

    if groups.is_empty and not show_empty_groups:
        console.print("[bold green]Working copy is clean.[/bold green]")
        return

    for group in groups:
        if len(group) == 0 and not show_empty_groups:
            continue
        console.print()
        console.print(_group_table(group, root))

    if show_summary:
        _print_summary(console, groups)


def _print_summary(console: Console, groups: StatusGroups) -> None:
    console.print()
    for group in groups:
        console.print(f"[dim]{group.label + ':':<22}[/dim]{len(group)}")
