"""hgstatus CLI — Typer application with status, stage, unstage, and init commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from hgstatus import __version__

app = typer.Typer(
    name="hgstatus",
    help="Group Mercurial working-copy changes the way a source-control view does.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _resolve_repo_root() -> Path:
    """Find the hg repo root, exit 2 on failure."""
    from hgstatus.hg.adapter import HgError, get_repo_root

    try:
        return get_repo_root()
    except HgError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _open_repository(
    config: Optional[str],
    *,
    format: Optional[str] = None,
    no_parent: bool = False,
    ignored: bool = False,
):
    """Load config and open the repository, exit 2 on failure."""
    from hgstatus.config.loader import ConfigError, load_config
    from hgstatus.config.schema import OUTPUT_FORMATS
    from hgstatus.repository import Repository
    from hgstatus.staging import StagingError

    repo_root = _resolve_repo_root()

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if no_parent:
        cfg.status.show_parent = False
    if ignored:
        cfg.status.include_ignored = True

    try:
        return Repository.open(repo_root, cfg)
    except StagingError as exc:
        console.print(f"[bold red]Staging error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _refresh(repo) -> None:
    """Refresh *repo*, exit 2 on hg, classification, or staging errors."""
    from hgstatus.groups.translate import ClassificationError
    from hgstatus.hg.adapter import HgError
    from hgstatus.staging import StagingError

    try:
        repo.refresh()
    except HgError as exc:
        console.print(f"[bold red]Hg error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except ClassificationError as exc:
        console.print(f"[bold red]Status refresh failed:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except StagingError as exc:
        console.print(f"[bold red]Staging error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _report(repo) -> None:
    from hgstatus.output import json_report, terminal

    cfg = repo.config
    if cfg.output.format == "json":
        print(json_report.render(repo.groups, repo.root, is_merge=repo.is_merge))
    else:
        terminal.render(
            repo.groups,
            repo.root,
            is_merge=repo.is_merge,
            show_empty_groups=cfg.output.show_empty_groups,
            show_summary=cfg.output.show_summary,
            console=Console(),
        )


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .hgstatus.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    no_parent: bool = typer.Option(False, "--no-parent", help="Skip the parent revision's changes"),
    ignored: bool = typer.Option(False, "--ignored", "-i", help="Also list ignored files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Classify working-copy changes into status groups."""
    _configure_logging(debug)
    repo = _open_repository(config, format=format, no_parent=no_parent, ignored=ignored)

    if verbose or debug:
        console.print(f"[dim]Repo root: {repo.root}[/dim]")

    _refresh(repo)

    if verbose or debug:
        console.print(f"[dim]Merge in progress: {repo.is_merge}[/dim]")

    _report(repo)


# ── stage / unstage ───────────────────────────────────────────────────────────


def _move(paths: list[Path], config: Optional[str], *, to_staging: bool) -> None:
    from hgstatus.staging import StagingError

    repo = _open_repository(config)
    _refresh(repo)

    if repo.is_merge:
        console.print("[yellow]⚠[/yellow]  Staging is not available during a merge.")
        raise typer.Exit(code=1)

    absolute = [p if p.is_absolute() else (Path.cwd() / p) for p in paths]
    try:
        moved = repo.stage(absolute) if to_staging else repo.unstage(absolute)
    except StagingError as exc:
        console.print(f"[bold red]Staging error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    if not moved:
        where = "changes" if to_staging else "staged changes"
        console.print(f"[yellow]⚠[/yellow]  No matching {where}.")
        raise typer.Exit(code=1)

    verb = "Staged" if to_staging else "Unstaged"
    console.print(f"[green]✓[/green] {verb} {len(moved)} file(s)")
    _report(repo)


@app.command()
def stage(
    paths: list[Path] = typer.Argument(..., help="Files to stage"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .hgstatus.toml"),
) -> None:
    """Move changed files into the Staged Changes group."""
    _move(paths, config, to_staging=True)


@app.command()
def unstage(
    paths: list[Path] = typer.Argument(..., help="Files to unstage"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .hgstatus.toml"),
) -> None:
    """Move staged files back into the Changes group."""
    _move(paths, config, to_staging=False)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .hgstatus.toml in the repo root."""
    from hgstatus.config.defaults import DEFAULT_TOML
    from hgstatus.config.loader import CONFIG_FILENAME

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"hgstatus {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """hgstatus — Mercurial working-copy status, grouped."""
