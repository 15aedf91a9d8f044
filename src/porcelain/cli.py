"""porcelain CLI — Typer application with status and init commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

from porcelain import __version__
from porcelain.log import configure_logging

app = typer.Typer(
    name="porcelain",
    help="Decode git porcelain status output into a typed summary.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
logger = structlog.get_logger()


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    from porcelain.git.adapter import GitError, get_repo_root

    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _read_input(source: str) -> str:
    """Read captured status output from a file, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        console.print(f"[bold red]Error:[/bold red] Input file not found: {source}")
        raise typer.Exit(code=2)
    return path.read_text(encoding="utf-8", errors="replace")


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .porcelain.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    untracked: Optional[str] = typer.Option(None, "--untracked", "-u", help="Untracked files: all | normal | no"),
    ignored: bool = typer.Option(False, "--ignored", help="Include ignored files"),
    input: Optional[str] = typer.Option(None, "--input", "-i", help="Decode captured output from a file ('-' for stdin)"),
    exit_code: bool = typer.Option(False, "--exit-code", help="Exit with 1 when the working tree is not clean"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Show the decoded status of the current repository."""
    from porcelain.config.loader import ConfigError, load_config
    from porcelain.config.schema import OUTPUT_FORMATS, UNTRACKED_MODES
    from porcelain.git.adapter import GitError, get_status_text
    from porcelain.git.status_parser import parse_status_summary
    from porcelain.output import json_report, terminal, yaml_report

    configure_logging(logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING)

    repo_root = Path.cwd() if input is not None else _resolve_repo_root()

    # --- Load config ---
    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        cfg.output.format = format  # type: ignore[assignment]
    if untracked:
        cfg.status.untracked = untracked  # type: ignore[assignment]
    if ignored:
        cfg.status.ignored = True

    if cfg.output.format not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {cfg.output.format}")
        raise typer.Exit(code=2)
    if cfg.status.untracked not in UNTRACKED_MODES:
        console.print(f"[bold red]Invalid untracked mode:[/bold red] {cfg.status.untracked}")
        raise typer.Exit(code=2)

    # --- Get status text ---
    if input is not None:
        text = _read_input(input)
    else:
        try:
            text = get_status_text(
                repo_root,
                untracked=cfg.status.untracked,
                ignored=cfg.status.ignored,
                timeout=cfg.status.timeout,
            )
        except GitError as exc:
            console.print(f"[bold red]Git error:[/bold red] {exc}")
            raise typer.Exit(code=2) from exc

    summary = parse_status_summary(text)
    logger.info("status_decoded", files=len(summary.files), current=summary.current)

    # --- Output ---
    if cfg.output.format == "terminal":
        terminal.render(
            summary,
            show_branch=cfg.output.show_branch,
            show_summary=cfg.output.show_summary,
        )
    elif cfg.output.format == "json":
        print(json_report.render(summary))
    elif cfg.output.format == "yaml":
        print(yaml_report.render(summary), end="")

    # --- Exit code ---
    if exit_code and not summary.is_clean():
        raise typer.Exit(code=1)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .porcelain.toml in the repo root."""
    from porcelain.config.defaults import DEFAULT_TOML
    from porcelain.config.loader import CONFIG_FILENAME

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
        print(f"porcelain {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """porcelain — decode git status output into a typed summary."""
