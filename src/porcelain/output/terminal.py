"""Rich terminal reporter — branch line, file table, category counts."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from porcelain.git.models import FileStatusSummary, StatusSummary

_STATUS_STYLE = {
    "A": "bold green",
    "M": "bold yellow",
    "D": "bold red",
    "R": "bold cyan",
    "C": "bold cyan",
    "U": "bold white on red",
    "?": "bold magenta",
}

_STATUS_LABEL = {
    " ": "-",
    "?": "?",
}


def _status_cell(code: str) -> Text:
    return Text(_STATUS_LABEL.get(code, code), style=_STATUS_STYLE.get(code, "dim"))


def _path_cell(f: FileStatusSummary) -> str:
    if f.from_path is not None and f.from_path != f.path:
        return f"{f.from_path} → {f.path}"
    return f.path


def branch_line(summary: StatusSummary) -> str:
    """Return a one-line description of the branch state (rich markup)."""
    current = escape(summary.current or "(unknown)")
    parts = [f"[bold]On branch[/bold] [cyan]{current}[/cyan]"]
    if summary.detached:
        parts.append("[yellow](detached HEAD)[/yellow]")
    if summary.tracking:
        parts.append(f"[dim]tracking[/dim] [cyan]{escape(summary.tracking)}[/cyan]")
    if summary.ahead:
        parts.append(f"[green]↑{summary.ahead}[/green]")
    if summary.behind:
        parts.append(f"[red]↓{summary.behind}[/red]")
    return " ".join(parts)


def render(
    summary: StatusSummary,
    *,
    show_branch: bool = True,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a status summary to the terminal using Rich."""
    console = console or Console()

    if show_branch:
        console.print(branch_line(summary))

    if summary.is_clean():
        console.print("[bold green]✓ Nothing to commit, working tree clean.[/bold green]")
        if summary.ignored:
            console.print(f"[dim]Ignored:[/dim]    {len(summary.ignored)}")
        return

    console.print()
    table = Table(show_lines=False, title_style="bold", border_style="dim")
    table.add_column("Index", justify="center", width=7)
    table.add_column("Tree", justify="center", width=6)
    table.add_column("Path", style="magenta")

    for f in summary.files:
        table.add_row(_status_cell(f.index), _status_cell(f.working_dir), Text(_path_cell(f)))

    console.print(table)

    if show_summary:
        _print_summary(console, summary)


def _print_summary(console: Console, summary: StatusSummary) -> None:
    console.print()
    console.print(f"[dim]Staged:[/dim]     {len(summary.staged)}")
    console.print(f"[dim]Created:[/dim]    {len(summary.created)}")
    console.print(f"[dim]Modified:[/dim]   {len(summary.modified)}")
    console.print(f"[dim]Deleted:[/dim]    {len(summary.deleted)}")
    console.print(f"[dim]Renamed:[/dim]    {len(summary.renamed)}")
    console.print(f"[dim]Conflicted:[/dim] {len(summary.conflicted)}")
    console.print(f"[dim]Untracked:[/dim]  {len(summary.not_added)}")
    if summary.ignored is not None:
        console.print(f"[dim]Ignored:[/dim]    {len(summary.ignored)}")
