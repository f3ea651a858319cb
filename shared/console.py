"""
Keyspace Console
=================

Thin wrapper around :class:`rich.console.Console` holding the Keyspace
theme, banner, section rules, status lines, the brute-force progress bar,
and table helpers shared by the CLI and the output formatters.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskID, TaskProgressColumn, TextColumn
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from shared.models import Finding, Severity

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: "bold white on red",
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "bold yellow",
    Severity.LOW: "bold bright_cyan",
    Severity.INFO: "bold bright_blue",
}

_THEME = Theme(
    {
        "keyspace.accent": "bold bright_cyan",
        "keyspace.section": "bold bright_magenta",
        "keyspace.success": "bold green",
        "keyspace.info": "bold bright_blue",
    }
)

_TAGLINE = "password strength meter & brute-force simulator"


class KeyspaceConsole:
    """Shared Rich console for Keyspace output.

    Args:
        quiet: Suppress all output.
        record: Keep a record of output for export.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        self._console = Console(theme=_THEME, quiet=quiet, record=record, highlight=False)

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        title = Text("KEYSPACE", style="keyspace.accent")
        title.append(f"  v{version}\n", style="dim")
        title.append(_TAGLINE, style="dim")
        self._console.print(Panel(title, border_style="bright_cyan", expand=False))

    def section(self, title: str) -> None:
        self._console.rule(f" {title} ", style="keyspace.section")

    def success(self, message: str) -> None:
        self._console.print(f"[keyspace.success]✔[/keyspace.success] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[keyspace.info]ℹ[/keyspace.info] {message}")

    @contextmanager
    def progress(self, description: str, total: int) -> Iterator[tuple[Progress, TaskID]]:
        """Yield ``(progress, task_id)`` for a bar that ends full."""
        bar = Progress(
            TextColumn("[keyspace.info]{task.description}"),
            BarColumn(bar_width=40, complete_style="bright_red"),
            TaskProgressColumn(),
            console=self._console,
        )
        with bar:
            task_id = bar.add_task(description, total=total)
            yield bar, task_id
            bar.update(task_id, completed=total)

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        styles: Sequence[str] = (),
    ) -> None:
        """Print a bordered table; each cell is stringified."""
        tbl = Table(title=title, border_style="bright_cyan", header_style="keyspace.section")
        for idx, name in enumerate(columns):
            tbl.add_column(name, style=styles[idx] if idx < len(styles) else "")
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)

    def findings_table(self, findings: Sequence[Finding]) -> None:
        """Print findings with their severity coloured."""
        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="keyspace.section",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Severity")
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)
        for idx, finding in enumerate(findings, start=1):
            tbl.add_row(
                str(idx),
                Text(finding.severity.value, style=_SEVERITY_STYLES[finding.severity]),
                finding.title,
                finding.description,
            )
        self._console.print(tbl)
