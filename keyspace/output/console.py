"""
Keyspace Console Output
========================

Rich-based console formatters for the strength meter: a colour-coded
meter bar, the requirement checklist, the attack simulation panel with an
optional animated progress bar, and a table of generated suggestions.

Uses the shared console infrastructure for consistent styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

import time
from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import KeyspaceConsole
from keyspace.core.models import (
    AttackOutcome,
    AttackReport,
    MeterReading,
    RequirementCheck,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[str, str] = {
    "very_weak": "bold white on red",
    "weak": "bold red",
    "fair": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}

_OUTCOME_BORDERS: dict[AttackOutcome, str] = {
    AttackOutcome.EMPTY: "dim",
    AttackOutcome.INVALID: "yellow",
    AttackOutcome.DICTIONARY: "red",
    AttackOutcome.BRUTE_FORCE: "cyan",
}

_ANIMATION_STEPS = 50


class KeyspaceConsoleOutput:
    """Console output formatters for Keyspace results.

    Usage::

        console = KeyspaceConsole()
        output = KeyspaceConsoleOutput(console)
        output.display_reading(engine.evaluate(candidate))
        output.display_attack(engine.simulate_attack(candidate))
    """

    def __init__(self, console: Optional[KeyspaceConsole] = None) -> None:
        """Initialise the console output formatter.

        Args:
            console: KeyspaceConsole instance. Creates one if not provided.
        """
        self.console = console or KeyspaceConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength Meter
    # ------------------------------------------------------------------ #

    def display_reading(
        self,
        reading: MeterReading,
        match: Optional[RequirementCheck] = None,
    ) -> None:
        """Display the strength meter and requirement checklist.

        Args:
            reading: MeterReading from the engine.
            match: Optional confirmation check shown under the checklist.
        """
        self.console.section("Strength Meter")

        estimate = reading.estimate
        colour = (
            _STRENGTH_COLOURS.get(estimate.label.value, "white")
            if reading.length
            else "dim"
        )

        meter = Text()
        meter.append(self.meter_bar(estimate.percent))
        meter.append(f"  {estimate.percent:>3}%  ", style="bold")
        meter.append(reading.display_label, style=colour)
        meter.append(f"  · {estimate.bits} bits", style="dim")

        self._rich.print(Panel(meter, title="Strength", border_style="cyan"))

        checks = list(reading.requirements)
        if match is not None:
            checks.append(match)
        self._rich.print(self._checklist(checks))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Password", reading.password_masked or "-")
        tbl.add_row("Length", str(reading.length))
        tbl.add_row("Character Pool", str(reading.profile.effective_size))
        tbl.add_row("Entropy", f"{estimate.bits:.2f} bits")
        self._rich.print(tbl)

    @staticmethod
    def meter_bar(percent: int, width: int = 40) -> Text:
        """Build a coloured bar *percent* full, red to green left to right."""
        filled = max(0, min(width, int(percent / 100 * width)))
        bar = Text()
        for i in range(width):
            if i >= filled:
                bar.append("░", style="dim")
            elif i < width * 0.25:
                bar.append("█", style="red")
            elif i < width * 0.50:
                bar.append("█", style="yellow")
            elif i < width * 0.75:
                bar.append("█", style="green")
            else:
                bar.append("█", style="bright_green")
        return bar

    @staticmethod
    def _checklist(checks: Sequence[RequirementCheck]) -> Text:
        text = Text()
        for check in checks:
            style = "green" if check.met else "red"
            text.append(f"  {check.marker} {check.label}\n", style=style)
        return text

    # ------------------------------------------------------------------ #
    #  Attack Simulation
    # ------------------------------------------------------------------ #

    def display_attack(self, report: AttackReport, *, animate: bool = False) -> None:
        """Display an attack simulation report.

        Args:
            report: AttackReport from the engine.
            animate: Run a progress bar for ``report.animation_ms`` first.
        """
        self.console.section("Attack Simulation")

        if animate and report.outcome == AttackOutcome.BRUTE_FORCE:
            self._animate(report.animation_ms)

        body = Text()
        body.append(report.headline + "\n", style="bold")
        if report.time_text:
            body.append(report.time_text)

        self._rich.print(Panel(
            body,
            title="Result",
            border_style=_OUTCOME_BORDERS.get(report.outcome, "cyan"),
        ))

        crack = report.crack
        if crack is not None and not crack.dictionary_hit:
            self.console.table(
                "Search Space",
                ["Guess Rate", "log10(Guesses)", "Total Guesses", "Seconds"],
                [[
                    f"{crack.guess_rate:.0e} g/s",
                    f"{crack.log10_guesses:.2f}",
                    f"{crack.total_guesses:.3e}",
                    f"{crack.seconds:.3e}",
                ]],
            )

    def _animate(self, duration_ms: float) -> None:
        delay = duration_ms / 1000 / _ANIMATION_STEPS
        with self.console.progress("Brute-forcing", total=_ANIMATION_STEPS) as (prog, task):
            for _ in range(_ANIMATION_STEPS):
                time.sleep(delay)
                prog.update(task, advance=1)

    # ------------------------------------------------------------------ #
    #  Suggestions
    # ------------------------------------------------------------------ #

    def display_suggestions(self, suggestions: Sequence[tuple[str, MeterReading]]) -> None:
        """Display generated passwords with their strength."""
        self.console.section("Suggested Passwords")
        rows = [
            [password, reading.display_label, f"{reading.estimate.bits:.2f}"]
            for password, reading in suggestions
        ]
        self.console.table(
            "Suggestions",
            ["Password", "Strength", "Entropy (bits)"],
            rows,
            styles=["bold bright_white", "", ""],
        )
