"""
Gauge Console Output
=====================

Rich-based console formatters for PassGauge: a colour-coded strength
meter, the per-check breakdown and a side-by-side view of both substring
matchers.

Uses the shared console infrastructure for consistent styling.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import GaugeConsole
from gauge.core.models import AnalysisResult, MatchReport, StrengthLabel


_STRENGTH_COLOURS: dict[StrengthLabel, str] = {
    StrengthLabel.WEAK: "bold red",
    StrengthLabel.MODERATE: "bold yellow",
    StrengthLabel.STRONG: "bold bright_green",
}

_MAX_SCORE = 8


class GaugeConsoleOutput:
    """Renders PassGauge results to a :class:`GaugeConsole`."""

    def __init__(self, console: GaugeConsole) -> None:
        self.console = console
        self._rich = console.rich

    # ------------------------------------------------------------------ #
    #  Password analysis
    # ------------------------------------------------------------------ #

    def display_analysis(self, result: AnalysisResult) -> None:
        """Display the strength meter, check breakdown and suggestions."""
        self.console.section("Password Analysis")

        colour = _STRENGTH_COLOURS.get(result.strength, "white")
        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{result.score}/{_MAX_SCORE}  ")
        meter.append("[", style="dim")
        for i in range(_MAX_SCORE):
            if i < result.score:
                meter.append("█" * 4, style=colour)
            else:
                meter.append("░" * 4, style="dim")
        meter.append("]", style="dim")
        meter.append(f"  {result.strength.value.upper()}", style=colour)

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

        tbl = Table(
            title="Checks",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Check", style="bold")
        tbl.add_column("Result", justify="center")
        tbl.add_column("Points", justify="right")
        tbl.add_column("Suggestion")

        for check in result.checks:
            verdict = (
                Text("PASS", style="green") if check.passed
                else Text("FAIL", style="red")
            )
            tbl.add_row(
                check.name.value.replace("_", " ").title(),
                verdict,
                str(check.points),
                check.suggestion or "",
            )

        self._rich.print(tbl)

        if result.weak_tokens:
            self.console.warning(
                "Weak patterns found: " + ", ".join(result.weak_tokens)
            )
        if not result.suggestion:
            self.console.success("No suggestions -- every check passed.")

    # ------------------------------------------------------------------ #
    #  Matcher comparison
    # ------------------------------------------------------------------ #

    def display_match(self, report: MatchReport) -> None:
        """Display both matcher verdicts and the KMP failure table."""
        self.console.section("Substring Match")

        table_row = " ".join(str(v) for v in report.failure_table) or "(empty)"
        self.console.table(
            "Failure Table",
            ["Pattern", "Table"],
            [[report.pattern or "(empty)", table_row]],
        )
        self.console.table(
            "Verdicts",
            ["Algorithm", "Match"],
            [["kmp", report.kmp], ["naive", report.naive]],
            styles=["bold", ""],
        )

        if report.agree:
            self.console.success("Both algorithms agree.")
        else:
            self.console.error("Algorithms disagree.")
