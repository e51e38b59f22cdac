"""
PassGauge Console Interface
============================

Rich-powered console abstraction providing a consistent presentation
layer for the PassGauge command-line interface.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, severity-coloured messages and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all PassGauge output
# ---------------------------------------------------------------------------
_GAUGE_THEME = Theme(
    {
        "gauge.banner": "bold bright_cyan",
        "gauge.section": "bold bright_magenta",
        "gauge.success": "bold green",
        "gauge.warning": "bold yellow",
        "gauge.error": "bold red",
        "gauge.info": "bold bright_blue",
        "gauge.dim": "dim white",
        "gauge.highlight": "bold bright_white",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ___                ___
 | _ \__ _ ______   / __|__ _ _  _ __ _ ___
 |  _/ _` (_-<_-<  | (_ / _` | || / _` / -_)
 |_| \__,_/__/__/   \___\__,_|\_,_\__, \___|
                                  |___/
[/bright_cyan]"""

_TAGLINE = "Password Strength Heuristics"


class GaugeConsole:
    """Unified console interface for PassGauge.

    Usage::

        con = GaugeConsole()
        con.banner()
        con.section("Analysis")
        con.success("Done")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for text export.
        """
        self._console = Console(
            theme=_GAUGE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassGauge ASCII-art banner."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[gauge.highlight]{_TAGLINE}[/gauge.highlight]\n"
            f"[gauge.dim]Version: {version}  |  {now}[/gauge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="gauge.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[gauge.success][✔] SUCCESS:[/gauge.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[gauge.warning][⚠] WARNING:[/gauge.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[gauge.error][✘] ERROR:[/gauge.error] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message."""
        self._console.print(
            f"[gauge.info][ℹ] INFO:[/gauge.info] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

