"""Output formatter - the entry point for all terminal rendering.

The OutputFormatter owns a Rich console with no_color support. Dataset views
(pool tables, generated names, descriptions) are built as Rich renderables
and printed through that console.

Usage:
    output = OutputFormatter(no_color=False)
    output.print_names(names)
    output.print(output.pool_table("cityNames", entries, limit=20))
"""

from collections.abc import Sequence
from typing import Optional, Union

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from ..models import NameEntry
from .symbols import SymbolsFormatter

NO_DESCRIPTION = "No description available"


class OutputFormatter:
    """Central formatter that manages the Rich console and symbols.

    Attributes:
        symbols: SymbolsFormatter for emoji/ASCII symbols
    """

    def __init__(self, no_color: bool, console: Optional[Console] = None):
        """Initialize the output formatter.

        Args:
            no_color: If True, disable all colors and styling in output
            console: Console to print through (created if not given)
        """
        self._console = console or Console(
            no_color=no_color,
            force_terminal=None,
            highlight=False,
        )
        self._err_console = Console(stderr=True, no_color=no_color, highlight=False)
        self._symbols = SymbolsFormatter(no_color=no_color)

    @property
    def symbols(self) -> SymbolsFormatter:
        """Get the symbols formatter for emoji/ASCII symbol access."""
        return self._symbols

    def print(self, message: Union[str, RenderableType]) -> None:
        """Print a message or renderable using the Rich console."""
        self._console.print(message, highlight=False)

    def print_heading(self, symbol: str, title: str, subtitle: str = "") -> None:
        line = Text()
        line.append(f"{symbol} ")
        line.append(title, style="bold cyan")
        if subtitle:
            line.append(f" {subtitle}", style="dim")
        self.print(line)

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        line = Text()
        line.append(f"{self._symbols.Warning} ", style="yellow")
        line.append("Warning: ", style="bold yellow")
        line.append(message)
        self._err_console.print(line, highlight=False)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        line = Text()
        line.append(f"{self._symbols.Cross} ", style="red")
        line.append("Error: ", style="bold red")
        line.append(message)
        self._err_console.print(line, highlight=False)

    def print_names(
        self,
        names: Sequence[str],
        descriptions: Optional[Sequence[Optional[str]]] = None,
    ) -> None:
        """Print generated names, one per line, optionally with descriptions.

        Args:
            names: Generated names
            descriptions: Description per name, None where lookup missed
        """
        for i, name in enumerate(names, 1):
            line = Text()
            line.append(f"{i:>3}. ", style="dim")
            line.append(name, style="bold")
            self.print(line)
            if descriptions is not None:
                description = descriptions[i - 1]
                detail = Text("     ")
                if description:
                    detail.append(description, style="italic")
                else:
                    detail.append(NO_DESCRIPTION, style="dim")
                self.print(detail)

    def pool_table(self, pool_name: str, entries: Sequence[NameEntry], limit: int) -> Table:
        """Build a table of the first `limit` entries of a pool."""
        shown = entries[:limit]
        caption = None
        if len(entries) > len(shown):
            caption = f"showing {len(shown)} of {len(entries)}"

        table = Table(title=pool_name, caption=caption, title_justify="left", show_lines=False)
        table.add_column("Name", style="bold cyan", no_wrap=True)
        table.add_column("Description")
        for entry in shown:
            table.add_row(entry.name, entry.description or Text(NO_DESCRIPTION, style="dim"))
        return table
