"""Console output for the REPL.

Every response is framed by a pair of dashed separator lines, e.g.

    -----------------------------------
    added: read book
    -----------------------------------

Task descriptions are printed as rich Text so that brackets in user input
are never read as console markup.
"""

from typing import Any

from rich.console import Console
from rich.text import Text


class ConsoleSession:
    """Framed output on a rich Console."""

    def __init__(self, console: Console | None = None, separator_width: int = 35) -> None:
        self.console = console or Console(highlight=False)
        self.separator_width = separator_width

    def separator(self) -> None:
        self.console.print("-" * self.separator_width, markup=False, highlight=False)

    def respond(self, *lines: str) -> None:
        """Print lines of plain text inside a frame."""
        self.separator()
        for line in lines:
            self.console.print(Text(line))
        self.separator()

    def error(self, message: str) -> None:
        """Print an error message inside a frame."""
        self.separator()
        self.console.print(Text(message, style="bold red"))
        self.separator()

    def add_rich(self, renderable: Any) -> None:
        """Print a rich renderable (table, panel) inside a frame."""
        self.separator()
        self.console.print(renderable)
        self.separator()
