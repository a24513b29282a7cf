"""Rich Console management for CLI output.

Holds one stdout console for results and one stderr console for errors,
plus the table layout used to print result rows. Text passed in is
escaped, so catalog values containing "[" are printed literally.
"""

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get or create the stdout Rich Console."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_error_console() -> Console:
    """Get or create the stderr Rich Console."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True)
    return _error_console


def safe_print(message: str, style: str | None = None) -> None:
    """Print plain text to stdout with optional styling.

    Args:
        message: Text to print; markup in it is not interpreted
        style: Optional Rich style string (e.g., "bold red", "green")
    """
    get_console().print(escape(message), style=style)


def print_error(message: str) -> None:
    """Print an error message to stderr in red."""
    get_error_console().print(escape(message), style="red", soft_wrap=True)


def print_table(
    title: str,
    headers: Sequence[str],
    rows: Iterable[Sequence[Optional[str]]],
    right_aligned: Sequence[str] = (),
) -> int:
    """Print one titled table, e.g. an artist row of shows.

    Args:
        title: Table title
        headers: Column headers
        rows: Cell values per row; None prints as an empty cell
        right_aligned: Headers of columns to right-justify

    Returns:
        Number of rows printed
    """
    table = Table(title=escape(title), title_justify="left")
    for header in headers:
        table.add_column(header, justify="right" if header in right_aligned else "left")

    count = 0
    for row in rows:
        table.add_row(*(escape(cell or "") for cell in row))
        count += 1

    get_console().print(table)
    return count
