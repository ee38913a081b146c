"""Shared utility functions for gbc-admin.

Provides the name-case transforms used for menu labels and generated
identifiers, plus Rich-based console reporting.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def snake_case(name: str) -> str:
    """Convert an identifier to ``snake_case``.

    Splits on acronym and lower-to-upper boundaries, turns every run of
    non-alphanumeric characters into a single underscore and trims
    leading/trailing underscores.

    Examples::

        snake_case("UserGroup")     -> "user_group"
        snake_case("User_Profile")  -> "user_profile"
        snake_case("HTMLParser")    -> "html_parser"
        snake_case("__user__group") -> "user_group"
    """
    result = _ACRONYM_BOUNDARY.sub(r"\1_\2", name.strip())
    result = _WORD_BOUNDARY.sub(r"\1_\2", result)
    result = _SEPARATORS.sub("_", result)
    return result.strip("_").lower()


def pascal_case(name: str) -> str:
    """Convert an identifier to ``PascalCase``.

    ``pascal_case("user_group") -> "UserGroup"``
    """
    return "".join(part.capitalize() for part in snake_case(name).split("_") if part)


def humanize(key: str) -> str:
    """Turn a config key into a display string.

    ``humanize("sales_report") -> "Sales report"``
    """
    text = re.sub(r"[_\s]+", " ", key).strip().lower()
    return text[:1].upper() + text[1:]


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STATUS_COLORS: dict[str, str] = {
    "building": "cyan",
    "create": "green",
    "exist": "blue",
    "identical": "blue",
    "skip": "yellow",
    "force": "yellow",
    "append": "green",
    "conflict": "red",
}

_STATUS_WIDTH = 12


def say_status(action: str, message: str) -> None:
    """Print a generator status line: a right-aligned coloured action, then *message*."""
    color = STATUS_COLORS.get(action, "white")
    console.print(f"[bold {color}]{action:>{_STATUS_WIDTH}}[/bold {color}]  {escape(message)}")


def print_summary_table(
    rows: list[dict[str, str]], columns: list[str], title: str = "Summary"
) -> None:
    """Print a table with one row per mapping in *rows*.

    Args:
        rows: Each mapping supplies a value for every name in *columns*.
        columns: Column headers, in display order.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column)

    for row in rows:
        table.add_row(*(escape(str(row.get(column, ""))) for column in columns))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
