"""Shared helpers for create-bmd.

Provides the Rich console and its coloured output helpers, plus the two name
transforms used to derive output file and folder names from a mod name.
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

_WORD_SEPARATORS = re.compile(r"[\s\-_]+")


def to_camel_case(value: str) -> str:
    """Convert a human-readable name to ``camelCase``.

    Spaces, hyphens and underscores separate words.  Every word is
    lowercased, then every word after the first gets an uppercase initial.

    Examples::

        to_camel_case("My Cool Mod")   -> "myCoolMod"
        to_camel_case("send_DM-reply") -> "sendDmReply"
    """
    words = _WORD_SEPARATORS.split(value.strip())
    result: list[str] = []
    for index, word in enumerate(words):
        lower = word.lower()
        if index == 0:
            result.append(lower)
        else:
            result.append(lower[:1].upper() + lower[1:])
    return "".join(result)


def sanitize_folder_name(name: str) -> str:
    """Strip whitespace and special characters from a folder name.

    Only letters, digits, underscores and hyphens survive.

    Examples::

        sanitize_folder_name("Weird!! Name") -> "WeirdName"
        sanitize_folder_name("my-theme v2")  -> "my-themev2"
    """
    collapsed = re.sub(r"\s+", "", name)
    return re.sub(r"[^\w-]", "", collapsed, flags=re.ASCII)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a dimmed informational message."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_step(message: str) -> None:
    """Print a blue progress step."""
    console.print(f"[bold blue]{escape(message)}[/bold blue]")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()
