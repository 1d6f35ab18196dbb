"""Rich Console factory and theme for bitsctl output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract.  In non-TTY environments (tests, pipes) Rich
disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BITS_THEME = Theme(
    {
        "bits.ok": "bold green",
        "bits.error": "bold red",
        "bits.op": "bold cyan",
        "bits.key": "dim",
        "bits.value": "bold",
        "bits.version": "dim",
        "bits.literal": "green",
        "bits.operator": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BITS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
