"""Rich Console factory and theme for orderctl output.

Consoles render to a StringIO buffer so renderers keep a
``format_result() -> str`` contract. Rich drops color codes automatically
when the target is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ORDER_THEME = Theme(
    {
        "order.ok": "bold green",
        "order.error": "bold red",
        "order.warning": "bold yellow",
        "order.op": "bold cyan",
        "order.key": "dim",
        "order.id": "bold blue",
        "order.money": "bold magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ORDER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
