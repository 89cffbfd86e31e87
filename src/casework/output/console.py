"""Rich Console factory and theme for casework output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops
color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CASEWORK_THEME = Theme(
    {
        "cw.ok": "bold green",
        "cw.error": "bold red",
        "cw.warning": "bold yellow",
        "cw.op": "bold cyan",
        "cw.key": "dim",
        "cw.slug": "bold blue",
        "cw.title": "bold",
        "cw.metric": "magenta",
        "cw.type.detailed": "green",
        "cw.type.summary": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=CASEWORK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_content_type(content_type: str) -> str:
    """Return the Rich style name for a case study content type."""
    return f"cw.type.{content_type}" if content_type in ("detailed", "summary") else ""
