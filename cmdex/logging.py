from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "cyan": "#56b6c2",
    "purple": "#c678dd",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "text": PALETTE["fg"],
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
        "alias": PALETTE["purple"],
        "section": f"bold {PALETTE['orange']}",
    }
)

console = Console(theme=_theme, style=PALETTE["fg"])


def print_ok(message: str) -> None:
    """Print a success line; ``message`` is treated as plain text."""
    console.print(f"[ok]{escape(message)}[/]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error line; ``message`` is treated as plain text."""
    console.print(f"[error]{escape(message)}[/]", soft_wrap=True)


def print_plain(message: str) -> None:
    """Print user data verbatim: no markup, highlighting or wrapping."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)
