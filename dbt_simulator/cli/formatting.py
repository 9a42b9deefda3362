"""Rich formatting helpers for CLI output."""

from __future__ import annotations

from rich.panel import Panel
from rich.syntax import Syntax

PANEL_WIDTH = 78


def syntax_highlight_sql(code: str, line_numbers: bool = False) -> Syntax:
    """Syntax-highlighted SQL block for compiled model previews."""
    return Syntax(
        code,
        "sql",
        theme="monokai",
        line_numbers=line_numbers,
        background_color="default",
        word_wrap=True,
    )


def _panel(message: str, detail: str | None, color: str, title: str) -> Panel:
    content = f"[bold {color}]{message}[/bold {color}]"
    if detail:
        content += f"\n\n[dim]{detail}[/dim]"
    return Panel(
        content,
        title=f"[bold {color}]{title}[/bold {color}]",
        border_style=color,
        width=PANEL_WIDTH,
        expand=False,
    )


def format_error(message: str, context: str | None = None) -> Panel:
    """Error panel with an optional hint for resolution."""
    return _panel(message, context, "red", "Error")


def format_warning(message: str, context: str | None = None) -> Panel:
    return _panel(message, context, "yellow", "Warning")


def format_success(message: str, details: str | None = None) -> Panel:
    return _panel(f"✓ {message}", details, "green", "Success")
