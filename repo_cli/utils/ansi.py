"""Colour and styling helpers built on :mod:`rich`."""

import os
from rich.console import Console


console = Console()
# Errors go to stderr so they survive output redirection.
err_console = Console(stderr=True)


class Ansi:
    """Lightweight collection of style names used throughout the app."""

    BOLD = "bold"

    FG_GREEN = "green"
    FG_CYAN = "cyan"
    FG_YELLOW = "yellow"
    FG_RED = "red"

    @staticmethod
    def style(text: str, *codes: str) -> str:
        """Return *text* wrapped in rich markup unless ``NO_COLOR`` is set."""
        if os.getenv("NO_COLOR") is not None:
            return text
        style = " ".join(codes)
        return f"[{style}]{text}[/]"


# Common labels used throughout the application
SUCCESS_LABEL = Ansi.style("✅ Repository created successfully!", Ansi.FG_GREEN, Ansi.BOLD)
ERROR_LABEL = Ansi.style("❌ Error creating repository:", Ansi.FG_RED, Ansi.BOLD)
