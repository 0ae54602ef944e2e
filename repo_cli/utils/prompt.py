"""Prompt width helpers for the raw-mode line editor."""

import re


# Regex that matches ANSI CSI escape sequences (e.g. "\033[92m"). It is
# intentionally simple because we only need to skip, not validate.
_ANSI_PATTERN = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Return *text* with every ANSI CSI escape sequence removed."""
    if "\033[" not in text:  # fast-path – no colour codes present
        return text
    return _ANSI_PATTERN.sub("", text)


def visible_width(prompt: str) -> int:
    """Return the number of columns *prompt* occupies on screen.

    Coloured prompts carry escape sequences that the terminal does not
    print, so counting raw characters would put the cursor too far right
    after every redraw. One column per code point; wide and combining
    characters are not accounted for.
    """
    return len(strip_ansi(prompt))
