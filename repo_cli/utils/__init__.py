from .ansi import (
    Ansi,
    SUCCESS_LABEL,
    ERROR_LABEL,
    console,
    err_console,
)
from .prompt import strip_ansi, visible_width
from .spinner import Spinner

__all__ = [
    "Ansi",
    "SUCCESS_LABEL",
    "ERROR_LABEL",
    "console",
    "err_console",
    "strip_ansi",
    "visible_width",
    "Spinner",
]
