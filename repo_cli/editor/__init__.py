from .engine import (
    CANCELLED,
    Cancelled,
    EditorState,
    EditResult,
    RedrawInstruction,
    Submitted,
    apply,
    initial_state,
    redraw,
)
from .keys import KeyEvent, KeyKind, KeyParser
from .session import (
    EMPTY_INPUT_MESSAGE,
    InputCancelled,
    default_terminal,
    read_line,
    read_non_empty_line,
    run_session,
)
from .terminal import NotATerminalError, Terminal, TerminalBusyError, TerminalRestoreError

__all__ = [
    "CANCELLED",
    "Cancelled",
    "EditorState",
    "EditResult",
    "RedrawInstruction",
    "Submitted",
    "apply",
    "initial_state",
    "redraw",
    "KeyEvent",
    "KeyKind",
    "KeyParser",
    "EMPTY_INPUT_MESSAGE",
    "InputCancelled",
    "default_terminal",
    "read_line",
    "read_non_empty_line",
    "run_session",
    "NotATerminalError",
    "Terminal",
    "TerminalBusyError",
    "TerminalRestoreError",
]
