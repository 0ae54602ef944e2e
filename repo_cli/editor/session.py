"""Interactive line input on top of the raw-mode terminal.

``read_line`` runs one editing session: raw mode is entered, keys are fed
through :func:`~repo_cli.editor.engine.apply` and the line is redrawn
after every change until the user submits (Enter) or cancels (Ctrl+C).
Raw mode is released before the result reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..utils import Ansi, console
from .engine import EditResult, RedrawInstruction, Submitted, apply, initial_state, redraw
from .terminal import Terminal

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Input cannot be empty. Please try again."

_default_terminal: Optional[Terminal] = None


class InputCancelled(Exception):
    """The user cancelled the prompt.

    Deliberately not an :class:`OSError`: cancelling is a normal outcome,
    not a failure, and must never look like an empty answer.
    """


def default_terminal() -> Terminal:
    """Return the process-wide terminal bound to stdin/stdout."""
    global _default_terminal
    if _default_terminal is None:
        _default_terminal = Terminal()
    return _default_terminal


def _render(terminal: Terminal, instruction: RedrawInstruction) -> None:
    terminal.clear_line()
    terminal.write(instruction.text)
    terminal.move_to_column(instruction.column)
    terminal.flush()


def run_session(prompt: str, terminal: Terminal) -> EditResult:
    """Run one editing session and return its outcome.

    I/O errors from reading keys or writing output propagate once raw mode
    has been released.
    """
    state = initial_state(prompt)
    with terminal.raw_mode():
        terminal.write(prompt)
        terminal.flush()
        while True:
            event = terminal.read_key()
            new_state, outcome = apply(state, event)
            if outcome is not None:
                break
            if new_state != state:
                _render(terminal, redraw(new_state))
            state = new_state

    # Back in cooked mode; finish the input line.
    terminal.write("\n")
    terminal.flush()
    logger.debug("session for %r finished: %s", prompt, type(outcome).__name__)
    return outcome


def read_line(prompt: str, terminal: Optional[Terminal] = None) -> str:
    """Prompt for one line of free-form input.

    Raises :class:`InputCancelled` if the user interrupts.
    """
    result = run_session(prompt, terminal or default_terminal())
    if isinstance(result, Submitted):
        return result.text
    raise InputCancelled(prompt)


def read_non_empty_line(prompt: str, terminal: Optional[Terminal] = None) -> str:
    """Like :func:`read_line` but re-prompts until the answer is non-empty."""
    while True:
        line = read_line(prompt, terminal)
        if line:
            return line
        console.print(Ansi.style(EMPTY_INPUT_MESSAGE, Ansi.FG_YELLOW))
