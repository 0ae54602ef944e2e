"""Pure line-editing state machine.

No I/O happens here: :func:`apply` takes the current :class:`EditorState`
and one :class:`~repo_cli.editor.keys.KeyEvent` and returns the next state
together with an outcome (``None`` while editing continues). The session
layer owns the terminal and decides what to draw.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ..utils.prompt import visible_width
from .keys import KeyEvent, KeyKind


@dataclass(frozen=True)
class EditorState:
    """Buffer plus cursor for one prompt.

    ``cursor`` indexes into ``buffer`` and always satisfies
    ``0 <= cursor <= len(buffer)``.
    """

    prompt: str = ""
    buffer: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.cursor <= len(self.buffer):
            raise ValueError(
                f"cursor {self.cursor} outside buffer of length {len(self.buffer)}"
            )


@dataclass(frozen=True)
class Submitted:
    text: str


@dataclass(frozen=True)
class Cancelled:
    pass


EditResult = Union[Submitted, Cancelled]

CANCELLED = Cancelled()


@dataclass(frozen=True)
class RedrawInstruction:
    """Full line to print and the 0-based column to leave the cursor at."""

    text: str
    column: int


def initial_state(prompt: str) -> EditorState:
    return EditorState(prompt=prompt)


def apply(
    state: EditorState, event: KeyEvent
) -> Tuple[EditorState, Optional[EditResult]]:
    """Apply *event* to *state*.

    Boundary moves and deletions (Backspace at the start, Delete at the
    end, ...) are no-ops and return *state* itself.
    """
    buf, cur = state.buffer, state.cursor
    kind = event.kind

    if kind is KeyKind.ENTER:
        return state, Submitted(buf)
    if kind is KeyKind.INTERRUPT:
        return state, CANCELLED

    if kind is KeyKind.CHAR:
        return replace(state, buffer=buf[:cur] + event.char + buf[cur:], cursor=cur + 1), None

    if kind is KeyKind.BACKSPACE:
        if cur > 0:
            return replace(state, buffer=buf[: cur - 1] + buf[cur:], cursor=cur - 1), None
    elif kind is KeyKind.DELETE:
        if cur < len(buf):
            return replace(state, buffer=buf[:cur] + buf[cur + 1 :]), None
    elif kind is KeyKind.LEFT:
        if cur > 0:
            return replace(state, cursor=cur - 1), None
    elif kind is KeyKind.RIGHT:
        if cur < len(buf):
            return replace(state, cursor=cur + 1), None
    elif kind is KeyKind.HOME:
        if cur != 0:
            return replace(state, cursor=0), None
    elif kind is KeyKind.END:
        if cur != len(buf):
            return replace(state, cursor=len(buf)), None

    return state, None


def redraw(state: EditorState) -> RedrawInstruction:
    return RedrawInstruction(
        text=state.prompt + state.buffer,
        column=visible_width(state.prompt) + state.cursor,
    )
