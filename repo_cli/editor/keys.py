"""Key events and the parser that produces them from raw terminal input.

Raw mode hands us bytes exactly as the terminal sends them: printable
characters, single control bytes (Ctrl+C arrives as ``\\x03`` because raw
mode disables signal generation) and multi-byte escape sequences for the
navigation keys. :class:`KeyParser` turns that stream into
:class:`KeyEvent` objects using a trie of the escape sequences we know.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, List, Optional, Union


class KeyKind(enum.Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    INTERRUPT = "interrupt"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press. ``char`` is only set for ``CHAR``."""

    kind: KeyKind
    char: Optional[str] = None

    @classmethod
    def of_char(cls, char: str) -> "KeyEvent":
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return cls(KeyKind.CHAR, char)

    def __repr__(self) -> str:
        if self.kind is KeyKind.CHAR:
            return f"KeyEvent.Char({self.char!r})"
        return f"KeyEvent.{self.kind.name}"


ENTER = KeyEvent(KeyKind.ENTER)
BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
DELETE = KeyEvent(KeyKind.DELETE)
LEFT = KeyEvent(KeyKind.LEFT)
RIGHT = KeyEvent(KeyKind.RIGHT)
HOME = KeyEvent(KeyKind.HOME)
END = KeyEvent(KeyKind.END)
INTERRUPT = KeyEvent(KeyKind.INTERRUPT)
OTHER = KeyEvent(KeyKind.OTHER)


ESC = "\x1b"

# Single control bytes. Anything below 0x20 not listed here is ignored.
_CONTROL_KEYS: Dict[str, KeyEvent] = {
    "\r": ENTER,
    "\n": ENTER,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,  # Ctrl+H
    "\x03": INTERRUPT,  # Ctrl+C
    "\x01": HOME,  # Ctrl+A
    "\x05": END,  # Ctrl+E
    "\x02": LEFT,  # Ctrl+B
    "\x06": RIGHT,  # Ctrl+F
    "\x04": DELETE,  # Ctrl+D
}

_ESCAPE_SEQUENCES: Dict[str, KeyEvent] = {
    # Arrows
    "\x1b[D": LEFT,
    "\x1b[C": RIGHT,
    "\x1bOD": LEFT,  # application mode
    "\x1bOC": RIGHT,
    # Up/down have nothing to do on a single line
    "\x1b[A": OTHER,
    "\x1b[B": OTHER,
    "\x1bOA": OTHER,
    "\x1bOB": OTHER,
    # Home
    "\x1b[H": HOME,  # xterm
    "\x1bOH": HOME,  # application mode
    "\x1b[1~": HOME,  # tmux/linux
    "\x1b[7~": HOME,  # rxvt
    # End
    "\x1b[F": END,
    "\x1bOF": END,
    "\x1b[4~": END,
    "\x1b[8~": END,
    # Delete
    "\x1b[3~": DELETE,
}

_Trie = Dict[str, Union["_Trie", KeyEvent]]


def _build_trie(sequences: Dict[str, KeyEvent]) -> _Trie:
    """Build a trie (nested dict) from an escape sequence table."""
    root: _Trie = {}
    for seq, key in sequences.items():
        node = root
        for ch in seq[:-1]:
            node = node.setdefault(ch, {})  # type: ignore[assignment]
        node[seq[-1]] = key
    return root


_ESCAPE_TRIE = _build_trie(_ESCAPE_SEQUENCES)


def decode_char(ch: str) -> KeyEvent:
    """Map a single non-escape character to its key event."""
    key = _CONTROL_KEYS.get(ch)
    if key is not None:
        return key
    if ch < " ":
        return OTHER
    return KeyEvent(KeyKind.CHAR, ch)


class KeyParser:
    """Incremental escape-sequence parser.

    Feed it decoded text with :meth:`feed`; it returns every complete key
    found so far and keeps a partial escape sequence buffered. When no more
    input is coming (the caller's read timed out), :meth:`flush` resolves
    the partial sequence.
    """

    def __init__(self) -> None:
        self._esc_buf: List[str] = []
        self._esc_node: Optional[_Trie] = None
        # Inside an unrecognised CSI sequence, waiting for its final byte.
        self._skipping = False

    @property
    def pending(self) -> bool:
        """True while part of an escape sequence is buffered."""
        return bool(self._esc_buf)

    def feed(self, text: str) -> List[KeyEvent]:
        keys: List[KeyEvent] = []
        for ch in text:
            keys.extend(self._feed_char(ch))
        return keys

    def flush(self) -> List[KeyEvent]:
        """Resolve a buffered partial sequence.

        A lone ESC and an unfinished sequence both count as an ignored key.
        """
        if not self._esc_buf:
            return []
        self._reset()
        return [OTHER]

    def _feed_char(self, ch: str) -> List[KeyEvent]:
        if ch == ESC and self._esc_buf:
            # A new sequence starts before the old one finished
            self._reset()
            return [OTHER] + self._feed_char(ch)

        if self._skipping:
            self._esc_buf.append(ch)
            if _is_csi_final(ch):
                self._reset()
                return [OTHER]
            return []

        if self._esc_node is None:
            if ch == ESC:
                self._esc_buf = [ch]
                self._esc_node = _ESCAPE_TRIE[ESC]  # type: ignore[assignment]
                return []
            return [decode_char(ch)]

        node = self._esc_node.get(ch)
        if node is None:
            # Unknown CSI sequences (Insert, modified arrows, ...) carry
            # parameter bytes; swallow them up to the final byte so they
            # never leak into the buffer as text.
            if self._esc_buf[:2] == [ESC, "["] and not _is_csi_final(ch):
                self._esc_buf.append(ch)
                self._skipping = True
                return []
            self._reset()
            return [OTHER]
        if isinstance(node, dict):
            self._esc_buf.append(ch)
            self._esc_node = node
            return []

        self._reset()
        return [node]

    def _reset(self) -> None:
        self._esc_buf = []
        self._esc_node = None
        self._skipping = False


def _is_csi_final(ch: str) -> bool:
    return "\x40" <= ch <= "\x7e"
