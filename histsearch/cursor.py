"""An editable line of text with a cursor position and word-wise movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WordJumpMode(Enum):
    """How word boundaries are found when jumping by word."""

    EMACS = "emacs"
    SUBL = "subl"


@dataclass(frozen=True)
class WordJumper:
    """Finds word positions in a string according to a jump mode."""

    word_chars: str
    word_jump_mode: WordJumpMode

    def _is_word_char(self, c: str) -> bool:
        return c in self.word_chars

    def _is_word_boundary(self, c: str, next_c: str) -> bool:
        return (
            (c.isspace() and not next_c.isspace())
            or (not c.isspace() and next_c.isspace())
            or (self._is_word_char(c) and not self._is_word_char(next_c))
            or (not self._is_word_char(c) and self._is_word_char(next_c))
        )

    def _emacs_next(self, source: str, index: int) -> int:
        stop = max(len(source) - 1, 0)
        start = next(
            (i for i in range(index + 1, stop) if self._is_word_char(source[i])),
            len(source),
        )
        return next(
            (i for i in range(start + 1, stop) if not self._is_word_char(source[i])),
            len(source),
        )

    def _emacs_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if self._is_word_char(source[i])),
            0,
        )
        found = next(
            (i for i in reversed(range(1, start)) if not self._is_word_char(source[i])),
            None,
        )
        return 0 if found is None else found + 1

    def _subl_next(self, source: str, index: int) -> int:
        stop = max(len(source) - 1, 0)
        boundary = next(
            (
                i
                for i in range(index, stop)
                if self._is_word_boundary(source[i], source[i + 1])
            ),
            None,
        )
        if boundary is None:
            return len(source)
        return next(
            (i for i in range(boundary + 1, len(source)) if not source[i].isspace()),
            len(source),
        )

    def _subl_prev(self, source: str, index: int) -> int:
        start = next(
            (i for i in reversed(range(1, index)) if not source[i].isspace()),
            None,
        )
        if start is None:
            return 0
        return next(
            (
                i
                for i in reversed(range(1, start))
                if self._is_word_boundary(source[i - 1], source[i])
            ),
            0,
        )

    def next_word_pos(self, source: str, index: int) -> int:
        """Position of the next word end/start after ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_next(source, index)
        return self._subl_next(source, index)

    def prev_word_pos(self, source: str, index: int) -> int:
        """Position of the previous word start before ``index``."""
        if self.word_jump_mode is WordJumpMode.EMACS:
            return self._emacs_prev(source, index)
        return self._subl_prev(source, index)


class Cursor:
    """A string being edited together with the cursor index into it."""

    def __init__(self, source: str = "", index: int = 0) -> None:
        self.source = source
        self.index = index

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        return f"Cursor(source={self.source!r}, index={self.index})"

    def substring(self) -> str:
        """The text before the cursor."""
        return self.source[: self.index]

    def char(self) -> str | None:
        """The character under the cursor, or None at the end."""
        if self.index < len(self.source):
            return self.source[self.index]
        return None

    def right(self) -> None:
        if self.index < len(self.source):
            self.index += 1

    def left(self) -> bool:
        """Move one character left; return whether the cursor moved."""
        if self.index > 0:
            self.index -= 1
            return True
        return False

    def next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.next_word_pos(self.source, self.index)

    def prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        self.index = jumper.prev_word_pos(self.source, self.index)

    def insert(self, c: str) -> None:
        """Insert text at the cursor and move past it."""
        self.source = self.source[: self.index] + c + self.source[self.index :]
        self.index += len(c)

    def remove(self) -> str | None:
        """Remove and return the character under the cursor."""
        if self.index < len(self.source):
            removed = self.source[self.index]
            self.source = self.source[: self.index] + self.source[self.index + 1 :]
            return removed
        return None

    def remove_next_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        end = jumper.next_word_pos(self.source, self.index)
        self.source = self.source[: self.index] + self.source[end:]

    def remove_prev_word(self, word_chars: str, word_jump_mode: WordJumpMode) -> None:
        jumper = WordJumper(word_chars, word_jump_mode)
        start = jumper.prev_word_pos(self.source, self.index)
        self.source = self.source[:start] + self.source[self.index :]
        self.index = start

    def back(self) -> str | None:
        """Delete the character before the cursor and return it."""
        if self.left():
            return self.remove()
        return None

    def clear(self) -> None:
        self.source = ""
        self.index = 0

    def end(self) -> None:
        self.index = len(self.source)

    def start(self) -> None:
        self.index = 0