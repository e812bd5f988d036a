"""A thin immutable wrapper exposing the engine operations as methods."""

from __future__ import annotations

from dataclasses import dataclass

from . import engine
from .engine import Address
from .index_translator import encode_text, to_end_byte_index, to_start_byte_index


@dataclass(frozen=True, slots=True)
class CharText:
    """
    A UTF-8 text addressed by character index.

    Every editing method returns a new CharText and leaves this one untouched.

    Usage example:
        >>> text = CharText("a🐫defg")
        >>> str(text.substring_insert("bc", 2))
        'a🐫bcdefg'
        >>> text.char_len()
        6

    """

    value: str

    def __post_init__(self) -> None:
        """Reject text that has no UTF-8 form."""
        encode_text(self.value)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return self.char_len()

    def char_len(self) -> int:
        """Return the number of scalar values."""
        return engine.char_len(self.value)

    def to_start_byte_index(self, char_index: int) -> int:
        """Return the byte offset where the character at char_index starts."""
        return to_start_byte_index(self.value, char_index)

    def to_end_byte_index(self, char_index: int) -> int:
        """Return the exclusive end byte offset for char_index."""
        return to_end_byte_index(self.value, char_index)

    def char_find(self, pattern: str) -> int | None:
        """Return the index of the first occurrence of pattern."""
        return engine.char_find(self.value, pattern)

    def char_rfind(self, pattern: str) -> int | None:
        """Return the index where the last occurrence of pattern begins."""
        return engine.char_rfind(self.value, pattern)

    def substring(self, start: Address, end: Address) -> CharText:
        return CharText(engine.substring(self.value, start, end))

    def substring_start(self, end: Address) -> CharText:
        return CharText(engine.substring_start(self.value, end))

    def substring_end(self, start: Address) -> CharText:
        return CharText(engine.substring_end(self.value, start))

    def substring_offset(self, position: int, length: int) -> CharText:
        return CharText(engine.substring_offset(self.value, position, length))

    def substring_replace(self, replacement: str, start: Address, end: Address) -> CharText:
        return CharText(engine.substring_replace(self.value, replacement, start, end))

    def substring_replace_start(self, replacement: str, end: Address) -> CharText:
        return CharText(engine.substring_replace_start(self.value, replacement, end))

    def substring_replace_end(self, replacement: str, start: Address) -> CharText:
        return CharText(engine.substring_replace_end(self.value, replacement, start))

    def substring_remove(self, start: Address, end: Address) -> CharText:
        return CharText(engine.substring_remove(self.value, start, end))

    def substring_pull(self, position: int, length: int) -> CharText:
        return CharText(engine.substring_pull(self.value, position, length))

    def substring_insert(self, insert: str, at: Address) -> CharText:
        return CharText(engine.substring_insert(self.value, insert, at))

    def insert_adjacent(self, insert: str, pattern: str, *, before: bool = True, first: bool = True) -> CharText:
        return CharText(engine.insert_adjacent(self.value, insert, pattern, before=before, first=first))

    def insert_before_first(self, insert: str, pattern: str) -> CharText:
        return CharText(engine.insert_before_first(self.value, insert, pattern))

    def insert_before_last(self, insert: str, pattern: str) -> CharText:
        return CharText(engine.insert_before_last(self.value, insert, pattern))

    def insert_after_first(self, insert: str, pattern: str) -> CharText:
        return CharText(engine.insert_after_first(self.value, insert, pattern))

    def insert_after_last(self, insert: str, pattern: str) -> CharText:
        return CharText(engine.insert_after_last(self.value, insert, pattern))

    def insert_between(self, insert: str, start_pattern: str, end_pattern: str) -> CharText:
        return CharText(engine.insert_between(self.value, insert, start_pattern, end_pattern))

    def prepend(self, prefix: str) -> CharText:
        return CharText(engine.prepend(self.value, prefix))

    def append(self, suffix: str) -> CharText:
        return CharText(engine.append(self.value, suffix))
