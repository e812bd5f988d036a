"""Tests for the CharText wrapper type."""

import dataclasses
import unittest

import pytest

from substring_replace import CharText


class TestCharText(unittest.TestCase):
    """Test suite for CharText."""

    def test_methods_return_new_values(self) -> None:
        """1. Immutability: Editing methods return a new CharText and leave the original alone."""
        text = CharText("a🐫defg")
        edited = text.substring_insert("bc", 2)

        assert isinstance(edited, CharText)
        assert str(edited) == "a🐫bcdefg"
        assert str(text) == "a🐫defg"
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.value = "other"  # type: ignore[misc]

    def test_measurements(self) -> None:
        """2. Measurements: Length, byte translation and search report plain numbers."""
        text = CharText("a🐕cd🐕fg")

        assert text.char_len() == len(text) == 7
        assert text.to_start_byte_index(2) == 5
        assert text.to_end_byte_index(99) == len("a🐕cd🐕fg".encode())
        assert text.char_find("🐕") == 1
        assert text.char_rfind("🐕") == 4
        assert text.char_find("x") is None

    def test_chained_edits(self) -> None:
        """3. Chaining: Methods compose like the free functions."""
        result = CharText("We can't solve today's problems.").substring_replace("cannot", 3, 8).substring_end(3).substring_start(6).append("!").prepend("¡")

        assert str(result) == "¡cannot!"

    def test_extraction_methods(self) -> None:
        """4. Extraction: substring, substring_offset and the start/end variants."""
        text = CharText("The strangest tale that ever I heard")

        assert str(text.substring(4, 13)) == "strangest"
        assert str(text.substring_offset(13, -3)) == "est"
        assert str(text.substring(-5, -1)) == "hear"

    def test_editing_methods(self) -> None:
        """5. Editing: Replacement, removal and pattern insertion."""
        text = CharText("abcdefg")

        assert str(text.substring_replace_start("xyz", 3)) == "xyzdefg"
        assert str(text.substring_replace_end("xyz", 3)) == "abcxyz"
        assert str(text.substring_remove(2, 5)) == "abfg"
        assert str(text.substring_pull(3, -2)) == "adefg"
        assert str(CharText("a-b-c").insert_after_last("+", "-")) == "a-b-+c"
        assert str(CharText("a-b-c").insert_before_last("+", "-")) == "a-b+-c"
        assert str(CharText("a-b-c").insert_after_first("+", "-")) == "a-+b-c"
        assert str(CharText("a-b-c").insert_before_first("+", "-")) == "a+-b-c"
        assert str(CharText("a-b-c").insert_adjacent("+", "-", before=False, first=True)) == "a-+b-c"
        assert str(CharText("long-file-name.revised.jpg").insert_between("document", "-", ".")) == "long-document.jpg"

    def test_rejects_unencodable_text(self) -> None:
        """6. Validation: Text without a UTF-8 form is rejected at construction."""
        with pytest.raises(ValueError, match="UTF-8"):
            CharText("\ud800")

    def test_equality(self) -> None:
        """7. Equality: Values compare by content."""
        assert CharText("abc") == CharText("abc")
        assert CharText("abc").substring(0, 0) == CharText("")


if __name__ == "__main__":
    unittest.main()
