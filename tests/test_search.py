"""Tests for character-aware literal search."""

import unittest

import pytest

from substring_replace.search import char_find, char_rfind


class TestCharFind(unittest.TestCase):
    """Test suite for char_find."""

    def test_reports_character_index_not_byte_index(self) -> None:
        """1. Multibyte: The index counts characters, not bytes."""
        assert char_find("a🐕cd🐕fg", "🐕") == 1
        assert char_find("a🐕cd🐕fg", "cd") == 2
        assert char_find("こんにちは世界", "世界") == 5

    def test_leftmost_occurrence(self) -> None:
        """2. Order: The first of several occurrences is reported."""
        assert char_find("a-b-c", "-") == 1

    def test_overlapping_candidates_not_skipped(self) -> None:
        """3. Overlap: A partial match does not hide a match starting inside it."""
        assert char_find("aaab", "aab") == 1
        assert char_find("abababc", "ababc") == 2

    def test_no_match(self) -> None:
        """4. No Match: Empty patterns, missing patterns and long patterns yield None."""
        assert char_find("abc", "") is None
        assert char_find("abc", "x") is None
        assert char_find("ab", "abc") is None
        assert char_find("", "a") is None

    def test_whole_text_match(self) -> None:
        """5. Full Match: A pattern equal to the text is found at 0."""
        assert char_find("नमस्ते", "नमस्ते") == 0


class TestCharRfind(unittest.TestCase):
    """Test suite for char_rfind."""

    def test_reports_start_of_last_occurrence(self) -> None:
        """1. Multibyte: The start of the last occurrence is reported by character index."""
        assert char_rfind("a🐕cd🐕fg", "🐕") == 4
        assert char_rfind("नमस्ते नमस्ते", "नम") == 7

    def test_overlapping_occurrences(self) -> None:
        """2. Overlap: The rightmost overlapping occurrence wins."""
        assert char_rfind("aaaa", "aa") == 2
        assert char_rfind("long-file-name.revised.jpg", ".") == 22

    def test_no_match(self) -> None:
        """3. No Match: Empty and missing patterns yield None."""
        assert char_rfind("abc", "") is None
        assert char_rfind("abc", "cb") is None
        assert char_rfind("", "") is None

    def test_single_occurrence_agrees_with_find(self) -> None:
        """4. Agreement: With one occurrence both directions report the same index."""
        assert char_rfind("We can't solve", "solve") == char_find("We can't solve", "solve") == 9


def test_invalid_text_rejected() -> None:
    """Text without a UTF-8 form raises ValueError."""
    with pytest.raises(ValueError, match="UTF-8"):
        char_find("\udc80abc", "a")


if __name__ == "__main__":
    unittest.main()
