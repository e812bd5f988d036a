"""Tests for the edit_state module."""

import dataclasses
import unittest

import pytest

from substring_replace.edit_state import EMPTY_RANGE, IDENTITY_EDIT, PATTERN_NOT_FOUND, NoChangeReason, StepOutcome


class TestStepOutcome(unittest.TestCase):
    """Test suite for StepOutcome enum."""

    def test_enum_values_are_strings(self) -> None:
        """1. StepOutcome values are strings for logging and reports."""
        assert StepOutcome.APPLIED == "applied"
        assert StepOutcome.UNCHANGED == "unchanged"

    def test_all_outcomes_are_unique(self) -> None:
        """2. All StepOutcome values are unique."""
        values = [outcome.value for outcome in StepOutcome]
        assert len(values) == len(set(values))


class TestNoChangeReason(unittest.TestCase):
    """Test suite for NoChangeReason dataclass."""

    def test_reason_is_immutable(self) -> None:
        """1. NoChangeReason is a frozen dataclass."""
        reason = NoChangeReason(category="search", code="test")
        with pytest.raises(dataclasses.FrozenInstanceError):
            reason.code = "modified"  # type: ignore[misc]

    def test_reason_str_representation(self) -> None:
        """2. NoChangeReason renders with and without a message."""
        assert str(NoChangeReason(category="range", code="empty_range", message="Nothing addressed")) == "range:empty_range (Nothing addressed)"
        assert str(NoChangeReason(category="edit", code="identity")) == "edit:identity"

    def test_predefined_reasons(self) -> None:
        """3. Predefined constants carry the expected category and code."""
        assert (PATTERN_NOT_FOUND.category, PATTERN_NOT_FOUND.code) == ("search", "not_found")
        assert (EMPTY_RANGE.category, EMPTY_RANGE.code) == ("range", "empty_range")
        assert (IDENTITY_EDIT.category, IDENTITY_EDIT.code) == ("edit", "identity")

    def test_reasons_compare_by_value(self) -> None:
        """4. Equal fields make equal reasons."""
        assert NoChangeReason(category="search", code="x") == NoChangeReason(category="search", code="x")
        assert NoChangeReason(category="search", code="x") != NoChangeReason(category="range", code="x")


if __name__ == "__main__":
    unittest.main()
