"""Tests for the reporter classes."""

import unittest

from substring_replace.edit_state import PATTERN_NOT_FOUND, StepOutcome
from substring_replace.reporters import SummaryReporter
from substring_replace.workflow import StepResult, TaskResult


class TestSummaryReporter(unittest.TestCase):
    """Test suite for SummaryReporter."""

    def test_summary_counts_outcomes(self) -> None:
        """1. Counts: Applied and unchanged steps are counted, and misses are explained."""
        result = TaskResult(
            task_name="demo",
            original_text="a🐫defg",
            final_text="a🐫bcdefg",
            steps=[
                StepResult(index=0, op="substring_insert", outcome=StepOutcome.APPLIED),
                StepResult(index=1, op="insert_between", outcome=StepOutcome.UNCHANGED, reason=PATTERN_NOT_FOUND),
            ],
        )

        with self.assertLogs("substring_replace.reporters.summary_reporter", level="INFO") as cm:
            SummaryReporter().generate(result)

        output = "\n".join(cm.output)
        assert "Task Execution Summary for 'demo'" in output
        assert "Total steps: 2" in output
        assert "Applied: 1" in output
        assert "Unchanged: 1" in output
        assert "step 1 (insert_between): search:not_found" in output
        assert "Characters: 6 -> 8" in output

    def test_summary_without_steps(self) -> None:
        """2. Empty: A task with no steps still produces a summary."""
        result = TaskResult(task_name="empty", original_text="", final_text="")

        with self.assertLogs("substring_replace.reporters.summary_reporter", level="INFO") as cm:
            SummaryReporter().generate(result)

        assert any("Total steps: 0" in line for line in cm.output)


if __name__ == "__main__":
    unittest.main()
