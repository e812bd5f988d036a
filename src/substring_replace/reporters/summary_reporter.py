"""A reporter for generating concise execution summaries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from substring_replace.edit_state import StepOutcome
from substring_replace.index_translator import char_len

if TYPE_CHECKING:
    from substring_replace.workflow import TaskResult

logger = logging.getLogger(__name__)


class SummaryReporter:
    """Generates a concise summary of an edit task execution and logs it."""

    def generate(self, result: TaskResult) -> None:
        """Log a summary of the task to the console."""
        logger.info("--- Task Execution Summary for '%s' ---", result.task_name)
        logger.info("Total steps: %d", len(result.steps))

        applied = [s for s in result.steps if s.outcome == StepOutcome.APPLIED]
        unchanged = [s for s in result.steps if s.outcome == StepOutcome.UNCHANGED]
        logger.info("  - Applied: %d", len(applied))
        logger.info("  - Unchanged: %d", len(unchanged))
        for step in unchanged:
            logger.info("      step %d (%s): %s", step.index, step.op, step.reason)

        logger.info("Characters: %d -> %d", char_len(result.original_text), char_len(result.final_text))
        logger.info("-------------------------------------------------")
