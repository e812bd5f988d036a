"""Runs edit-script tasks against files on disk."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import EditScript, EditStep, EditTask
from .paths import resolve_task_path
from .edit_state import NoChangeReason, StepOutcome
from .index_translator import char_len
from .reporters.summary_reporter import SummaryReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """The outcome of one step, with the reason when the text did not change."""

    index: int
    op: str
    outcome: StepOutcome
    reason: NoChangeReason | None = None


@dataclass
class TaskResult:
    """Everything produced by running a single task."""

    task_name: str
    original_text: str
    final_text: str
    steps: list[StepResult] = field(default_factory=list)
    output_path: Path | None = None
    written: bool = False

    @property
    def changed(self) -> bool:
        """Return True when the final text differs from the original."""
        return self.final_text != self.original_text


def apply_steps(text: str, steps: list[EditStep]) -> tuple[str, list[StepResult]]:
    """
    Apply steps to a text in order.

    Args:
        text: The starting text.
        steps: Validated edit steps.

    Returns:
        A tuple of (final_text, results) with one StepResult per step.

    """
    results: list[StepResult] = []
    for index, step in enumerate(steps):
        edited = step.apply(text)
        if edited == text:
            reason = step.no_change_reason(text)
            logger.debug("Step %d (%s) left the text unchanged: %s", index, step.op, reason)
            results.append(StepResult(index=index, op=step.op, outcome=StepOutcome.UNCHANGED, reason=reason))
        else:
            logger.debug("Step %d (%s) applied.", index, step.op)
            results.append(StepResult(index=index, op=step.op, outcome=StepOutcome.APPLIED))
        text = edited
    return text, results


def run_task(task: EditTask, base_dir: Path, *, dry_run: bool = False) -> TaskResult:
    """
    Run a single edit task: read its input, apply its steps, and write the result.

    Args:
        task: The task to execute.
        base_dir: Directory that relative input/output paths are resolved against.
        dry_run: If True, the result is computed and reported but not written.

    Returns:
        The TaskResult describing what happened.

    Raises:
        FileNotFoundError: If the task's input file does not exist.

    """
    input_path = resolve_task_path(task.input, base_dir)
    if not input_path.is_file():
        msg = f"Input file for task '{task.name}' not found at: {input_path}"
        raise FileNotFoundError(msg)

    # newline="" keeps \r\n and lone \r as characters the steps can address.
    with input_path.open(encoding="utf-8", newline="") as f:
        original = f.read()
    final, step_results = apply_steps(original, task.steps)

    output_path = input_path if task.in_place else resolve_task_path(task.output or "", base_dir)
    result = TaskResult(
        task_name=task.name,
        original_text=original,
        final_text=final,
        steps=step_results,
        output_path=output_path,
    )

    if dry_run:
        logger.info("[DRY RUN] Task '%s' would write %d characters to %s", task.name, char_len(final), output_path)
    elif task.in_place and not result.changed:
        logger.info("Task '%s' made no changes; %s left untouched.", task.name, output_path)
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(final, encoding="utf-8", newline="")
        result.written = True
        logger.info("Task '%s' wrote %s", task.name, output_path)

    SummaryReporter().generate(result)
    return result


def run_script(script: EditScript, base_dir: Path, *, dry_run: bool = False) -> list[TaskResult]:
    """Run every enabled task of a script in declaration order."""
    results = []
    for task in script.tasks:
        if not task.enabled:
            logger.info("Skipping disabled task '%s'", task.name)
            continue
        logger.info("Running Task: '%s'", task.name)
        results.append(run_task(task, base_dir, dry_run=dry_run))
    return results
