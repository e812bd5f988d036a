"""
Outcome model for edit steps applied by a script.

Architecture:
    StepOutcome (Enum) → Represents WHAT happened to the text at a step
    NoChangeReason (Dataclass) → Represents WHY a step left the text as it was
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal


class StepOutcome(str, Enum):
    """
    The result of applying a single edit step.

    The string values are human-readable for logging and reports.
    """

    APPLIED = "applied"
    """The step produced a text different from its input."""

    UNCHANGED = "unchanged"
    """The step returned its input as-is; see the accompanying NoChangeReason."""


@dataclass(frozen=True)
class NoChangeReason:
    """
    Represents why an edit step left the text unchanged.

    Attributes:
        category: The high-level category of the reason.
        code: A machine-readable identifier for the specific reason.
        message: A human-readable explanation (optional, for logging/debugging).

    """

    category: Literal["search", "range", "edit"]
    """
    The category of the reason:
    - search: A pattern the step depends on was not found
    - range: The addressed range was empty
    - edit: The step ran but its result equals its input
    """

    code: str
    """Machine-readable identifier (e.g., 'not_found', 'empty_range')."""

    message: str | None = None
    """Human-readable explanation for logging/debugging."""

    def __str__(self) -> str:
        """Return a human-readable representation of the reason."""
        if self.message:
            return f"{self.category}:{self.code} ({self.message})"
        return f"{self.category}:{self.code}"


PATTERN_NOT_FOUND = NoChangeReason(
    category="search",
    code="not_found",
    message="Pattern not found in text",
)
"""Reason for pattern-based steps whose pattern does not occur in the text."""

EMPTY_RANGE = NoChangeReason(
    category="range",
    code="empty_range",
    message="Addressed range is empty and nothing was inserted",
)
"""Reason for range-based steps that resolved to a degenerate range."""

IDENTITY_EDIT = NoChangeReason(
    category="edit",
    code="identity",
    message="Edit produced the same text",
)
"""Reason for steps that ran but reproduced their input exactly."""
