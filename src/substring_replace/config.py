"""Handles the parsing and validation of SubstringReplace edit scripts."""

import copy
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import engine
from .edit_state import EMPTY_RANGE, IDENTITY_EDIT, PATTERN_NOT_FOUND, NoChangeReason

logger = logging.getLogger(__name__)


class BaseStep(BaseModel, ABC):
    """
    Common behaviour of every edit step.

    Each concrete step names one text operation through its `op` literal and
    implements `apply` with that operation.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    @abstractmethod
    def apply(self, text: str) -> str:
        """Return the edited text; the input is never modified."""

    def no_change_reason(self, text: str) -> NoChangeReason:  # noqa: ARG002
        """Explain why applying this step to text returned it unchanged."""
        return IDENTITY_EDIT


class SubstringStep(BaseStep):
    """Keep only the characters in [start, end)."""

    op: Literal["substring"]
    start: int = 0
    end: int

    def apply(self, text: str) -> str:
        return engine.substring(text, self.start, self.end)


class SubstringStartStep(BaseStep):
    """Keep only the characters before end."""

    op: Literal["substring_start"]
    end: int

    def apply(self, text: str) -> str:
        return engine.substring_start(text, self.end)


class SubstringEndStep(BaseStep):
    """Keep only the characters from start onwards."""

    op: Literal["substring_end"]
    start: int

    def apply(self, text: str) -> str:
        return engine.substring_end(text, self.start)


class SubstringOffsetStep(BaseStep):
    """Keep only |length| characters to the right or left of position."""

    op: Literal["substring_offset"]
    position: int
    length: int

    def apply(self, text: str) -> str:
        return engine.substring_offset(text, self.position, self.length)


class SubstringReplaceStep(BaseStep):
    """Replace the characters in [start, end)."""

    op: Literal["substring_replace"]
    replacement: str
    start: int
    end: int

    def apply(self, text: str) -> str:
        return engine.substring_replace(text, self.replacement, self.start, self.end)


class SubstringReplaceStartStep(BaseStep):
    """Replace everything before end."""

    op: Literal["substring_replace_start"]
    replacement: str
    end: int

    def apply(self, text: str) -> str:
        return engine.substring_replace_start(text, self.replacement, self.end)


class SubstringReplaceEndStep(BaseStep):
    """Replace everything from start onwards."""

    op: Literal["substring_replace_end"]
    replacement: str
    start: int

    def apply(self, text: str) -> str:
        return engine.substring_replace_end(text, self.replacement, self.start)


class SubstringRemoveStep(BaseStep):
    """Remove the characters in [start, end)."""

    op: Literal["substring_remove"]
    start: int
    end: int

    def apply(self, text: str) -> str:
        return engine.substring_remove(text, self.start, self.end)

    def no_change_reason(self, text: str) -> NoChangeReason:  # noqa: ARG002
        return EMPTY_RANGE


class SubstringPullStep(BaseStep):
    """Remove |length| characters to the right or left of position."""

    op: Literal["substring_pull"]
    position: int
    length: int

    def apply(self, text: str) -> str:
        return engine.substring_pull(text, self.position, self.length)

    def no_change_reason(self, text: str) -> NoChangeReason:  # noqa: ARG002
        return EMPTY_RANGE


class SubstringInsertStep(BaseStep):
    """Insert a fragment at a character index."""

    op: Literal["substring_insert"]
    insert: str
    at: int

    def apply(self, text: str) -> str:
        return engine.substring_insert(text, self.insert, self.at)


# Fixed (before, first) pairs for the named insert-adjacent operations
_ADJACENT_MODES: dict[str, tuple[bool, bool]] = {
    "insert_before_first": (True, True),
    "insert_before_last": (True, False),
    "insert_after_first": (False, True),
    "insert_after_last": (False, False),
}


class InsertAdjacentStep(BaseStep):
    """
    Insert a fragment next to the first or last occurrence of a pattern.

    The generic ``insert_adjacent`` op reads ``before`` and ``first``; the four named
    ops fix them and ignore the fields.
    """

    op: Literal["insert_adjacent", "insert_before_first", "insert_before_last", "insert_after_first", "insert_after_last"]
    insert: str
    pattern: str
    before: bool = True
    first: bool = True

    @property
    def mode(self) -> tuple[bool, bool]:
        """Return the effective (before, first) pair."""
        return _ADJACENT_MODES.get(self.op, (self.before, self.first))

    def apply(self, text: str) -> str:
        before, first = self.mode
        return engine.insert_adjacent(text, self.insert, self.pattern, before=before, first=first)

    def no_change_reason(self, text: str) -> NoChangeReason:
        if engine.char_find(text, self.pattern) is None:
            return PATTERN_NOT_FOUND
        return IDENTITY_EDIT


class InsertBetweenStep(BaseStep):
    """Replace what lies between the first start_pattern and the last end_pattern."""

    op: Literal["insert_between"]
    insert: str
    start_pattern: str
    end_pattern: str

    def apply(self, text: str) -> str:
        return engine.insert_between(text, self.insert, self.start_pattern, self.end_pattern)

    def no_change_reason(self, text: str) -> NoChangeReason:
        if engine.char_find(text, self.start_pattern) is None or engine.char_rfind(text, self.end_pattern) is None:
            return PATTERN_NOT_FOUND
        return IDENTITY_EDIT


class PrependStep(BaseStep):
    """Add a prefix."""

    op: Literal["prepend"]
    prefix: str

    def apply(self, text: str) -> str:
        return engine.prepend(text, self.prefix)


class AppendStep(BaseStep):
    """Add a suffix."""

    op: Literal["append"]
    suffix: str

    def apply(self, text: str) -> str:
        return engine.append(text, self.suffix)


EditStep = Annotated[
    SubstringStep
    | SubstringStartStep
    | SubstringEndStep
    | SubstringOffsetStep
    | SubstringReplaceStep
    | SubstringReplaceStartStep
    | SubstringReplaceEndStep
    | SubstringRemoveStep
    | SubstringPullStep
    | SubstringInsertStep
    | InsertAdjacentStep
    | InsertBetweenStep
    | PrependStep
    | AppendStep,
    Field(discriminator="op"),
]


class EditTask(BaseModel):
    """A sequence of edit steps applied to one input file."""

    model_config = ConfigDict(extra="forbid")

    name: str
    input: str
    output: str | None = None
    enabled: bool = True
    steps: list[EditStep] = Field(default_factory=list)

    @property
    def in_place(self) -> bool:
        """Return True when the result is written back to the input file."""
        return self.output is None


def _expand_steps(steps: list[Any], shortcuts: dict[str, Any], visiting: tuple[str, ...] = ()) -> list[Any]:
    """
    Replace every ``{use: <shortcut>}`` entry with the shortcut's own steps.

    Shortcuts may themselves use other shortcuts; a shortcut that reaches itself is rejected.
    """
    expanded: list[Any] = []
    for step in steps:
        if not (isinstance(step, dict) and "use" in step):
            expanded.append(copy.deepcopy(step))
            continue

        alias = step["use"]
        if alias in visiting:
            chain = " -> ".join((*visiting, alias))
            msg = f"Shortcut cycle detected: {chain}"
            raise ValueError(msg)
        if alias not in shortcuts:
            msg = f"Unknown shortcut '{alias}'"
            raise ValueError(msg)

        shortcut_steps = shortcuts[alias]
        if not isinstance(shortcut_steps, list):
            msg = f"Shortcut '{alias}' must be a list of steps"
            raise TypeError(msg)
        expanded.extend(_expand_steps(shortcut_steps, shortcuts, (*visiting, alias)))
    return expanded


class EditScript(BaseModel):
    """The root of an edit script."""

    shortcuts: dict[str, Any] = Field(default_factory=dict)
    tasks: list[EditTask] = Field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EditScript":
        """
        Create an EditScript from a mapping, expanding shortcut references in every task.

        Raises:
            ValueError: If a shortcut is unknown or cyclic, or the script fails validation.

        """
        shortcuts = data.get("shortcuts") or {}
        tasks_data = []
        for task_data in data.get("tasks") or []:
            task_config = dict(task_data) if isinstance(task_data, dict) else task_data
            if isinstance(task_config, dict):
                task_config["steps"] = _expand_steps(task_config.get("steps") or [], shortcuts)
            tasks_data.append(task_config)

        try:
            return cls(shortcuts=shortcuts, tasks=tasks_data)
        except ValidationError as e:
            msg = f"Invalid or missing script configuration: {e}"
            raise ValueError(msg) from e


def load_script(script_path: str | Path) -> EditScript:
    """
    Load, parse, and validate a YAML edit script.

    Args:
        script_path: The path to the script file.

    Returns:
        An EditScript object representing the validated script.

    Raises:
        FileNotFoundError: If the script file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the script is invalid.

    """
    path = Path(script_path)
    if not path.is_file():
        msg = f"Script file not found at: {script_path}"
        raise FileNotFoundError(msg)

    def _raise_type_error(msg: str) -> None:
        """Raise a TypeError with a specific message."""
        raise TypeError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            _raise_type_error("Script file must be a YAML mapping (dictionary).")

        script = EditScript.from_dict(data)

    except yaml.YAMLError as e:
        msg = f"Error parsing YAML script file: {e}"
        raise yaml.YAMLError(msg) from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        msg = f"Invalid or missing script configuration: {e}"
        raise ValueError(msg) from e
    else:
        logger.debug("Loaded %d task(s) from %s", len(script.tasks), path)
        return script
