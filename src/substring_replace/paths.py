"""Locates edit scripts and resolves the file paths their tasks name."""
# src/substring_replace/paths.py

from pathlib import Path
from typing import Final

SCRIPT_FILE_NAMES: Final[list[str]] = ["main.yaml", "main.yml"]
STATE_SUBDIR: Final[Path] = Path(".substring_replace")
DEBUG_LOG_NAME: Final[str] = "debug.log"


def default_script_path(directory: Path) -> Path:
    """Return where 'init' writes the edit script for directory."""
    return directory / STATE_SUBDIR / SCRIPT_FILE_NAMES[0]


def locate_script(target: Path) -> Path:
    """
    Return the edit script named by target.

    A file is taken to be the script itself. A directory must hold a script in
    its '.substring_replace' subdirectory; parent directories are not searched.

    Raises:
        FileNotFoundError: If target names no script.

    """
    if target.is_file():
        return target
    for name in SCRIPT_FILE_NAMES:
        candidate = target / STATE_SUBDIR / name
        if candidate.is_file():
            return candidate

    msg = f"No script file ({' or '.join(SCRIPT_FILE_NAMES)}) found in '{target / STATE_SUBDIR}'. Run 'substring-replace init' first, or pass the script file itself."
    raise FileNotFoundError(msg)


def base_dir_for(script_path: Path) -> Path:
    """
    Return the directory that a script's task paths are relative to.

    A script kept in a '.substring_replace' directory belongs to the directory
    above it. Any other script is relative to the directory it sits in.
    """
    parent = script_path.resolve().parent
    if parent.name == STATE_SUBDIR.name:
        return parent.parent
    return parent


def resolve_task_path(path_str: str, base_dir: Path) -> Path:
    """Resolve a task's input or output path; absolute paths are kept."""
    path = Path(path_str)
    return path if path.is_absolute() else base_dir / path


def debug_log_path(base_dir: Path) -> Path:
    """Return the debug log file for runs against base_dir."""
    return base_dir / STATE_SUBDIR / DEBUG_LOG_NAME
