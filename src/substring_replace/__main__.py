"""Main entry point for the SubstringReplace command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__, paths
from .config import EditScript, load_script
from .logging_utils import attach_debug_log, setup_logging
from .templates import DEFAULT_SCRIPT_YAML
from .workflow import run_script

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    """
    Parse command-line arguments for the SubstringReplace CLI.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = argparse.ArgumentParser(description="Character-indexed text editing for UTF-8 files")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"SubstringReplace {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )

    # Subcommand flags use SUPPRESS so a '--debug' given before the subcommand is kept.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--debug",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug level logging.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'init' command
    init_parser = subparsers.add_parser("init", parents=[common], help="Create a default edit script.")
    init_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="The directory to initialize (default: current directory).",
    )

    # 'run' command
    run_parser = subparsers.add_parser("run", parents=[common], help="Run the tasks of an edit script.")
    run_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="A project directory or an edit script file (default: current directory).",
    )
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Compute and report the edits without writing any file.",
    )

    # If no arguments are provided, print help
    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    return parser.parse_args()


def _init_project(target_path: Path) -> None:
    """Write the default edit script for the directory target_path."""
    logger.info("Initializing SubstringReplace project in: %s", target_path)

    script_file = paths.default_script_path(target_path)

    if script_file.exists():
        logger.warning("Script file already exists at: %s", script_file)
        return

    try:
        script_file.parent.mkdir(parents=True, exist_ok=True)
        script_file.write_text(DEFAULT_SCRIPT_YAML, encoding="utf-8")
        logger.info("Created default script at: %s", script_file)
    except OSError:
        logger.exception("Failed to initialize project")
        sys.exit(1)


def _load_script(target: Path) -> tuple[Path, EditScript] | None:
    """
    Locate and load the edit script named by target.

    Returns:
        The script path and the EditScript if loading is successful, otherwise None.

    """
    try:
        script_path = paths.locate_script(target)
        logger.info("Loading script from: %s", script_path)
        return script_path, load_script(script_path)
    except FileNotFoundError:
        logger.exception("Could not find a valid script file.")
        return None
    except Exception:
        logger.exception("An unexpected error occurred while loading the script.")
        return None


def _validate_target(path: Path, *, allow_file: bool) -> None:
    """Exit with status 1 unless path is an existing directory, or a file when allow_file is set."""
    if not path.exists():
        logger.error("Path does not exist: %s", path)
        sys.exit(1)
    if not path.is_dir() and not allow_file:
        logger.error("Path is not a directory: %s", path)
        sys.exit(1)


def main() -> None:
    """
    Run the main entry point for the SubstringReplace command-line interface.

    Orchestrates the entire process:
    1. Parses command-line arguments and configures logging.
    2. Loads the edit script.
    3. Runs all enabled tasks.
    """
    try:
        args = _parse_args()
        setup_logging(version=__version__, debug=args.debug)
        target_path = Path(getattr(args, "path", ".")).resolve()

        if args.command == "init":
            _validate_target(target_path, allow_file=False)
            if args.debug:
                attach_debug_log(paths.debug_log_path(target_path))
            _init_project(target_path)
            return

        _validate_target(target_path, allow_file=True)
        loaded = _load_script(target_path)
        if loaded is None:
            logger.critical("Failed to load the edit script. Aborting.")
            sys.exit(1)

        script_path, script = loaded
        base_dir = paths.base_dir_for(script_path)
        if args.debug:
            attach_debug_log(paths.debug_log_path(base_dir))
        run_script(script, base_dir, dry_run=getattr(args, "dry_run", False))

    except Exception:
        logger.exception("An unexpected error occurred")
        logger.critical("An unrecoverable error occurred. Please check the logs for details.")
        sys.exit(1)

    logger.info("All tasks completed.")


if __name__ == "__main__":
    main()
