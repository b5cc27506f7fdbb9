"""
finitelogic console.

Usage:
    finitelogic                       - Interactive console
    finitelogic -e "domain add x" ... - Run commands and exit
    finitelogic --script session.txt  - Run commands from a file
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .config import ConfigError, EngineConfig, load_config
from .logging_utils import configure_logging, get_logger
from .session import Session

WELCOME = [
    "--- Grounded Finitist Connexive Logic Engine ---",
    "Type 'help' for commands or 'exit' to quit.",
    "-" * 48,
]


def run_lines(session: Session, lines: Iterable[str], out: TextIO) -> int:
    """
    Execute command lines in order.

    Blank lines and lines starting with '#' are skipped.

    Returns:
        Number of commands that failed.
    """
    failures = 0
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        result = session.execute(stripped)
        for output in result.lines:
            print(output, file=out)
        if not result.ok:
            failures += 1
        if result.exit_requested:
            break
    return failures


def enable_history() -> bool:
    """
    Turn on line editing and arrow-key history for input().

    Returns:
        False where the platform has no readline module.
    """
    try:
        import readline  # noqa: F401
    except ImportError:
        return False
    return True


def run_repl(session: Session, config: EngineConfig, out: TextIO) -> None:
    """Read commands from stdin until 'exit' or end of input."""
    enable_history()

    if config.show_banner:
        for line in WELCOME:
            print(line, file=out)

    while True:
        try:
            line = input(config.prompt)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            break

        result = session.execute(line)
        if result.clear_requested:
            print("\033[2J\033[H", end="", file=out)
        for output in result.lines:
            print(output, file=out)
        if result.exit_requested:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finitelogic",
        description="Finite-domain relevant and connexive logic engine",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML or JSON config file",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-e", "--execute",
        action="append",
        default=[],
        metavar="COMMAND",
        help="Run a command and exit (may be repeated)",
    )
    parser.add_argument(
        "--script",
        type=Path,
        default=None,
        help="Run commands from a file and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.debug:
        config = config.model_copy(update={"debug_logging_enabled": True})

    configure_logging(config)
    session = Session(logger=get_logger("session"))

    if args.script is not None or args.execute:
        lines = list(args.execute)
        if args.script is not None:
            try:
                lines.extend(args.script.read_text(encoding="utf-8").splitlines())
            except OSError as e:
                print(f"Error: cannot read {args.script}: {e}", file=sys.stderr)
                return 2
        failures = run_lines(session, lines, sys.stdout)
        return 1 if failures else 0

    run_repl(session, config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
