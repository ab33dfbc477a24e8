"""
searchsh - Command line entry point.

Parses the arguments, loads settings, builds the command table and
dispatches. Every SearchError is printed to stderr and ends the run
with status 1.

Usage:
  searchsh [--debug] [-g|--gui] [-h|--help] [--version] <command> [<args>...]
"""

import os
import sys
from typing import Optional, Sequence

from loguru import logger

from searchsh.commands import CommandContext, build_registry, normalize_args, parse_args
from searchsh.errors import SearchError
from searchsh.utils.helpers import load_settings

DEBUG_FORMAT = "<dim>🐛 {name}:{function}</dim> {message}"


def configure_logging(debug: bool = False) -> None:
    """Send warnings to stderr, or everything when debugging."""
    logger.remove()
    if debug:
        logger.add(sys.stderr, level="DEBUG", format=DEBUG_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format="<level>{level}</level>: {message}")


def main(argv: Optional[Sequence[str]] = None, program: Optional[str] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if program is None:
        program = os.path.basename(sys.argv[0]) or "searchsh"
        if program == "__main__.py":
            program = "searchsh"

    invocation = parse_args(normalize_args(argv))
    configure_logging(invocation.debug)
    logger.debug(f"raw options: {list(argv)}")
    logger.debug(f"command: {invocation.command} parameters: {invocation.parameters}")

    try:
        settings = load_settings()
        context = CommandContext(program=program, settings=settings, invocation=invocation)
        registry = build_registry(context)
        name, parameters = invocation.resolve(settings["cli"]["default_command"])
        return registry.dispatch(name, parameters)
    except SearchError as e:
        logger.debug(f"{type(e).__name__}: {e.message}")
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
