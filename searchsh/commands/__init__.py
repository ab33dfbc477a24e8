"""
Commands package - Option parsing, command table and dispatch.

The raw argument list is normalized and parsed into a ParsedInvocation,
the command name is looked up in a static registry, and the matching
handler runs with the remaining parameters.
"""

from .options import ParsedInvocation, normalize_args, parse_args
from .registry import build_registry
from .router import Command, CommandContext, CommandRegistry

__all__ = [
    "Command",
    "CommandContext",
    "CommandRegistry",
    "ParsedInvocation",
    "build_registry",
    "normalize_args",
    "parse_args",
]
