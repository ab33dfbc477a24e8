"""
Command handlers - One callable per subcommand.

Each handler takes the command's parameters and returns an exit status,
raising a SearchError for anything it cannot run.
"""

from .builtin import CommandsCommand, HelpCommand, VersionCommand
from .local_search import (
    AckHandler,
    AgHandler,
    FindHandler,
    GrepHandler,
    LocateHandler,
    RgHandler,
)
from .spotlight import SpotlightHandler
from .web_search import WebSearchHandler

__all__ = [
    "AckHandler",
    "AgHandler",
    "CommandsCommand",
    "FindHandler",
    "GrepHandler",
    "HelpCommand",
    "LocateHandler",
    "RgHandler",
    "SpotlightHandler",
    "VersionCommand",
    "WebSearchHandler",
]
