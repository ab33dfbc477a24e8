# searchsh Utilities Package
"""
Shared helpers for handlers: settings, tool lookup, path checks.
"""

from .helpers import (
    command_exists,
    join_query,
    load_settings,
    require_query,
    run_tool,
    validate_path,
)

__all__ = [
    "command_exists",
    "join_query",
    "load_settings",
    "require_query",
    "run_tool",
    "validate_path",
]
