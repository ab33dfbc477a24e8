"""
Error types for searchsh.

Every failure is fatal: handlers raise one of these, and the entry point
prints the message to stderr and exits with status 1.

Example::

    from searchsh.errors import ToolNotInstalled

    raise ToolNotInstalled(
        "ag",
        suggestions=["https://github.com/ggreer/the_silver_searcher"],
    )
"""

from typing import List, Optional


class SearchError(Exception):
    """
    Base exception for all searchsh errors.

    Attributes:
        message: Short, single-line description of the failure
        suggestions: Optional follow-up hints printed below the message
    """

    exit_code = 1

    def __init__(self, message: str, suggestions: Optional[List[str]] = None):
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.suggestions:
            parts.append("\n")
            for suggestion in self.suggestions:
                parts.append(f"\n  {suggestion}")
        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class MissingQuery(SearchError):
    """A command that needs a query was called without one."""

    def __init__(self):
        super().__init__("Query missing.")


class PathNotFound(SearchError):
    """The path argument does not exist on the filesystem."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The path `{path}` is not found.")


class UnsupportedPlatform(SearchError):
    """No URL opener is known for this platform."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"Platform {platform} not supported")


class UnknownCommand(SearchError):
    """The command name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command: {name}")


class ToolNotInstalled(SearchError):
    """The external search utility could not be found on PATH."""

    def __init__(self, tool: str, suggestions: Optional[List[str]] = None):
        self.tool = tool
        if suggestions:
            suggestions = [
                "For information and installation instructions, visit:",
                *suggestions,
            ]
        super().__init__(f"`{tool}` is not installed.", suggestions)
