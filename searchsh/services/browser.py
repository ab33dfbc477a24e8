"""
Browser Service - Pick a program to open a URL and run it.

A terminal browser (w3m unless configured otherwise) is preferred when
it is installed and --gui was not given. Otherwise the platform's
default opener is used:
  macOS   → open
  Cygwin  → cygstart
  Linux   → xdg-open
"""

import sys
from typing import Optional

from loguru import logger

from searchsh.errors import ToolNotInstalled, UnsupportedPlatform
from searchsh.utils.helpers import command_exists, run_tool

DEFAULT_TERM_BROWSER = "w3m"

PLATFORM_OPENERS = {
    "darwin": "open",
    "cygwin": "cygstart",
    "linux": "xdg-open",
}


def platform_opener(platform: Optional[str] = None) -> str:
    """Return the GUI opener for a sys.platform value."""
    platform = platform or sys.platform
    for prefix, opener in PLATFORM_OPENERS.items():
        if platform.startswith(prefix):
            return opener
    raise UnsupportedPlatform(platform)


class BrowserService:
    """Open URLs in a terminal or GUI browser."""

    def __init__(self, terminal_browser: Optional[str] = DEFAULT_TERM_BROWSER,
                 force_gui: bool = False, platform: Optional[str] = None):
        self.terminal_browser = terminal_browser
        self.force_gui = force_gui
        self.platform = platform

    def open_command(self) -> str:
        if (
            not self.force_gui
            and self.terminal_browser
            and command_exists(self.terminal_browser)
        ):
            return self.terminal_browser
        opener = platform_opener(self.platform)
        if not command_exists(opener):
            raise ToolNotInstalled(opener)
        return opener

    def open(self, url: str) -> int:
        """Open a URL and wait for the opener to exit."""
        open_cmd = self.open_command()
        logger.debug(f"open: {open_cmd} {url}")
        # GUI openers return immediately; their chatter is not useful.
        quiet = open_cmd != self.terminal_browser
        return run_tool([open_cmd, url], quiet=quiet)
