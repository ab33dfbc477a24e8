"""
Helper utilities for searchsh.

Provides common functions used across multiple handlers:
- Settings loading
- External tool lookup and execution
- Query joining and path validation
"""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import toml
from loguru import logger

from searchsh.errors import MissingQuery, PathNotFound

DEFAULT_EXCLUDE_DIRS = [".bzr", ".cvs", ".git", ".hg", ".svn"]


def command_exists(name: str) -> bool:
    """Return True if an executable called ``name`` is on PATH."""
    return shutil.which(name) is not None


def run_tool(argv: Sequence[str], quiet: bool = False) -> int:
    """
    Run an external program to completion.

    Args:
        argv: Program and arguments
        quiet: Discard the program's stdout and stderr

    Returns:
        The program's exit status
    """
    logger.debug(f"exec: {list(argv)}")
    if quiet:
        result = subprocess.run(
            list(argv),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    else:
        result = subprocess.run(list(argv))
    return result.returncode


def join_query(terms: Sequence[str], separator: str = "+") -> str:
    """
    Join query terms for use in a search URL.

    Example:
        join_query(["foo", "bar"])  # "foo+bar"
    """
    return separator.join(terms)


def require_query(parameters: Sequence[str]) -> str:
    """Return the first parameter, raising MissingQuery if absent or blank."""
    if not parameters or not parameters[0]:
        raise MissingQuery()
    return parameters[0]


def validate_path(path: Optional[str]) -> str:
    """
    Check that a path argument exists.

    Raises:
        PathNotFound: if the path is blank or missing on disk
    """
    if not path or not os.path.exists(path):
        raise PathNotFound(path or "")
    return path


def settings_path() -> Path:
    """Location of the user settings file."""
    override = os.environ.get("SEARCHSH_SETTINGS")
    if override:
        return Path(override)
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "searchsh" / "settings.toml"


def default_settings() -> Dict[str, Any]:
    return {
        "cli": {
            "default_command": "help",
        },
        "browser": {
            "terminal": "w3m",
        },
        "engines": {},
        "grep": {
            "exclude_dirs": list(DEFAULT_EXCLUDE_DIRS),
        },
    }


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a TOML file.

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [cli]
        default_command = "help"

        [browser]
        terminal = "lynx"

        [engines]
        google = "https://www.google.co.uk/search?q="

        [grep]
        exclude_dirs = [".git", "node_modules"]
    """
    defaults = default_settings()

    if path is None:
        path = settings_path()

    if path.exists():
        try:
            loaded = toml.load(path)
            settings = _deep_merge(defaults, loaded)
        except (toml.TomlDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {path}: {e}")
            settings = defaults
    else:
        logger.debug(f"Settings file not found at {path}, using defaults")
        settings = defaults

    env_default = os.environ.get("SEARCHSH_DEFAULT_COMMAND")
    if env_default:
        settings["cli"]["default_command"] = env_default

    return settings


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
