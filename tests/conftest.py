"""
Shared test fixtures for the searchsh test suite.

Settings files are real TOML written to tmp_path. External programs are
never executed: shutil.which and subprocess.run are replaced with fakes
that record what would have been run.
"""

import shutil
import subprocess

import pytest
import toml
from loguru import logger


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Keep the user's own settings file out of every test."""
    monkeypatch.setenv("SEARCHSH_SETTINGS", str(tmp_path / "no-settings.toml"))
    monkeypatch.delenv("SEARCHSH_DEFAULT_COMMAND", raising=False)
    yield
    # main() points loguru at the captured stderr of the test that ran it.
    logger.remove()


@pytest.fixture
def tmp_settings(tmp_path, monkeypatch):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "cli": {"default_command": "commands"},
        "browser": {"terminal": "lynx"},
        "engines": {"google": "https://www.google.co.uk/search?q="},
        "grep": {"exclude_dirs": [".git", "node_modules"]},
    }
    settings_path.write_text(toml.dumps(data))
    monkeypatch.setenv("SEARCHSH_SETTINGS", str(settings_path))
    return settings_path


@pytest.fixture
def installed(monkeypatch):
    """
    Control which programs appear to be on PATH.

    Usage:
        installed.update({"grep", "w3m"})
    """
    tools = set()

    def fake_which(name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in tools else None

    monkeypatch.setattr(shutil, "which", fake_which)
    return tools


@pytest.fixture
def runs(monkeypatch):
    """Record subprocess.run calls instead of executing them."""
    calls = []

    def fake_run(argv, *args, **kwargs):
        calls.append({"argv": list(argv), "kwargs": kwargs})
        return subprocess.CompletedProcess(argv, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls
