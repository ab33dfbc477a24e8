"""
Local Search Handlers - Wrap file-name and content search utilities.

Each handler takes <query> [<path>]. The query is required; the path
defaults to the current directory and must exist when given.

  ack     ack|ack-grep <query> <path>
  ag      ag <query> <path>
  find    find <path> -name <query>
  grep    grep --recursive ... -e <query> <path>
  locate  locate <query>  |  locate <path>/*<query>*
  rg      rg <query> <path>
"""

import os
import shutil
from typing import List, Optional, Sequence

from searchsh.errors import ToolNotInstalled
from searchsh.utils.helpers import (
    DEFAULT_EXCLUDE_DIRS,
    require_query,
    run_tool,
    validate_path,
)


class LocalSearchHandler:
    """Base for handlers that shell out to one search utility."""

    name = ""
    executables: tuple = ()
    install_hints: List[str] = []
    default_path: Optional[str] = "."

    def __call__(self, parameters: Sequence[str]) -> int:
        query = require_query(parameters)
        path = self.default_path
        if len(parameters) > 1 and parameters[1]:
            path = validate_path(parameters[1])
        return run_tool(self.build_argv(self.find_executable(), query, path))

    def find_executable(self) -> str:
        for executable in self.executables or (self.name,):
            found = shutil.which(executable)
            if found:
                return found
        raise ToolNotInstalled(self.name, self.install_hints)

    def build_argv(self, executable: str, query: str, path: Optional[str]) -> List[str]:
        return [executable, query, path]


class AckHandler(LocalSearchHandler):
    name = "ack"
    executables = ("ack", "ack-grep")
    install_hints = ["http://beyondgrep.com/"]


class AgHandler(LocalSearchHandler):
    name = "ag"
    install_hints = [
        "https://github.com/ggreer/the_silver_searcher",
        "http://geoff.greer.fm/ag/",
    ]


class RgHandler(LocalSearchHandler):
    name = "rg"
    install_hints = ["https://github.com/BurntSushi/ripgrep"]


class FindHandler(LocalSearchHandler):
    name = "find"

    def build_argv(self, executable, query, path):
        return [executable, path, "-name", query]


def exclude_dir_flags(dirs: Sequence[str]) -> List[str]:
    """Turn directory names into grep --exclude-dir options."""
    return [f"--exclude-dir={d}" for d in dirs]


class GrepHandler(LocalSearchHandler):
    name = "grep"

    def __init__(self, exclude_dirs: Optional[Sequence[str]] = None):
        self.exclude_dirs = list(DEFAULT_EXCLUDE_DIRS if exclude_dirs is None else exclude_dirs)

    def build_argv(self, executable, query, path):
        return [
            executable,
            "--recursive",
            "--color=auto",
            "--line-number",
            *exclude_dir_flags(self.exclude_dirs),
            "-e", query,
            path,
        ]


class LocateHandler(LocalSearchHandler):
    name = "locate"
    # Global unless a path is given.
    default_path = None

    def build_argv(self, executable, query, path):
        if path:
            # The locate database holds absolute paths.
            return [executable, f"{os.path.abspath(path)}/*{query}*"]
        return [executable, query]


def grep_description(program: str, exclude_dirs: Sequence[str]) -> str:
    excludes = ",".join(exclude_dirs)
    return f"""\
Usage:
  {program} grep <pattern> [<path>]

Description:
  Search file contents in a directory subtree for a given pattern using the
  `grep` utility. By default, this is scoped to the current directory's
  subtree. When the <path> argument is provided, the search is scoped to the
  given directory's subtree or the given file.

  This command calls `grep` with the following options:

    --recursive
    --color=auto
    --line-number
    --exclude-dir={{{excludes}}}
    -e <pattern>"""


DESCRIPTIONS = {
    "ack": """\
Usage:
  {program} ack <query> [<path>]

Description:
  Search file contents using `ack`. By default, the search is scoped to the
  current directory's subtree. When a path is passed as the second argument,
  the search is scoped to the given directory's subtree or the given file.""",
    "ag": """\
Usage:
  {program} ag <query> [<path>]

Description:
  Search file contents using The Silver Searcher, aka `ag`. By default, the
  search is scoped to the current directory's subtree. When a path is passed
  as the second argument, the search is scoped to the given directory's
  subtree or the given file.""",
    "find": """\
Usage:
  {program} find <filename> [<path>]

Description:
  Search for a file with a given filename in a directory subtree using the
  `find` utility. By default, this is scoped to the current directory's
  subtree, making it the equivalent of `find . -name <filename>`. When the
  <path> argument is provided, find uses that directory as the subtree
  root.""",
    "locate": """\
Usage:
  {program} locate <query> [<path>]

Description:
  Search for a file with a given filename using the `locate` command. By
  default the scope of the search is global. When the <path> argument is
  provided, `locate` uses that directory as the subtree root.""",
    "rg": """\
Usage:
  {program} rg <pattern> [<path>]

Description:
  Search file contents in a directory subtree for a given pattern using the
  `ripgrep` utility. By default, this is scoped to the current directory's
  subtree. When the <path> argument is provided, the search is scoped to the
  given directory's subtree or the given file.""",
}
