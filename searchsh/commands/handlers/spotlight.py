"""
Spotlight Handler - Search with macOS `mdfind`.

  spotlight <query> [<path>]             filename and content hits
  spotlight -f|--filename <name> [<path>]
  spotlight -c|--content|--fulltext <query> [<path>]

Only registered when mdfind is on PATH.
"""

import shutil
from typing import List, Optional, Sequence

from loguru import logger

from searchsh.errors import MissingQuery, ToolNotInstalled
from searchsh.utils.helpers import run_tool, validate_path

FILENAME = "filename"
FULLTEXT = "fulltext"

SEARCH_TYPE_FLAGS = {
    "-f": FILENAME,
    "--filename": FILENAME,
    "-c": FULLTEXT,
    "--content": FULLTEXT,
    "--fulltext": FULLTEXT,
}

DESCRIPTION = """\
Usage:
  {program} spotlight <full text query | filename> [<path>]
  {program} spotlight ( -f | --filename ) <filename> [<path>]
  {program} spotlight ( --fulltext | -c | --content ) <query> [<path>]

Options:
  -f --filename             A filename to search for.
  --fulltext -c --content   Text to search for in file contents.

Description:
  Search using spotlight.

  When no options are used, this behaves as if the query was typed into the
  Spotlight menu and will return hits for both the filename and content. When
  a <path> argument is provided, the search will be scoped to that
  directory and its subtree.

  This command wraps `mdfind` and only works on OS X."""


def spotlight_available() -> bool:
    return shutil.which("mdfind") is not None


def build_mdfind_argv(query: str, path: Optional[str] = None,
                      search_type: Optional[str] = None) -> List[str]:
    if search_type == FILENAME:
        argv = ["mdfind", f"kMDItemDisplayName == '{query}'wc"]
    elif search_type == FULLTEXT:
        argv = ["mdfind", f"kMDItemTextContent == '{query}'wc"]
    else:
        argv = ["mdfind", "-interpret", query]

    if path:
        argv.extend(["-onlyin", path])
    return argv


class SpotlightHandler:
    """Search files by name and/or content with mdfind."""

    name = "spotlight"

    def __call__(self, parameters: Sequence[str]) -> int:
        search_type = None
        query = None
        path = None

        for arg in parameters:
            if arg in SEARCH_TYPE_FLAGS:
                search_type = SEARCH_TYPE_FLAGS[arg]
            elif not query:
                query = arg
            elif not path:
                path = arg

        logger.debug(f"spotlight: query={query!r} path={path!r} type={search_type}")

        if not query:
            raise MissingQuery()
        if path:
            validate_path(path)
        if not spotlight_available():
            raise ToolNotInstalled("mdfind")

        return run_tool(build_mdfind_argv(query, path, search_type))
