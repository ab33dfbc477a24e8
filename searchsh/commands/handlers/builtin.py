"""
Built-in Commands - help, version and commands.

These describe the program itself rather than searching anything, so
they read the registry through the shared CommandContext.
"""

from typing import Sequence

from searchsh import __version__

from ..router import CommandContext

BANNER = r"""                              __           __
   ________  ____ ___________/ /_    _____/ /_
  / ___/ _ \/ __ `/ ___/ ___/ __ \  / ___/ __ \
 (__  )  __/ /_/ / /  / /__/ / / / (__  ) / / /
/____/\___/\__,_/_/   \___/_/ /_(_)____/_/ /_/
"""

VERSION_DESCRIPTION = """\
Usage:
  {program} ( version | --version )

Description:
  Display the current program version.

  To save you the trouble, the current version is {version}"""

HELP_DESCRIPTION = """\
Usage:
  {program} help [<command>]

Description:
  Display help information for {program} or a specified command."""

COMMANDS_DESCRIPTION = """\
Usage:
  {program} commands [--raw]

Options:
  --raw  Display the command list without formatting.

Description:
  Display the list of available commands."""


class VersionCommand:
    """Print the program version."""

    def __call__(self, parameters: Sequence[str]) -> int:
        print(__version__)
        return 0


class CommandsCommand:
    """List registered command names."""

    def __init__(self, context: CommandContext):
        self.context = context

    def render(self, raw: bool = False) -> str:
        names = self.context.registry.names()
        if raw:
            return "\n".join(names)
        return "\n".join(["Available commands:", *(f"  {n}" for n in names)])

    def __call__(self, parameters: Sequence[str]) -> int:
        print(self.render(raw="--raw" in parameters))
        return 0


class HelpCommand:
    """Print program help, or one command's description."""

    def __init__(self, context: CommandContext):
        self.context = context

    def overview(self) -> str:
        program = self.context.program
        commands = CommandsCommand(self.context).render()
        return f"""{BANNER}
A command line search multi-tool. `{program}` provides a common interface
for both local file and full text searches, as well as web searches.

Version: {__version__}

Usage:
  {program} <command> [--command-options] [<arguments>]
  {program} -h | --help
  {program} --version

Options:
  -h --help  Display this help information.
  --version  Display version information.
  --debug    Print debug information.
  -g --gui   Open web searches in the default GUI browser.

Help:
  {program} help [<command>]

{commands}"""

    def describe(self, name: str) -> str:
        command = self.context.registry.get(name)
        if command is None or not command.description:
            return f"No additional information for `{name}`"
        return command.description

    def __call__(self, parameters: Sequence[str]) -> int:
        if parameters:
            print(self.describe(parameters[0]))
        else:
            print(self.overview())
        return 0
