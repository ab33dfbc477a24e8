"""
Option parsing - Two-stage handling of the raw argument list.

Stage one (normalize_args) rewrites the arguments into a uniform token
stream:
  -abc         → -a -b -c
  --flag=value → --flag value
  --           → kept as the end-of-options marker

Stage two (parse_args) walks the tokens once, pulling out the global
flags and splitting the rest into a command name and its parameters.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

END_OF_OPTIONS = "--"

HELP = "help"
VERSION = "version"
DEBUG = "debug"
GUI = "gui"

GLOBAL_FLAGS = {
    "-h": HELP,
    "--help": HELP,
    "--version": VERSION,
    "--debug": DEBUG,
    "-g": GUI,
    "--gui": GUI,
}


@dataclass
class ParsedInvocation:
    """Result of parsing the command line."""
    command: Optional[str] = None
    flags: set = field(default_factory=set)
    parameters: list[str] = field(default_factory=list)

    @property
    def debug(self) -> bool:
        return DEBUG in self.flags

    @property
    def gui(self) -> bool:
        return GUI in self.flags

    def resolve(self, default_command: str) -> tuple[str, list[str]]:
        """
        Decide which command to run.

        The help flag wins over the version flag, which wins over the
        named command. With none of them the default command runs.
        """
        if HELP in self.flags:
            if self.command:
                return HELP, [self.command, *self.parameters]
            return HELP, list(self.parameters)
        if VERSION in self.flags:
            return VERSION, []
        if self.command:
            return self.command, list(self.parameters)
        return default_command, []


def normalize_args(argv: Sequence[str], value_flags: Iterable[str] = ()) -> list[str]:
    """
    Split combined short options and --flag=value forms.

    Args:
        argv: Raw arguments (without the program name)
        value_flags: Short option letters that take a value

    Returns:
        Normalized token list
    """
    value_flags = set(value_flags)
    tokens: list[str] = []
    args = list(argv)

    while args:
        arg = args.pop(0)

        if arg == END_OF_OPTIONS:
            tokens.append(END_OF_OPTIONS)
            tokens.extend(args)
            break

        if arg.startswith("--") and arg.find("=") > 2:
            flag, value = arg.split("=", 1)
            tokens.extend([flag, value])
        elif arg.startswith("-") and not arg.startswith("--") and len(arg) > 2:
            for i, c in enumerate(arg[1:], start=1):
                tokens.append(f"-{c}")
                rest = arg[i + 1:]
                if c in value_flags and rest:
                    tokens.append(rest)
                    break
        else:
            tokens.append(arg)

    return tokens


def parse_args(tokens: Sequence[str]) -> ParsedInvocation:
    """
    Extract global flags and split command from parameters.

    Flags are recognized anywhere on the line until the end-of-options
    marker. The first other token is the command; the rest are its
    parameters in their original order.
    """
    invocation = ParsedInvocation()
    options_ended = False

    for token in tokens:
        if not options_ended:
            if token == END_OF_OPTIONS:
                options_ended = True
                continue
            flag = GLOBAL_FLAGS.get(token)
            if flag:
                invocation.flags.add(flag)
                continue

        if invocation.command is None:
            invocation.command = token
        else:
            invocation.parameters.append(token)

    return invocation
