"""
Command table - The fixed set of subcommands and their handlers.

Built once per invocation. Handlers close over the CommandContext so
they can see settings, the --gui flag and the registry itself.
"""

from loguru import logger

from searchsh import __version__
from searchsh.services.browser import BrowserService

from .handlers import (
    AckHandler,
    AgHandler,
    CommandsCommand,
    FindHandler,
    GrepHandler,
    HelpCommand,
    LocateHandler,
    RgHandler,
    SpotlightHandler,
    VersionCommand,
    WebSearchHandler,
)
from .handlers import builtin, local_search, spotlight, web_search
from .router import Command, CommandContext, CommandRegistry


def build_registry(context: CommandContext) -> CommandRegistry:
    """
    Create the registry for one run and attach it to the context.

    Args:
        context: Shared state; its ``registry`` is set to the result

    Returns:
        Populated CommandRegistry
    """
    program = context.program
    engines = context.settings.get("engines", {})
    exclude_dirs = context.setting("grep", "exclude_dirs", local_search.DEFAULT_EXCLUDE_DIRS)
    browser = BrowserService(
        terminal_browser=context.setting("browser", "terminal", "w3m"),
        force_gui=context.gui,
    )
    ddg_url = engines.get("ddg", web_search.DUCKDUCKGO_URL)

    table = [
        Command("version", builtin.VERSION_DESCRIPTION.format(program=program, version=__version__),
                VersionCommand()),
        Command("help", builtin.HELP_DESCRIPTION.format(program=program), HelpCommand(context)),
        Command("commands", builtin.COMMANDS_DESCRIPTION.format(program=program),
                CommandsCommand(context)),
        Command("ack", local_search.DESCRIPTIONS["ack"].format(program=program), AckHandler()),
        Command("ag", local_search.DESCRIPTIONS["ag"].format(program=program), AgHandler()),
        Command("find", local_search.DESCRIPTIONS["find"].format(program=program), FindHandler()),
        Command("grep", local_search.grep_description(program, exclude_dirs),
                GrepHandler(exclude_dirs)),
        Command("locate", local_search.DESCRIPTIONS["locate"].format(program=program),
                LocateHandler()),
        Command("rg", local_search.DESCRIPTIONS["rg"].format(program=program), RgHandler()),
    ]

    if spotlight.spotlight_available():
        table.append(Command("spotlight", spotlight.DESCRIPTION.format(program=program),
                             SpotlightHandler()))

    for name, engine in web_search.DEFAULT_ENGINES.items():
        table.append(Command(
            name,
            web_search.engine_description(program, name, f"Search with {engine['name']}."),
            WebSearchHandler(name, engines.get(name, engine["url"]), browser),
        ))

    for name, bang in web_search.DEFAULT_BANGS.items():
        table.append(Command(
            name,
            web_search.engine_description(program, name, bang["summary"]),
            WebSearchHandler(name, ddg_url, browser, prefix=bang["bang"]),
        ))

    registry = CommandRegistry()
    for command in table:
        registry.register(command)

    context.registry = registry
    logger.debug(f"registered commands: {registry.names()}")
    return registry
