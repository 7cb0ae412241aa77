"""
Alias Normalization Commands

This module provides a REPL command that previews how declared aliases are
expanded when a parser configuration is built from the session settings.

Commands:
- /alias expand <alias>...: Declare one option with the given aliases and
  show its aliases after normalization.
"""

from rich.console import Console
from rich.table import Table
import click
from cmdlex.commands.base import RichGroup, RichCommand, rich_help
from cmdlex.config.settings import appsettings
from cmdlex.lib.configuration import ConfigurationError, ParserConfiguration
from cmdlex.lib.log import LOG
from cmdlex.lib.symbols import Option

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Preview alias normalization",
    help="""
    Alias Normalization

    Show the aliases a symbol answers to once prefixes are applied.
    """,
)
def alias() -> None:
    """
    Root group for alias commands.
    """
    pass


alias: click.Group = alias


def configuration_fromSettings(option: Option) -> ParserConfiguration:
    """
    Build a configuration for a single option using the session settings.

    :param option: The declared option; its aliases are normalized in place.
    :return: The resulting ParserConfiguration.
    :raises ConfigurationError: If the settings describe an invalid setup.
    """
    return ParserConfiguration(
        [option],
        argument_delimiters=appsettings.delimiters,
        prefixes=appsettings.prefixes,
        allow_unbundling=appsettings.allowUnbundling,
        prefix_policy=appsettings.prefixPolicy,
    )


@alias.command(
    cls=RichCommand,
    help=rich_help(
        command="expand",
        description="Normalize the aliases of one option.",
        usage="/alias expand -- <alias>...",
        args={
            "--": "ends option parsing so aliases like '-v' are taken literally",
            "<alias>": "raw aliases as they would be declared",
        },
    ),
)
@click.argument("aliases", nargs=-1, required=True, type=str)
def expand(aliases: tuple[str, ...]) -> None:
    """
    Show normalized aliases for an option declared with `aliases`.

    :param aliases: Raw aliases for the option.
    """
    option: Option = Option(aliases)
    try:
        parser_config: ParserConfiguration = configuration_fromSettings(option)
    except ConfigurationError as e:
        LOG(f"alias expand failed: {e}")
        console.print(f"[bold red]{e}[/bold red]")
        return

    table: Table = Table(title=f"Aliases of '{option.name}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("alias", style="green")
    table.add_column("origin", style="cyan")
    for index, name in enumerate(option.aliases):
        origin: str = "declared" if index < len(aliases) else "prefixed"
        table.add_row(str(index), name, origin)
    console.print(table)

    if parser_config.root_command:
        console.print(
            f"[yellow]implicit root[/yellow]: [green]{parser_config.root_command.name}[/green] "
            f"[dim]({appsettings.prefixPolicy.value} policy)[/dim]"
        )
