"""
Parser Configuration Commands

This module provides REPL commands for inspecting and adjusting the parser
front-end settings of the current session. Changes live in `appsettings`
and last until the process exits.

Commands:
- /config show: Show prefixes, delimiters, unbundling and prefix policy.
- /config policy <all|any>: Set the alias prefix predicate.
- /config prefixes [<prefix>...]: Show or replace the accepted prefixes.
"""

from rich.console import Console
from rich.table import Table
import click
from cmdlex.commands.base import RichGroup, RichCommand, rich_help
from cmdlex.config.settings import appsettings
from cmdlex.lib.log import LOG
from cmdlex.models.dataModel import PrefixPolicy

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Inspect parser settings",
    help="""
    Parser Configuration

    Commands to inspect and change prefixes and the prefix policy.
    """,
)
def config() -> None:
    """
    Root group for configuration commands.
    """
    pass


config: click.Group = config


def _values(values: list[str]) -> str:
    return " ".join(repr(value) for value in values) if values else "<none>"


@config.command(
    cls=RichCommand,
    help=rich_help(
        command="show",
        description="Show the active parser configuration.",
        usage="/config show",
        args={"<None>": "no arguments"},
    ),
)
def show() -> None:
    """
    Print the settings a ParserConfiguration would be built from.
    """
    table: Table = Table(title="Parser configuration", show_header=False)
    table.add_column("setting", style="cyan")
    table.add_column("value", style="green")
    table.add_row("prefixes", _values(appsettings.prefixes))
    table.add_row("delimiters", _values(appsettings.delimiters))
    table.add_row("unbundling", "on" if appsettings.allowUnbundling else "off")
    table.add_row("prefix policy", appsettings.prefixPolicy.value)
    console.print(table)


@config.command(
    cls=RichCommand,
    help=rich_help(
        command="policy",
        description="Set how aliases are judged to be already prefixed.",
        usage="/config policy <all|any>",
        args={
            "<all>": "alias must start with every prefix (compatible default)",
            "<any>": "alias must start with at least one prefix",
        },
    ),
)
@click.argument(
    "value", type=click.Choice([policy.value for policy in PrefixPolicy])
)
def policy(value: str) -> None:
    """
    Set the session prefix policy.

    :param value: "all" or "any".
    """
    appsettings.prefixPolicy = PrefixPolicy(value)
    LOG(f"Prefix policy set to {value}")
    console.print(f"[bold green]Prefix policy set to '{value}'.[/bold green]")


@config.command(
    cls=RichCommand,
    help=rich_help(
        command="prefixes",
        description="Show or replace the accepted alias prefixes.",
        usage="/config prefixes -- [<prefix>...]",
        args={
            "--": "ends option parsing so prefixes like '-' are taken literally",
            "<prefix>": "new prefixes in order; omit to show the current ones",
        },
    ),
)
@click.argument("values", nargs=-1, type=str)
def prefixes(values: tuple[str, ...]) -> None:
    """
    Show or set the session prefixes.

    :param values: Replacement prefixes; empty to show.
    """
    if not values:
        console.print(f"[yellow]prefixes[/yellow]: [green]{_values(appsettings.prefixes)}[/green]")
        return
    if any(not value for value in values):
        console.print("[bold red]Error: prefixes must not be empty strings.[/bold red]")
        return
    appsettings.prefixes = list(values)
    LOG(f"Prefixes set to {list(values)}")
    console.print(
        f"[bold green]Prefixes set to {_values(appsettings.prefixes)}.[/bold green]"
    )
