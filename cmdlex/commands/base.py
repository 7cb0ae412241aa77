"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: a Click group whose help lists subcommands in colour.
- `RichCommand`: a Click command whose help is a Rich panel followed by
  its arguments and option aliases.
- `rich_help`: builder for the markup used as command help text.

Help rendering errors are logged and reported, never raised into the REPL.
"""

from rich.console import Console
from rich.panel import Panel
import click
from cmdlex.lib.log import LOG

console: Console = Console()

PANEL_WIDTH_MAX: int = 80


def rich_help(command: str, description: str, usage: str, args: dict[str, str]) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Mapping of argument names to their descriptions.
    :return: Formatted Rich help string.
    """
    lines: list[str] = [
        f"[bold cyan]{description}[/bold cyan]",
        "",
        "[bold yellow]Usage:[/bold yellow]",
        f"    [green]{usage}[/green]",
        "",
        "[bold yellow]Arguments:[/bold yellow]",
    ]
    lines += [f"    [green]{arg}[/green]: {desc}" for arg, desc in args.items()]
    return "\n".join(lines) + "\n"


class RichGroup(click.Group):
    """
    A Click Group rendering its help with Rich.

    Group help shows the usage line, the group description and one line per
    registered subcommand using its short help.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        try:
            info_name: str = ctx.info_name.lstrip("/") if ctx.info_name else ""
            console.print(
                f"[bold yellow]Usage:[/bold yellow] [cyan]/{info_name}[/cyan] "
                f"[magenta]COMMAND [ARGS]...[/magenta]\n"
            )

            if self.help:
                console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

            if self.commands:
                console.print("[bold green]Available Commands:[/bold green]")
                for name, command in self.commands.items():
                    console.print(
                        f"- [cyan]{name}[/cyan]: "
                        f"[white]{command.short_help or 'No description available.'}[/white]"
                    )
                console.print()
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")


class RichCommand(click.Command):
    """
    A Click Command rendering its help in a Rich panel.

    Options are listed with every alias they answer to, which is the same
    information the parser front end normalizes.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        try:
            help_text: str = self.help or "No help text available."
            panel_width: int = max(len(line) for line in help_text.splitlines()) + 10
            console.print(
                Panel(
                    help_text,
                    expand=False,
                    width=min(panel_width, PANEL_WIDTH_MAX),
                    border_style="cyan",
                )
            )

            options: list[click.Option] = [
                param for param in self.get_params(ctx) if isinstance(param, click.Option)
            ]
            if options:
                console.print("[bold yellow]Options:[/bold yellow]")
                for option in options:
                    aliases: str = ", ".join(option.opts + option.secondary_opts)
                    console.print(
                        f"- [cyan]{aliases}[/cyan]: {option.help or 'No description'}"
                    )
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")
