"""
Command processing for CMDLEX.

Slash-commands are split with the CMDLEX tokenizer itself, then dispatched
to the Click command palette. Handles:
- /exit: terminate processing
- /help and --help: command help
- Click usage errors, reported without leaving the REPL
"""

import click
from typing import Final
from rich.console import Console
from cmdlex.commands.app import cli
from cmdlex.lib.log import LOG
from cmdlex.lib.tokenizer import split

console: Final[Console] = Console()


async def command_process(user_input: str) -> bool:
    """Handle commands starting with '/'.

    Args:
        user_input: The user's command input string starting with '/'

    Returns:
        bool: True to continue processing, False to exit
    """
    parts: list[str] = list(split(user_input[1:]))

    if not parts:
        console.print("[bold red]Error: No command provided.[/bold red]")
        return True

    command: str = parts[0]
    args: list[str] = parts[1:]

    try:
        if command == "exit":
            return False

        if command == "help":
            cli.main(args=["--help"], prog_name="/", standalone_mode=False)
            return True

        cli.main(args=[command] + args, prog_name="/", standalone_mode=False)
        return True

    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return True
    except click.exceptions.Abort:
        return True
    except Exception as e:
        LOG(f"Command processing error: {e}")
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        return True
