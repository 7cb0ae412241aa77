"""
REPL implementation for CMDLEX.

Reads lines, splits plain lines into tokens and dispatches slash-commands
until /exit, Ctrl-D or Ctrl-C at the prompt.
"""

from rich.console import Console
from typing import Final
from cmdlex.lib.input import input_get, input_handle
from cmdlex.lib.log import LOG
from cmdlex.models.dataModel import InputResult

console: Final[Console] = Console()

WELCOME: Final[str] = """
[cyan]Welcome to the CMDLEX REPL!
[green]Type a command line to see its tokens.
[green]Use [white]/help[green] for command list, [white]/exit[green] to quit.
"""


async def repl_do() -> None:
    """Main REPL entry point.

    Exits on:
    - /exit command
    - end of input or interrupt at the prompt
    - errors escaping input handling
    """
    console.print(WELCOME)

    continue_repl: bool = True
    while continue_repl:
        try:
            input_result: InputResult = await input_get()

            if not input_result.continue_loop:
                break

            if not input_result.text:
                continue

            continue_repl = await input_handle(
                text=input_result.text, non_interactive=False
            )

        except KeyboardInterrupt:
            console.print("\n[bold yellow]Use '/exit' to quit properly[/bold yellow]")
        except Exception as e:
            LOG(f"REPL critical error: {e}")
            console.print(f"[bold red]Fatal error: {e}[/bold red]")
            continue_repl = False

    console.print("[bold cyan]REPL session terminated[/bold cyan]")
