"""
CMDLEX Main Module.

Entry point for cmdlex, the command-line front end: a quoting-aware
tokenizer plus alias prefix normalization for declared parser symbols.

Features:
- Splits a command line given on stdin or with --split
- Interactive REPL showing tokens and previewing alias normalization
- Session overrides of the alias prefix policy

Examples:
    Start interactive REPL:
        $ cmdlex

    Single command line:
        $ cmdlex --split 'move --from "a b" --to c'
        $ cmdlex --json --split 'POST --raw=\'{"Id":1}\''
        $ echo 'rm -r "temp files"' | cmdlex

Note:
    Input priority order:
    1. --split argument (if provided)
    2. stdin (if piped)
    3. interactive REPL (default)

    One-shot input is split verbatim; slash-commands exist only in the REPL.
"""

from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from types import FrameType
from typing import Final, Optional
import asyncio
import signal
import sys
from rich.console import Console
from cmdlex.config.settings import appsettings
from cmdlex.lib.input import mode_detect, input_readStdin, input_handle
from cmdlex.lib.log import LOG
from cmdlex.lib.repl import repl_do
from cmdlex.models.dataModel import InputMode, PrefixPolicy

__version__: Final[str] = "0.1.0"

DISPLAY_TITLE: Final[str] = """
┏━╸┏┳┓╺┳┓╻  ┏━╸╻ ╻
┃  ┃┃┃ ┃┃┃  ┣╸ ┏╋┛
┗━╸╹ ╹╺┻┛┗━╸┗━╸╹ ╹
"""

console: Final[Console] = Console()

parser: Final[ArgumentParser] = ArgumentParser(
    prog="cmdlex",
    description="Split command lines into tokens and preview alias normalization.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument("--split", type=str, help="Command line to split (instead of stdin)")
parser.add_argument(
    "--json", action="store_true", help="Print tokens as a JSON array"
)
parser.add_argument(
    "--policy",
    type=str,
    choices=[policy.value for policy in PrefixPolicy],
    help="Alias prefix policy for this run (default from CMDLEX_PREFIXPOLICY)",
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def config_setup(options: Namespace) -> bool:
    """Apply command-line overrides to the session settings.

    Args:
        options: Parsed command-line arguments

    Returns:
        bool: True if configuration successful
    """
    try:
        if options.policy:
            appsettings.prefixPolicy = PrefixPolicy(options.policy)
            LOG(f"Prefix policy overridden: {options.policy}")
        return True
    except ValueError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return False


async def async_main(options: Namespace) -> None:
    """Asynchronous main function handling all input modes.

    Args:
        options: Parsed command-line arguments
    """
    try:
        if not config_setup(options):
            sys.exit(2)

        mode: InputMode = await mode_detect(options.split)

        if mode.has_stdin:
            input_text: str = await input_readStdin()
            await input_handle(input_text, non_interactive=True, as_json=options.json)

        elif mode.split_string is not None:
            await input_handle(
                mode.split_string, non_interactive=True, as_json=options.json
            )

        else:
            console.print(DISPLAY_TITLE)
            await repl_do()

    except SystemExit:
        raise
    except Exception as e:
        LOG(f"Unhandled exception in async_main: {e}")
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        sys.exit(1)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for interruption outside the prompt."""
    console.print("\n[bold red]Interrupt received.[/bold red]")
    sys.exit(0)


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point.

    Args:
        argv: Arguments to parse; defaults to sys.argv[1:]
    """
    options: Namespace = parser.parse_args(argv)

    signal.signal(signal.SIGINT, signal_handle)

    try:
        asyncio.run(async_main(options))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")


if __name__ == "__main__":
    main()
