"""
Input handling and processing for CMDLEX.

This module collects user input and routes it either to the slash-command
palette or to the tokenizer.

The module handles:
- Interactive input with persistent history
- Input mode detection (stdin, --split, REPL)
- Tokenizing plain input and rendering the tokens
- Error handling and exit codes for one-shot use

Processing order (REPL lines only):
1. Leading `\\/` escapes command detection
2. Lines starting with `/` are commands
3. Everything else is split into tokens

One-shot input (stdin or --split) is always split verbatim, so command
lines such as `/usr/bin/ls -la` keep their leading slash.
"""

import json
import sys
from typing import Final, Optional
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.table import Table
from cmdlex.config.settings import CONFIG_DIR, HISTORY_FILE
from cmdlex.lib.command import command_process
from cmdlex.lib.log import LOG
from cmdlex.lib.tokenizer import split
from cmdlex.models.dataModel import InputMode, InputResult, ProcessResult

console: Final[Console] = Console()

PROMPT: Final[str] = "cmdlex> "
COMMAND_ESCAPE: Final[str] = "\\/"


class REPLSession:
    """Manages REPL input session with history support."""

    def __init__(self) -> None:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        self.session: PromptSession = PromptSession(
            history=FileHistory(str(HISTORY_FILE)),
            enable_history_search=True,
        )


# Global session instance
repl_session: Optional[REPLSession] = None


async def input_get() -> InputResult:
    """Get user input with prompt.

    Returns:
        InputResult containing:
            - text: The user input text
            - continue_loop: Whether to continue processing
            - error: Any error message if input failed

    Note:
        EOF (Ctrl-D) ends the loop like an interrupt does.
    """
    global repl_session
    try:
        if not repl_session:
            repl_session = REPLSession()

        user_input: str = await repl_session.session.prompt_async(PROMPT)
        # leading blanks only; trailing ones can sit inside an open quote
        return InputResult(text=user_input.lstrip(), continue_loop=True)

    except (KeyboardInterrupt, EOFError):
        return InputResult(text="", continue_loop=False, error="Interrupt received")
    except Exception as e:
        return InputResult(text="", continue_loop=False, error=f"Input error: {e}")


async def mode_detect(split_string: str | None = None) -> InputMode:
    """Detect the appropriate input mode.

    Args:
        split_string: Optional command line passed with --split

    Returns:
        InputMode indicating how to handle input

    Note:
        Priority order:
        1. --split string
        2. Stdin content
        3. REPL mode

        A non-tty stdin is left unread when --split is given.
    """
    try:
        if split_string is not None:
            return InputMode(has_stdin=False, split_string=split_string, use_repl=False)
        if not sys.stdin.isatty():
            return InputMode(has_stdin=True, split_string=None, use_repl=False)
        return InputMode(has_stdin=False, split_string=None, use_repl=True)

    except Exception as e:
        LOG(f"Error detecting input mode: {e}")
        return InputMode(has_stdin=False, split_string=None, use_repl=True)


async def input_readStdin() -> str:
    """Read content from stdin.

    Returns:
        Content read from stdin, trailing line break removed

    Raises:
        IOError: If stdin read fails
    """
    try:
        return sys.stdin.read().rstrip("\r\n")
    except Exception as e:
        LOG(f"Error reading from stdin: {e}")
        raise IOError(f"Failed to read from stdin: {e}")


def tokens_table(tokens: list[str]) -> Table:
    """Build a table listing tokens with their position and length."""
    table: Table = Table(title=f"{len(tokens)} token(s)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("token", style="green")
    table.add_column("len", justify="right", style="cyan")
    for index, token in enumerate(tokens):
        table.add_row(str(index), repr(token), str(len(token)))
    return table


async def input_process(text: str, commands: bool = True) -> ProcessResult:
    """Process any type of input (commands or command lines to split).

    Args:
        text: Raw input text to process
        commands: Honor slash-commands and the `\\/` escape; when False
            the text is split as is

    Returns:
        ProcessResult containing tokens or command status
    """
    try:
        if commands and text.startswith(COMMAND_ESCAPE):
            text = text[1:]
        elif commands and text.startswith("/"):
            try:
                continue_processing: bool = await command_process(text)
                return ProcessResult(
                    text=text,
                    is_command=True,
                    should_exit=not continue_processing,
                )
            except Exception as e:
                LOG(f"Command processing error: {e}")
                return ProcessResult(
                    text="",
                    is_command=True,
                    should_exit=True,
                    error=str(e),
                    success=False,
                    exit_code=1,
                )

        return ProcessResult(
            text=text,
            tokens=list(split(text)),
            is_command=False,
            should_exit=False,
        )

    except Exception as e:
        LOG(f"Error processing input: {e}")
        return ProcessResult(
            text="",
            is_command=False,
            should_exit=True,
            error=str(e),
            success=False,
            exit_code=1,
        )


def tokens_print(tokens: list[str], as_json: bool = False) -> None:
    """Print tokens for scripting: one per line, or a JSON array."""
    if as_json:
        console.print(json.dumps(tokens), markup=False, highlight=False, soft_wrap=True)
        return
    for token in tokens:
        console.print(token, markup=False, highlight=False, soft_wrap=True)


async def input_handle(
    text: str, non_interactive: bool = False, as_json: bool = False
) -> bool:
    """Handle input processing and return whether to continue REPL loop.

    Args:
        text: Input line (or whole stdin content)
        non_interactive: Exit the process with the result's exit code
        as_json: In non-interactive mode, print tokens as a JSON array

    Returns:
        bool: True if REPL should continue, False if should exit
    """
    process_result: ProcessResult = await input_process(
        text, commands=not non_interactive
    )
    if not process_result.success:
        console.print(f"[bold red]Error: {process_result.error}[/bold red]")
        if non_interactive:
            sys.exit(process_result.exit_code)
        return True

    should_exit: bool = False
    if process_result.is_command:
        if process_result.should_exit and not non_interactive:
            console.print("[bold cyan]Exiting.[/bold cyan]")
            should_exit = True
    elif non_interactive:
        tokens_print(process_result.tokens, as_json)
    else:
        console.print(tokens_table(process_result.tokens))

    if non_interactive:
        sys.exit(process_result.exit_code)

    return not should_exit
