"""
Symbol definitions for CMDLEX.

Symbols are the commands, options and arguments a parser is built from.
Each symbol carries an ordered list of raw aliases exactly as declared;
normalization may append prefixed variants but never removes one.

Only `Command` is composite. When a set of declared symbols has no command
at all, `rootCommand_synthesize` wraps them in a single implicit root named
after the running executable.

Example:
    verbose = Option(["v", "verbose"], description="Chatty output")
    move = Command("move", symbols=[Option(["from"]), Option(["to"])])
    root = rootCommand_synthesize([verbose])   # Command wrapping verbose
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional
import sys

ROOT_FALLBACK_NAME: str = "cmdlex"
_NAME_STRIP: str = "-/"


class Symbol:
    """A named, aliasable element of a command line definition.

    Attributes:
        aliases: Raw aliases in declaration order
        description: Help text for the help renderer
        is_hidden: Whether help rendering should omit this symbol

    `description` and `is_hidden` are carried through a ParserConfiguration
    for the help renderer that consumes it; cmdlex itself never reads them
    and normalization leaves them untouched.
    """

    is_composite: bool = False

    def __init__(
        self,
        aliases: Iterable[str],
        description: str = "",
        is_hidden: bool = False,
    ) -> None:
        self.aliases: list[str] = list(aliases)
        if not self.aliases:
            raise ValueError(f"{type(self).__name__} requires at least one alias")
        self.description: str = description
        self.is_hidden: bool = is_hidden

    @property
    def name(self) -> str:
        """First alias with any leading prefix characters removed."""
        return self.aliases[0].lstrip(_NAME_STRIP) or self.aliases[0]

    def add_alias(self, alias: str) -> None:
        self.aliases.append(alias)

    def has_alias(self, alias: str) -> bool:
        return alias in self.aliases

    def __repr__(self) -> str:
        return f"{type(self).__name__}(aliases={self.aliases!r})"


class Option(Symbol):
    """Named switch or valued option, e.g. `-v` / `--verbose`."""


class Argument(Symbol):
    """Positional value holder."""


class Command(Symbol):
    """Composite symbol holding child options, arguments and subcommands."""

    is_composite: bool = True

    def __init__(
        self,
        name: str,
        description: str = "",
        symbols: Iterable[Symbol] = (),
        is_hidden: bool = False,
    ) -> None:
        super().__init__([name], description=description, is_hidden=is_hidden)
        self.symbols: list[Symbol] = list(symbols)

    def add_symbol(self, symbol: Symbol) -> Symbol:
        self.symbols.append(symbol)
        return symbol

    def add_option(self, aliases: Iterable[str], description: str = "") -> Option:
        option: Option = Option(aliases, description=description)
        self.add_symbol(option)
        return option

    def add_argument(self, name: str, description: str = "") -> Argument:
        argument: Argument = Argument([name], description=description)
        self.add_symbol(argument)
        return argument

    def add_command(self, name: str, description: str = "") -> "Command":
        command: Command = Command(name, description=description)
        self.add_symbol(command)
        return command

    def walk(self) -> Iterator[Symbol]:
        """Yield every descendant, depth-first, in declaration order."""
        for symbol in self.symbols:
            yield symbol
            if isinstance(symbol, Command):
                yield from symbol.walk()


def symbols_flatten(symbols: Iterable[Symbol]) -> list[Symbol]:
    """Every declared symbol and its descendants, each exactly once, in order."""
    flat: list[Symbol] = []
    seen: set[int] = set()
    for symbol in symbols:
        candidates: list[Symbol] = [symbol]
        if isinstance(symbol, Command):
            candidates += symbol.walk()
        for candidate in candidates:
            if id(candidate) not in seen:
                seen.add(id(candidate))
                flat.append(candidate)
    return flat


def executable_name() -> str:
    """Name of the running program, used for the implicit root command."""
    return Path(sys.argv[0]).stem if sys.argv and sys.argv[0] else ROOT_FALLBACK_NAME


def rootCommand_synthesize(
    symbols: Iterable[Symbol], name: Optional[str] = None
) -> Optional[Command]:
    """Wrap the declared symbols in an implicit root when none is a command.

    Args:
        symbols: Declared top-level symbols
        name: Root name; defaults to the executable name

    Returns:
        A new root Command whose children are exactly `symbols`, or None
        when at least one declared symbol is already a Command
    """
    declared: list[Symbol] = list(symbols)
    if any(symbol.is_composite for symbol in declared):
        return None
    return Command(name or executable_name() or ROOT_FALLBACK_NAME, symbols=declared)
