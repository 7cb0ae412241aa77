"""
Parser configuration for CMDLEX.

`ParserConfiguration` is the composition point handed to the matching engine
and the help renderer. Construction:

1. rejects a missing or empty symbol collection
2. synthesizes an implicit root command when no declared symbol is a command
3. resolves defaults for delimiters, prefixes and unbundling
4. normalizes the aliases of the declared symbols exactly once

After construction the configuration is read-only.

Example:
    config = ParserConfiguration([Option(["v", "verbose"])])
    config.root_command_is_implicit     # True
    config.symbols[0].symbols[0].aliases
        # ['v', 'verbose', '-v', '--v', '/v', '-verbose', '--verbose', '/verbose']
"""

from typing import Final, Iterable, Optional
from cmdlex.lib.log import LOG
from cmdlex.lib.normalizer import aliases_normalize
from cmdlex.lib.symbols import (
    Command,
    Symbol,
    rootCommand_synthesize,
    symbols_flatten,
)
from cmdlex.models.dataModel import PrefixPolicy

DEFAULT_PREFIXES: Final[tuple[str, ...]] = ("-", "--", "/")
DEFAULT_DELIMITERS: Final[tuple[str, ...]] = (":", "=")


class ConfigurationError(ValueError):
    """Invalid parser setup; raised before any parser exists."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Configuration error: {message}")


class ParserConfiguration:
    """Resolved, normalized setup for one parser build.

    Attributes:
        symbols: Top-level symbols; the implicit root alone when synthesized
        argument_delimiters: Characters separating an option from its value
        prefixes: Accepted alias prefixes, in declaration order
        allow_unbundling: Whether `-abc` may stand for `-a -b -c`
        prefix_policy: Predicate used during alias normalization
        root_command: The synthesized root, or None
    """

    def __init__(
        self,
        symbols: Optional[Iterable[Symbol]],
        argument_delimiters: Optional[Iterable[str]] = None,
        prefixes: Optional[Iterable[str]] = None,
        allow_unbundling: bool = True,
        prefix_policy: PrefixPolicy = PrefixPolicy.ALL,
    ) -> None:
        """Build and normalize a configuration.

        Args:
            symbols: Declared symbols; must be non-empty
            argument_delimiters: Single-character delimiters, default `:` and `=`
            prefixes: Alias prefixes, default `-`, `--` and `/`
            allow_unbundling: Unbundling flag for the matching engine
            prefix_policy: ALL (compatible) or ANY

        Raises:
            ConfigurationError: If symbols is None or empty, or a delimiter
                is not exactly one character
        """
        if symbols is None:
            raise ConfigurationError("symbols must not be None.")
        declared: list[Symbol] = list(symbols)
        if not declared:
            raise ConfigurationError("You must specify at least one symbol.")

        delimiters: tuple[str, ...] = (
            DEFAULT_DELIMITERS
            if argument_delimiters is None
            else tuple(argument_delimiters)
        )
        for delimiter in delimiters:
            if len(delimiter) != 1:
                raise ConfigurationError(
                    f"Argument delimiter must be a single character: {delimiter!r}"
                )

        self._root_command: Optional[Command] = rootCommand_synthesize(declared)
        if self._root_command:
            LOG(
                f"No command declared; wrapping {len(declared)} symbol(s) "
                f"in implicit root '{self._root_command.name}'"
            )
            self._symbols: tuple[Symbol, ...] = (self._root_command,)
        else:
            self._symbols = tuple(declared)

        self._argument_delimiters: tuple[str, ...] = delimiters
        self._allow_unbundling: bool = allow_unbundling
        self._prefixes: tuple[str, ...] = (
            DEFAULT_PREFIXES if prefixes is None else tuple(prefixes)
        )
        self._prefix_policy: PrefixPolicy = prefix_policy

        # declared symbols and their descendants; never the implicit root
        normalized: list[Symbol] = symbols_flatten(declared)
        aliases_normalize(normalized, self._prefixes, self._prefix_policy)
        LOG(
            f"Normalized {len(normalized)} symbol(s) with prefixes "
            f"{list(self._prefixes)} ({self._prefix_policy.value})"
        )

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        return self._symbols

    @property
    def argument_delimiters(self) -> tuple[str, ...]:
        return self._argument_delimiters

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    @property
    def allow_unbundling(self) -> bool:
        return self._allow_unbundling

    @property
    def prefix_policy(self) -> PrefixPolicy:
        return self._prefix_policy

    @property
    def root_command(self) -> Optional[Command]:
        return self._root_command

    @property
    def root_command_is_implicit(self) -> bool:
        return self._root_command is not None
