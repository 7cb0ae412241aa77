"""
Alias prefix normalization for CMDLEX.

Runs once over the declared symbols before any parsing. Every raw alias
that does not already satisfy the prefix predicate gets one extra alias
per configured prefix, formed by plain concatenation:

    prefixes ("-", "--", "/"), alias "verbose"
        -> "verbose", "-verbose", "--verbose", "/verbose"

The predicate is chosen by `PrefixPolicy`:
- ALL: alias must start with every prefix. The default; for
  multi-character prefix sets it is almost never true, so
  already-prefixed aliases are expanded as well.
- ANY: alias must start with at least one prefix.
"""

from typing import Iterable, Sequence
from cmdlex.lib.symbols import Symbol
from cmdlex.models.dataModel import PrefixPolicy


def alias_hasPrefix(
    alias: str, prefixes: Sequence[str], policy: PrefixPolicy = PrefixPolicy.ALL
) -> bool:
    """Whether `alias` already carries an accepted prefix under `policy`."""
    if policy is PrefixPolicy.ANY:
        return any(alias.startswith(prefix) for prefix in prefixes)
    return all(alias.startswith(prefix) for prefix in prefixes)


def aliases_normalize(
    symbols: Iterable[Symbol],
    prefixes: Sequence[str],
    policy: PrefixPolicy = PrefixPolicy.ALL,
) -> None:
    """Append prefixed variants to each symbol's aliases, in place.

    Args:
        symbols: Symbols whose aliases are normalized
        prefixes: Accepted prefixes, in declaration order
        policy: Predicate deciding whether an alias is already prefixed

    Note:
        Aliases are snapshotted per symbol, so appended variants are not
        themselves inspected. Nothing is de-duplicated or removed.
    """
    for symbol in symbols:
        for alias in list(symbol.aliases):
            if alias_hasPrefix(alias, prefixes, policy):
                continue
            for prefix in prefixes:
                symbol.add_alias(prefix + alias)
