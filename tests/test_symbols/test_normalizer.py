"""Tests for alias prefix normalization under both prefix policies."""

from typing import Final
import pytest
from cmdlex.lib.normalizer import alias_hasPrefix, aliases_normalize
from cmdlex.lib.symbols import Argument, Command, Option
from cmdlex.models.dataModel import PrefixPolicy

PREFIXES: Final[tuple[str, ...]] = ("-", "--", "/")


@pytest.mark.parametrize(
    "alias, policy, expected",
    [
        ("v", PrefixPolicy.ALL, False),
        ("--verbose", PrefixPolicy.ALL, False),
        ("--verbose", PrefixPolicy.ANY, True),
        ("/help", PrefixPolicy.ANY, True),
        ("v", PrefixPolicy.ANY, False),
    ],
)
def test_alias_has_prefix(alias: str, policy: PrefixPolicy, expected: bool) -> None:
    assert alias_hasPrefix(alias, PREFIXES, policy) is expected


def test_all_policy_with_single_prefix() -> None:
    assert alias_hasPrefix("-v", ["-"], PrefixPolicy.ALL)
    assert not alias_hasPrefix("v", ["-"], PrefixPolicy.ALL)


def test_bare_alias_gets_one_variant_per_prefix_in_order() -> None:
    option = Option(["v"])
    aliases_normalize([option], PREFIXES)
    assert option.aliases == ["v", "-v", "--v", "/v"]


def test_each_declared_alias_is_expanded_from_a_snapshot() -> None:
    option = Option(["v", "verbose"])
    aliases_normalize([option], PREFIXES)
    assert option.aliases == [
        "v",
        "verbose",
        "-v",
        "--v",
        "/v",
        "-verbose",
        "--verbose",
        "/verbose",
    ]


def test_all_policy_expands_already_prefixed_aliases() -> None:
    option = Option(["--verbose"])
    aliases_normalize([option], PREFIXES, PrefixPolicy.ALL)
    assert option.aliases == ["--verbose", "---verbose", "----verbose", "/--verbose"]


def test_any_policy_leaves_prefixed_aliases_alone() -> None:
    option = Option(["--verbose", "v"])
    aliases_normalize([option], PREFIXES, PrefixPolicy.ANY)
    assert option.aliases == ["--verbose", "v", "-v", "--v", "/v"]


def test_no_deduplication_against_existing_aliases() -> None:
    option = Option(["v", "-v"])
    aliases_normalize([option], PREFIXES, PrefixPolicy.ALL)
    assert option.aliases == ["v", "-v", "-v", "--v", "/v", "--v", "---v", "/-v"]


@pytest.mark.parametrize("policy", list(PrefixPolicy))
def test_declared_aliases_survive_and_size_grows_per_failing_alias(
    policy: PrefixPolicy,
) -> None:
    symbols = [
        Option(["v", "--verbose", "/q"]),
        Argument(["path"]),
        Command("move"),
    ]
    before = [list(symbol.aliases) for symbol in symbols]

    aliases_normalize(symbols, PREFIXES, policy)

    for symbol, declared in zip(symbols, before):
        assert symbol.aliases[: len(declared)] == declared
        failing = [a for a in declared if not alias_hasPrefix(a, PREFIXES, policy)]
        assert len(symbol.aliases) == len(declared) + len(failing) * len(PREFIXES)


@pytest.mark.parametrize("policy", list(PrefixPolicy))
def test_empty_prefix_collection_changes_nothing(policy: PrefixPolicy) -> None:
    option = Option(["v"])
    aliases_normalize([option], (), policy)
    assert option.aliases == ["v"]


def test_custom_multi_character_prefixes() -> None:
    option = Option(["name"])
    aliases_normalize([option], ["+", "++"], PrefixPolicy.ANY)
    assert option.aliases == ["name", "+name", "++name"]
