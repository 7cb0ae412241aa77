"""Tests for symbol definitions and the implicit root factory."""

import pytest
from cmdlex.lib.configuration import ParserConfiguration
from cmdlex.lib.symbols import (
    ROOT_FALLBACK_NAME,
    Argument,
    Command,
    Option,
    executable_name,
    rootCommand_synthesize,
    symbols_flatten,
)


def test_symbol_requires_an_alias() -> None:
    with pytest.raises(ValueError, match="at least one alias"):
        Option([])


def test_name_strips_prefix_characters() -> None:
    assert Option(["--verbose", "-v"]).name == "verbose"
    assert Option(["/help"]).name == "help"
    assert Option(["--"]).name == "--"


def test_add_alias_keeps_duplicates_in_order() -> None:
    option = Option(["v"])
    option.add_alias("-v")
    option.add_alias("-v")
    assert option.aliases == ["v", "-v", "-v"]
    assert option.has_alias("-v")
    assert not option.has_alias("--v")


def test_command_builder_and_walk() -> None:
    root = Command("tool")
    move = root.add_command("move", description="Move things")
    source = move.add_option(["from"])
    target = move.add_argument("target")
    verbose = root.add_option(["v", "verbose"])

    assert root.is_composite and not verbose.is_composite
    assert isinstance(target, Argument)
    assert list(root.walk()) == [move, source, target, verbose]


def test_root_synthesized_when_no_command_declared() -> None:
    declared = [Option(["v"]), Argument(["path"])]
    root = rootCommand_synthesize(declared, name="tool")
    assert isinstance(root, Command)
    assert root.name == "tool"
    assert root.symbols == declared


def test_no_root_when_a_command_is_declared() -> None:
    assert rootCommand_synthesize([Option(["v"]), Command("move")]) is None


def test_root_defaults_to_executable_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/mytool.py", "--flag"])
    assert executable_name() == "mytool"
    assert rootCommand_synthesize([Option(["v"])]).name == "mytool"


def test_executable_name_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", [])
    assert executable_name() == ROOT_FALLBACK_NAME


def test_flatten_includes_descendants_once() -> None:
    shared = Option(["shared"])
    move = Command("move", symbols=[shared, Option(["to"])])
    flat = symbols_flatten([shared, move])
    assert flat == [shared, move, move.symbols[1]]


def test_help_fields_survive_configuration() -> None:
    verbose = Option(["v"], description="Chatty output", is_hidden=True)
    plain = Argument(["path"])
    ParserConfiguration([verbose, plain])

    assert verbose.description == "Chatty output"
    assert verbose.is_hidden is True
    assert plain.description == ""
    assert plain.is_hidden is False
