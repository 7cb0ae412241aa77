"""Tests for command line splitting."""

from collections.abc import Iterator
import pytest
from cmdlex.lib.tokenizer import split


@pytest.mark.parametrize(
    "command_line",
    [
        "one two three four",
        "one two\tthree   four ",
        " one two three   four",
        " one\ntwo\nthree\nfour\n",
        " one\r\ntwo\r\nthree\r\nfour\r\n",
        "one\u00a0two\u2003three\u3000four",
    ],
)
def test_splits_on_whitespace(command_line: str) -> None:
    assert list(split(command_line)) == ["one", "two", "three", "four"]


@pytest.mark.parametrize("command_line", ["", " ", "\t\r\n  "])
def test_blank_input_yields_nothing(command_line: str) -> None:
    assert list(split(command_line)) == []


def test_quoted_values_are_not_split() -> None:
    assert list(split(r'rm -r "c:\temp files"')) == ["rm", "-r", r"c:\temp files"]


def test_multiple_options_with_quoted_arguments() -> None:
    command_line = 'move --from "a b" --to "c d" --verbose'
    assert list(split(command_line)) == [
        "move",
        "--from",
        "a b",
        "--to",
        "c d",
        "--verbose",
    ]


@pytest.mark.parametrize("prefix", ["-", "--", "/"])
@pytest.mark.parametrize("delimiter", ["=", ":"])
def test_quoted_value_after_delimiter_stays_in_option_token(
    prefix: str, delimiter: str
) -> None:
    option = f'{prefix}the-option{delimiter}"c:\\temp files"'
    assert list(split(f"the-command {option}")) == [
        "the-command",
        option.replace('"', ""),
    ]


def test_internal_quotes_do_not_split() -> None:
    command_line = """POST --raw='{"Id":1,"Name":"Alice"}'"""
    assert list(split(command_line)) == ["POST", "--raw='{Id:1,Name:Alice}'"]


def test_internal_whitespace_inside_quotes_is_preserved() -> None:
    command_line = (
        """command --raw='{"Id":1,"Movie Name":"The Three Musketeers"}'"""
    )
    assert list(split(command_line)) == [
        "command",
        "--raw='{Id:1,Movie Name:The Three Musketeers}'",
    ]


@pytest.mark.parametrize(
    "command_line, expected",
    [
        ("D:\\", ["D:\\"]),
        (r"\\server\share\path", [r"\\server\share\path"]),
        (r'"\\server\share\path with spaces"', [r"\\server\share\path with spaces"]),
        (r'"abc" d e', ["abc", "d", "e"]),
        (r'a\\\b d"e f"g h', [r"a\\\b", "de fg", "h"]),
        (r"a\"b c d", ['a"b', "c", "d"]),
        (r"a\\\"b c d", [r'a\\"b', "c", "d"]),
        ('foo"', ["foo"]),
        (r"foo\"", ['foo"']),
    ],
)
def test_non_escaping_backslashes_are_preserved(
    command_line: str, expected: list[str]
) -> None:
    assert list(split(command_line)) == expected


def test_doubly_escaped_command_line_keeps_inner_quotes() -> None:
    command_line = (
        '"dotnet publish \\"xxx.csproj\\" -c Release -o \\"./bin/latest/\\" '
        '-r linux-x64 --self-contained false"'
    )
    assert list(split(command_line)) == [
        'dotnet publish "xxx.csproj" -c Release -o "./bin/latest/" '
        "-r linux-x64 --self-contained false"
    ]


def test_singly_quoted_values_lose_their_quotes() -> None:
    command_line = (
        'dotnet publish "xxx.csproj" -c Release -o "./bin/latest/" '
        "-r linux-x64 --self-contained false"
    )
    assert list(split(command_line)) == [
        "dotnet",
        "publish",
        "xxx.csproj",
        "-c",
        "Release",
        "-o",
        "./bin/latest/",
        "-r",
        "linux-x64",
        "--self-contained",
        "false",
    ]


@pytest.mark.parametrize(
    "command_line, expected",
    [
        ('""', [""]),
        ('a "" b', ["a", "", "b"]),
        ('"a""b"', ["a", "b"]),
    ],
)
def test_explicit_empty_and_adjacent_quoted_regions(
    command_line: str, expected: list[str]
) -> None:
    assert list(split(command_line)) == expected


def test_opening_quote_does_not_start_a_bare_word() -> None:
    # text after a closing quote starts a new token
    assert list(split('"a b"c')) == ["a b", "c"]


def test_quotes_inside_a_bare_word_join_the_word() -> None:
    assert list(split('a"b c"d e')) == ["ab cd", "e"]


@pytest.mark.parametrize(
    "command_line, expected",
    [
        ('"abc def', ["abc def"]),
        ('foo "', ["foo"]),
        ('"a" "', ["a"]),
        (r'rm -r "c:\temp files\"', ["rm", "-r", 'c:\\temp files"']),
        ('say "hi there', ["say", "hi there"]),
    ],
)
def test_unterminated_quotes_degrade_to_best_effort_tokens(
    command_line: str, expected: list[str]
) -> None:
    assert list(split(command_line)) == expected


@pytest.mark.parametrize(
    "command_line",
    [
        'git commit -m "fix: quoted"',
        """POST --raw='{"Id":1}'""",
        'a"b c"d',
        'foo"',
        '"unterminated',
    ],
)
def test_tokens_never_contain_unescaped_quotes(command_line: str) -> None:
    for token in split(command_line):
        assert '"' not in token


@pytest.mark.parametrize(
    "command_line", ["one two three", "git log --oneline -n 5", "a"]
)
def test_rejoining_simple_tokens_is_idempotent(command_line: str) -> None:
    tokens = list(split(command_line))
    assert " ".join(tokens) == command_line
    assert list(split(" ".join(tokens))) == tokens


def test_split_is_lazy_and_independent_per_call() -> None:
    first = split("a b c")
    second = split("x y")
    assert isinstance(first, Iterator)
    assert next(first) == "a"
    assert next(second) == "x"
    assert list(first) == ["b", "c"]
    assert list(second) == ["y"]
    assert list(first) == []
