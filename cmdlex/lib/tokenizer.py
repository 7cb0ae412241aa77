r"""
Command line tokenizer for CMDLEX.

Splits a single command-line string into tokens, honoring double-quoted
regions and backslash-escaped quotes. The scanner is a two-axis state
machine driven by an explicit transition table:

- word state:  TOKEN_START (no bare word open) or IN_WORD
- quote state: OUTSIDE or INSIDE a double-quoted region

Each character is classified as whitespace, quote, escaped quote (a quote
immediately preceded by a backslash) or other, and the pair of states plus
the character class selects one `Step` and the next pair of states.

Token text is the raw input slice between the token start and the scan
position, post-processed so that every backslash-quote pair collapses to a
literal quote and every other quote is dropped. Backslashes that are not
adjacent to a quote are kept verbatim.

Examples:
    list(split('move --from "a b" --to "c d"'))
        -> ['move', '--from', 'a b', '--to', 'c d']
    list(split(r'a\"b c d'))
        -> ['a"b', 'c', 'd']
    list(split('POST --raw=\'{"Id":1}\''))
        -> ["POST", "--raw='{Id:1}'"]
    list(split('foo"'))
        -> ['foo']

The tokenizer never raises: unbalanced quotes yield a best-effort token.
"""

from enum import Enum
from typing import Final, Iterator, NamedTuple
import re

QUOTE: Final[str] = '"'
ESCAPE: Final[str] = "\\"


class WordState(Enum):
    TOKEN_START = "token_start"
    IN_WORD = "in_word"


class QuoteState(Enum):
    OUTSIDE = "outside"
    INSIDE = "inside"


class CharClass(Enum):
    WHITESPACE = "whitespace"
    QUOTE = "quote"
    ESCAPED_QUOTE = "escaped_quote"
    OTHER = "other"


class Step(Enum):
    """What the scanner does with the current character.

    Attributes:
        SKIP: Separator outside any token
        ABSORB: Character belongs to the open token
        BEGIN_WORD: A bare word starts at this character
        END_WORD: Emit the bare word ending before this character
        OPEN_QUOTE: A quoted region starts after this character
        CLOSE_QUOTE: Emit the quoted region ending before this character
        TOGGLE_QUOTE: Quote inside a bare word; kept in the raw slice
    """

    SKIP = "skip"
    ABSORB = "absorb"
    BEGIN_WORD = "begin_word"
    END_WORD = "end_word"
    OPEN_QUOTE = "open_quote"
    CLOSE_QUOTE = "close_quote"
    TOGGLE_QUOTE = "toggle_quote"


class Transition(NamedTuple):
    step: Step
    word: WordState
    quote: QuoteState


_START, _WORD = WordState.TOKEN_START, WordState.IN_WORD
_OUT, _IN = QuoteState.OUTSIDE, QuoteState.INSIDE

TRANSITIONS: Final[dict[tuple[WordState, QuoteState, CharClass], Transition]] = {
    # between tokens
    (_START, _OUT, CharClass.WHITESPACE): Transition(Step.SKIP, _START, _OUT),
    (_START, _OUT, CharClass.QUOTE): Transition(Step.OPEN_QUOTE, _START, _IN),
    # a backslash always opens a bare word first, so this key is unreachable
    (_START, _OUT, CharClass.ESCAPED_QUOTE): Transition(Step.BEGIN_WORD, _WORD, _OUT),
    (_START, _OUT, CharClass.OTHER): Transition(Step.BEGIN_WORD, _WORD, _OUT),
    # inside a quoted region that opened at a token boundary
    (_START, _IN, CharClass.WHITESPACE): Transition(Step.ABSORB, _START, _IN),
    (_START, _IN, CharClass.QUOTE): Transition(Step.CLOSE_QUOTE, _START, _OUT),
    (_START, _IN, CharClass.ESCAPED_QUOTE): Transition(Step.ABSORB, _START, _IN),
    (_START, _IN, CharClass.OTHER): Transition(Step.ABSORB, _START, _IN),
    # bare word
    (_WORD, _OUT, CharClass.WHITESPACE): Transition(Step.END_WORD, _START, _OUT),
    (_WORD, _OUT, CharClass.QUOTE): Transition(Step.TOGGLE_QUOTE, _WORD, _IN),
    (_WORD, _OUT, CharClass.ESCAPED_QUOTE): Transition(Step.ABSORB, _WORD, _OUT),
    (_WORD, _OUT, CharClass.OTHER): Transition(Step.ABSORB, _WORD, _OUT),
    # quoted stretch inside a bare word, e.g. --raw='{"Movie Name":1}'
    (_WORD, _IN, CharClass.WHITESPACE): Transition(Step.ABSORB, _WORD, _IN),
    (_WORD, _IN, CharClass.QUOTE): Transition(Step.TOGGLE_QUOTE, _WORD, _OUT),
    (_WORD, _IN, CharClass.ESCAPED_QUOTE): Transition(Step.ABSORB, _WORD, _IN),
    (_WORD, _IN, CharClass.OTHER): Transition(Step.ABSORB, _WORD, _IN),
}

_quote_re = re.compile(r'\\"|"')


def char_classify(text: str, pos: int) -> CharClass:
    """Classify the character at `pos`, looking one character back for escapes."""
    c: str = text[pos]
    if c.isspace():
        return CharClass.WHITESPACE
    if c == QUOTE:
        if pos > 0 and text[pos - 1] == ESCAPE:
            return CharClass.ESCAPED_QUOTE
        return CharClass.QUOTE
    return CharClass.OTHER


def token_unescape(raw: str) -> str:
    r"""Collapse each `\"` to `"` and drop every other `"`.

    One left-to-right pass, so `\\"` becomes `\"`, not `"`.
    """
    return _quote_re.sub(lambda m: QUOTE if len(m.group()) == 2 else "", raw)


def step(
    word: WordState, quote: QuoteState, text: str, pos: int
) -> Transition:
    """Look up the transition for the character at `pos` in the given states."""
    return TRANSITIONS[(word, quote, char_classify(text, pos))]


def split(text: str) -> Iterator[str]:
    """Split a command line into tokens.

    Args:
        text: The full command line

    Yields:
        Tokens in input order

    Note:
        The returned generator owns its own cursor; each call scans
        independently and the sequence cannot be restarted.
    """
    word: WordState = WordState.TOKEN_START
    quote: QuoteState = QuoteState.OUTSIDE
    start: int = 0

    for pos in range(len(text)):
        action, word, quote = step(word, quote, text, pos)

        if action is Step.BEGIN_WORD:
            start = pos
        elif action is Step.OPEN_QUOTE:
            start = pos + 1
        elif action is Step.END_WORD or action is Step.CLOSE_QUOTE:
            yield token_unescape(text[start:pos])

    if word is WordState.IN_WORD:
        yield token_unescape(text[start:])
    elif quote is QuoteState.INSIDE and start < len(text):
        # unterminated quoted region
        yield token_unescape(text[start:])
