from __future__ import annotations
from typing import AbstractSet, FrozenSet, Iterator

DEFAULT_SEPARATORS: FrozenSet[str] = frozenset(".-, /';:!?\t")

# Escapes accepted by parse_separators (handy on a command line / in env vars)
_ESCAPES = {"t": "\t", "s": " ", "\\": "\\"}


class TokenizerError(ValueError):
    """A tokenizer function was called outside its contract."""


def next_span(text: str, position: int, separators: AbstractSet[str]) -> str:
    """
    Return the word or separator run that starts at `position`.

    A word is a maximal run of characters not in `separators`; a separator run
    is a maximal run of characters that are. Which one is returned depends on
    whether text[position] is itself a separator.
    """
    if not text:
        raise TokenizerError("text must not be empty")
    if not separators:
        raise TokenizerError("separators must not be empty")
    if not 0 <= position < len(text):
        raise TokenizerError(f"position {position} out of range for text of length {len(text)}")

    in_sep = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_sep:
        end += 1
    return text[position:end]


def iter_spans(text: str, separators: AbstractSet[str]) -> Iterator[str]:
    pos = 0
    while pos < len(text):
        span = next_span(text, pos, separators)
        yield span
        pos += len(span)


def is_separator_span(span: str, separators: AbstractSet[str]) -> bool:
    return bool(span) and span[0] in separators


def parse_separators(value: str) -> FrozenSet[str]:
    """Build a separator set from a string like ".,;\\s\\t" (\\s = space, \\t = tab)."""
    chars = set()
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\" and i + 1 < len(value) and value[i + 1] in _ESCAPES:
            chars.add(_ESCAPES[value[i + 1]])
            i += 2
            continue
        chars.add(ch)
        i += 1
    if not chars:
        raise TokenizerError("separator set must not be empty")
    return frozenset(chars)
