from __future__ import annotations
from typing import AbstractSet, Dict, Iterable

from .source import LineReader
from .tokenizer import DEFAULT_SEPARATORS, is_separator_span, next_span


def count(lines: Iterable[str], separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> Dict[str, int]:
    """Map each distinct word in `lines` to how many times it occurs.

    Words are counted exactly as written, so "The" and "the" are separate keys.
    Separator runs are skipped; blank lines contribute nothing.
    """
    words: Dict[str, int] = {}
    for raw in lines:
        line = raw.rstrip("\r\n")
        pos = 0
        while pos < len(line):
            span = next_span(line, pos, separators)
            if not is_separator_span(span, separators):
                words[span] = words.get(span, 0) + 1
            pos += len(span)
    return words


def count_text(text: str, separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> Dict[str, int]:
    return count(LineReader.from_text(text), separators)
