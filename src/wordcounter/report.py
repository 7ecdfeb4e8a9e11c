from __future__ import annotations
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, Optional

from .counter import count
from .sorter import sort_keys
from .tokenizer import DEFAULT_SEPARATORS


@dataclass(frozen=True)
class Report:
    counts: Dict[str, int] = field(default_factory=dict)
    words: List[str] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def unique(self) -> int:
        return len(self.words)

    def rows(self) -> List[tuple[str, int]]:
        """(word, count) pairs in display order."""
        return [(w, self.counts[w]) for w in self.words]


def build_report(
    lines: Iterable[str],
    separators: AbstractSet[str] = DEFAULT_SEPARATORS,
    source: Optional[str] = None,
) -> Report:
    counts = count(lines, separators)
    return Report(counts=counts, words=sort_keys(counts), source=source)
