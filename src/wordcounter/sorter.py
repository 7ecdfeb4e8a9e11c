from __future__ import annotations
from typing import List, Mapping, Tuple


def _alpha_key(word: str) -> Tuple[str, str]:
    # case-insensitive first; raw text breaks ties so "The" lands before "the"
    return (word.lower(), word)


def sort_keys(mapping: Mapping[str, int]) -> List[str]:
    """Return the keys of `mapping` in case-insensitive alphabetical order."""
    return sorted(mapping, key=_alpha_key)
