from __future__ import annotations
import os
from dataclasses import dataclass
from typing import FrozenSet, Optional

from .render import FORMATS
from .source import DEFAULT_ENCODING
from .tokenizer import DEFAULT_SEPARATORS, parse_separators


def _separators_from_env(default: FrozenSet[str]) -> FrozenSet[str]:
    # e.g. WORDCOUNTER_SEPARATORS=".,;:!?\s\t"
    s = os.environ.get("WORDCOUNTER_SEPARATORS", "")
    if not s:
        return default
    return parse_separators(s)


def _format_from_env(default: str) -> str:
    fmt = os.environ.get("WORDCOUNTER_FORMAT", "").strip().lower()
    return fmt or default


def _encoding_from_env(default: str) -> str:
    return os.environ.get("WORDCOUNTER_ENCODING", "").strip() or default


@dataclass(frozen=True)
class CounterConfig:
    separators: FrozenSet[str] = DEFAULT_SEPARATORS
    fmt: str = "html"
    encoding: str = DEFAULT_ENCODING
    title: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.separators:
            raise ValueError("separators must not be empty")
        if self.fmt not in FORMATS:
            raise ValueError(f"Unknown format {self.fmt!r}; expected one of {', '.join(FORMATS)}")

    @property
    def output_encoding(self) -> str:
        # never write a byte-order mark into the report
        return "utf-8" if self.encoding.lower().replace("_", "-") == "utf-8-sig" else self.encoding


def load_config(
    separators: Optional[str] = None,
    fmt: Optional[str] = None,
    encoding: Optional[str] = None,
    title: Optional[str] = None,
) -> CounterConfig:
    """Environment first, then explicit arguments (CLI flags) on top."""
    seps = parse_separators(separators) if separators is not None else _separators_from_env(DEFAULT_SEPARATORS)
    return CounterConfig(
        separators=seps,
        fmt=(fmt or _format_from_env("html")).lower(),
        encoding=encoding or _encoding_from_env(DEFAULT_ENCODING),
        title=title,
    )
