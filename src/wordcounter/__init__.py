from .tokenizer import DEFAULT_SEPARATORS, TokenizerError, next_span, iter_spans
from .counter import count, count_text
from .sorter import sort_keys
from .report import Report, build_report

__version__ = "0.1.0"
