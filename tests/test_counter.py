import io

from wordcounter.counter import count, count_text
from wordcounter.source import LineReader
from wordcounter.tokenizer import DEFAULT_SEPARATORS, is_separator_span, iter_spans

DOC = ["The cat sat. The cat ran!"]


def test_end_to_end_example_counts():
    assert count(DOC) == {"The": 2, "cat": 2, "sat": 1, "ran": 1}


def test_case_is_preserved():
    out = count(["The the THE"])
    assert out == {"The": 1, "the": 1, "THE": 1}


def test_blank_lines_are_skipped_not_terminal():
    lines = ["", "one two", "", "", "two", ""]
    assert count(lines) == {"one": 1, "two": 2}


def test_empty_and_blank_documents():
    assert count([]) == {}
    assert count(["", "", ""]) == {}
    assert count([" .,!? ", "\t"]) == {}


def test_count_conservation():
    lines = ["Four score and seven years ago,", "our fathers -- brought forth; on this continent!", "a new nation"]
    out = count(lines)
    words = sum(
        1 for line in lines for s in iter_spans(line, DEFAULT_SEPARATORS)
        if not is_separator_span(s, DEFAULT_SEPARATORS)
    )
    assert sum(out.values()) == words
    assert all(n > 0 for n in out.values())


def test_repeat_runs_agree():
    text = "It is for us the living, rather, to be dedicated here.\nIt is rather for us"
    assert count_text(text) == count_text(text)


def test_line_terminators_are_stripped():
    assert count(["alpha\n", "beta\r\n"]) == {"alpha": 1, "beta": 1}


def test_custom_separators():
    assert count(["a b|a"], {"|"}) == {"a b": 1, "a": 1}


def test_counts_from_line_reader():
    reader = LineReader(io.StringIO("The cat\n\nsat. The\ncat ran!"))
    assert count(reader) == {"The": 2, "cat": 2, "sat": 1, "ran": 1}


def test_count_text_splits_lines_like_a_file():
    doc = "alpha\x0cbeta gamma delta eps\r\nzeta\rdelta"
    assert count_text(doc) == count(LineReader(io.StringIO(doc, newline="")))
    assert count_text("alpha\x0cbeta gamma") == {"alpha\x0cbeta": 1, "gamma": 1}
    assert count_text("one\rtwo\r\none") == {"one": 2, "two": 1}
