from wordcounter.counter import count
from wordcounter.sorter import sort_keys


def test_end_to_end_example_order():
    assert sort_keys(count(["The cat sat. The cat ran!"])) == ["cat", "ran", "sat", "The"]


def test_empty_mapping():
    assert sort_keys({}) == []


def test_completeness_and_order():
    m = {"banana": 1, "Apple": 3, "cherry": 2, "apple": 1, "Banana": 4, "zeta": 1, "Alpha": 2}
    out = sort_keys(m)
    assert len(out) == len(m)
    assert set(out) == set(m)
    assert all(a.lower() <= b.lower() for a, b in zip(out, out[1:]))


def test_case_ties_do_not_depend_on_insertion_order():
    a = sort_keys({"the": 1, "The": 1, "THE": 1})
    b = sort_keys({"THE": 1, "The": 1, "the": 1})
    assert a == b == ["THE", "The", "the"]
