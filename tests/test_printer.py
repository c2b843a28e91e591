"""Tests for value printing and abbreviated sequence summaries."""

import sprig
import sprigtest
from sprig.ast import ListLiteral


@sprigtest.params(
    "value expected",
    none=(None, "None"),
    true=(True, "True"),
    false=(False, "False"),
    int=(42, "42"),
    text=("hi", '"hi"'),
    escapes=('a"b\\c\n', '"a\\"b\\\\c\\n"'),
    empty_list=(sprig.MutableList(), "[]"),
    one_tuple=(sprig.Tuple([1]), "(1,)"),
    mixed=(sprig.MutableList([1, "x", sprig.Tuple()]), '[1, "x", ()]'),
)
def test_repr_value(key, value, expected):
    assert sprig.repr_value(value) == expected


def test_print_list():
    assert sprig.print_list([1, 2], False) == "[1, 2]"
    assert sprig.print_list(["a"], True) == '("a",)'
    assert sprig.print_list([], True) == "()"


@sprigtest.params(
    "items is_tuple expected",
    empty=([], False, "[]"),
    etup=([], True, "()"),
    fits=(["1", "2", "3"], False, "[1, 2, 3]"),
    single=(["5"], True, "(5,)"),
    at_count=(["1", "2", "3", "4"], True, "(1, 2, 3, 4)"),
    over_count=(["1", "2", "3", "4", "5", "6"], False, "[1, 2, 3, 4, ...]"),
    over_tuple=(["1", "2", "3", "4", "5"], True, "(1, 2, 3, 4, ...)"),
)
def test_abbreviated_defaults(key, items, is_tuple, expected):
    assert sprig.print_abbreviated_list(items, is_tuple) == expected


def test_abbreviated_by_length():
    items = ["a" * 10] * 3
    text = sprig.print_abbreviated_list(items, False, max_count=10, max_length=20)
    assert text == "[aaaaaaaaaa, ...]"
    assert len(text) <= 20


def test_abbreviated_nothing_fits():
    text = sprig.print_abbreviated_list(["abcdef"], True, max_count=10, max_length=5)
    assert text == "(...)"


def test_abbreviated_zero_count():
    assert sprig.print_abbreviated_list(["1"], False, max_count=0, max_length=50) == "[...]"
    assert sprig.print_abbreviated_list([], False, max_count=0, max_length=50) == "[]"


def test_abbreviated_length_bound_holds():
    items = [str(n) * (n % 7 + 1) for n in range(40)]
    for max_length in range(5, 60):
        text = sprig.print_abbreviated_list(items, False, max_count=40, max_length=max_length)
        assert len(text) <= max_length
        assert text.endswith(", ...]") or text == "[...]"


def test_abbreviated_render():
    text = sprig.print_abbreviated_list([1, "a", None], False, render=sprig.repr_value)
    assert text == '[1, "a", None]'


def test_abbreviated_uses_configured_limits():
    sprig.set_print_limits(max_count=2)
    assert sprig.print_abbreviated_list(["1", "2", "3"], False) == "[1, 2, ...]"
    sprig.set_print_limits(max_count=10, max_length=12)
    assert sprig.print_abbreviated_list(["one", "two", "three"], False) == "[one, ...]"


def test_node_str_is_abbreviated():
    node = ListLiteral.make_list(sprigtest.lit(*range(10)))
    assert str(node) == "[0, 1, 2, 3, ...]"
    assert node.unparse() == "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]"


def test_node_str_bounded_by_length():
    sprig.set_print_limits(max_count=100, max_length=20)
    node = ListLiteral.make_tuple(sprigtest.lit("alpha", "beta", "gamma", "delta"))
    text = str(node)
    assert text.endswith("...)")
    assert len(text) <= 20


def test_node_str_single_tuple():
    assert str(ListLiteral.make_tuple(sprigtest.lit(5))) == "(5,)"


def test_self_containing_list():
    lst = sprig.MutableList([1])
    lst.append(lst)
    assert sprig.repr_value(lst) == "[1, [...]]"
    assert repr(lst) == "[1, [...]]"


def test_list_cycle_through_tuple():
    lst = sprig.MutableList()
    lst.append(sprig.Tuple([lst, 2]))
    assert sprig.repr_value(lst) == "[([...], 2)]"
    assert sprig.repr_value(lst[0]) == "([([...], 2)], 2)"


def test_repeated_sequence_is_not_a_cycle():
    shared = sprig.Tuple([1])
    assert sprig.repr_value(sprig.MutableList([shared, shared])) == "[(1,), (1,)]"
