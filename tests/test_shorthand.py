import pytest

from setquery.errors import InsufficientChildren, InvalidInterval, QueryError
from setquery.query.combinators import Complement, Intersect, Interval, Term, Union
from setquery.query.shorthand import convert, parse


def test_convert_leaf():
    assert convert("beep") == Term("beep")


def test_convert_non_string_leaf():
    assert convert(3) == Term("3")


def test_convert_or():
    assert convert(["OR", "x", "y"]) == Union(Term("x"), Term("y"))


def test_convert_nested():
    q = convert(["AND", "beep", ["OR", "x", "y"]])
    assert q == Intersect(Term("beep"), Union(Term("x"), Term("y")))


def test_convert_not():
    assert convert(["NOT", "beep"]) == Complement(Term("beep"))


def test_convert_interval():
    assert convert(["INTERVAL", "attack", 0, 2]) == Interval("attack", 0, 2)
    assert convert(["INTERVAL", "beep", None, 10]) == Interval("beep", None, 10)
    assert convert(["INTERVAL", "beep", 1]) == Interval("beep", 1, None)


def test_unknown_head_becomes_term():
    assert convert(["beep", "boop"]) == Term("beep")


def test_and_with_one_operand_is_rejected():
    with pytest.raises(InsufficientChildren):
        convert(["AND", "x"])


def test_interval_without_bounds_is_rejected():
    with pytest.raises(InvalidInterval):
        convert(["INTERVAL", "attack"])


def test_empty_list_is_rejected():
    with pytest.raises(QueryError):
        convert([])


def test_parse_json():
    q = parse('["OR", "beep", ["NOT", ["INTERVAL", "hp", 4, 4]]]')
    assert q == Union(Term("beep"), Complement(Interval("hp", 4, 4)))
    assert q.to_search_string() == "beep,0-3hp"


def test_parse_plain_string():
    assert parse('"beep"') == Term("beep")


def test_list_head_becomes_term():
    assert convert([["OR", "a", "b"]]) == Term("['OR', 'a', 'b']")


def test_non_keyword_head_becomes_term():
    assert convert([3, "a"]) == Term("3")


def test_interval_with_non_integer_bound_is_rejected():
    with pytest.raises(InvalidInterval):
        convert(["INTERVAL", "attack", "x", 2])
