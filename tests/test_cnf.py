from setquery.query.cnf import distribute, to_cnf
from setquery.query.combinators import (
    Complement,
    Intersect,
    Interval,
    Term,
    Union,
)

a, b, c, d, e, f = (Term(n) for n in "abcdef")


def _is_cnf(query) -> bool:
    match query:
        case Intersect(children=children):
            return all(not isinstance(ch, Intersect) and _is_clause(ch) for ch in children)
        case _:
            return _is_clause(query)


def _is_clause(query) -> bool:
    match query:
        case Union(children=children):
            return all(_is_literal(ch) for ch in children)
        case _:
            return _is_literal(query)


def _is_literal(query) -> bool:
    match query:
        case Complement(operand=o):
            return isinstance(o, Term)
        case _:
            return isinstance(query, Term)


def test_term_is_already_cnf():
    assert a.to_cnf() == a


def test_intersect_of_terms_unchanged():
    assert Intersect(a, b).to_cnf() == Intersect(a, b)


def test_union_of_terms_unchanged():
    assert Union(a, b).to_cnf() == Union(a, b)


def test_single_composite():
    q = Union(a, Intersect(b, c))
    assert q.to_cnf() == Intersect(Union(a, b), Union(a, c))


def test_two_composites():
    q = Union(Intersect(a, b), Intersect(c, d))
    assert q.to_cnf().simplify() == Intersect(Union(c, a), Union(c, b), Union(d, a), Union(d, b))


def test_three_composites_fully_distribute():
    q = Union(Intersect(a, b), Intersect(c, d), Intersect(e, f))
    result = q.to_cnf()
    assert isinstance(result, Intersect)
    assert len(result.children) == 8
    assert _is_cnf(result)
    clauses = {frozenset(t.name for t in clause.children) for clause in result.children}
    assert clauses == {
        frozenset({x, y, z}) for x in "ab" for y in "cd" for z in "ef"
    }


def test_plain_children_stay_in_every_clause():
    q = Union(a, b, Intersect(c, d))
    assert q.to_cnf() == Intersect(Union(a, b, c), Union(a, b, d))


def test_converts_nested_children():
    q = Intersect(e, Union(a, Intersect(b, c)))
    assert q.to_cnf() == Intersect(e, Union(a, b), Union(a, c))


def test_simplifies_before_distributing():
    q = Union(a, Intersect(b, b, Union(c, c)))
    assert q.to_cnf() == Intersect(Union(a, b), Union(a, c))


def test_de_morgan_on_union():
    assert Complement(Union(a, b)).to_cnf() == Intersect(Complement(a), Complement(b))


def test_de_morgan_on_intersect():
    assert Complement(Intersect(a, b)).to_cnf() == Union(Complement(a), Complement(b))


def test_de_morgan_resolves_invertible_intervals():
    q = Complement(Union(a, Interval("attack", 0, 2)))
    assert q.to_cnf() == Intersect(Complement(a), Interval("attack", 3, 4))


def test_distribute_with_no_plain_children():
    result = distribute([Intersect(a, b), Intersect(c, d)])
    assert result == Intersect(Union(c, a), Union(c, b), Union(d, a), Union(d, b))


def test_cnf_output_is_flat():
    q = Union(Intersect(a, Union(b, Intersect(c, d))), e)
    result = to_cnf(q)
    assert _is_cnf(result)
    assert to_cnf(result) == result
