# setquery/query/cnf.py
"""Conversion of query trees to conjunctive normal form.

The result is an intersection of clauses, where each clause is a union of
terms, intervals or complemented leaves. This is the only shape the search
string format can express without parentheses.
"""

import logging

from setquery.errors import UnimplementedMethod
from setquery.query.combinators import (
    Complement,
    Intersect,
    Null,
    Query,
    Term,
    Union,
    Universal,
)
from setquery.query.simplify import simplify

logger = logging.getLogger(__name__)


def to_cnf(query: Query) -> Query:
    """Simplify `query` and rewrite it as an intersection of unions."""
    match query:
        case Term() | Universal() | Null():
            return query
        case Complement() | Union() | Intersect():
            return simplify(_convert(simplify(query)))
        case _:
            raise UnimplementedMethod(f"Cannot convert query node to CNF: {query!r}")


def _convert(node: Query) -> Query:
    match node:
        case Complement(operand=o):
            return _negate(o)
        case Intersect(children=children):
            return simplify(Intersect(*(_convert(c) for c in children)))
        case Union(children=children):
            converted = [_convert(c) for c in children]
            if any(isinstance(c, Intersect) for c in converted):
                return simplify(distribute(converted))
            return simplify(Union(*converted))
        case _:
            return node


def _negate(operand: Query) -> Query:
    """Push a complement below unions and intersections (De Morgan)."""
    match operand:
        case Union(children=children):
            return _convert(simplify(Intersect(*(Complement(c) for c in children))))
        case Intersect(children=children):
            return _convert(simplify(Union(*(Complement(c) for c in children))))
        case _:
            return Complement(operand)


def distribute(children: list[Query]) -> Query:
    """Distribute a union over the intersections among `children`.

    Uses a ∨ (b ∧ c) ≡ (a ∨ b) ∧ (a ∨ c). The non-intersection children form
    the starting accumulator; every intersection child is then folded in,
    producing one clause per (accumulated clause, member) pair. With no plain
    children the first intersection seeds the accumulator, so
    (a ∧ b) ∨ (c ∧ d) becomes (c ∨ a) ∧ (c ∨ b) ∧ (d ∨ a) ∧ (d ∨ b).
    """
    plain = [c for c in children if not isinstance(c, Intersect)]
    composite = [c for c in children if isinstance(c, Intersect)]
    logger.debug(
        "Distributing over %s intersections with %s plain children", len(composite), len(plain)
    )

    if len(plain) > 1:
        accum: Query = Union(*plain)
    elif plain:
        accum = plain[0]
    else:
        accum = composite.pop(0)

    for node in composite:
        accum = simplify(Intersect(*(_or(accum, member) for member in node.children)))
    return accum


def _or(accum: Query, member: Query) -> Query:
    if isinstance(accum, Intersect):
        return Intersect(*(Union(member, clause) for clause in accum.children))
    return Union(accum, member)
