# setquery/query/serialize.py
import logging

from setquery.errors import UnimplementedMethod
from setquery.query.cnf import to_cnf
from setquery.query.combinators import (
    Complement,
    Intersect,
    Interval,
    Null,
    Query,
    Term,
    Union,
    Universal,
)

logger = logging.getLogger(__name__)


def to_search_string(query: Query) -> str:
    """Render a query in the search endpoint's compact syntax.

    Operator trees are converted to CNF first so that `,` (union) always
    nests inside `&` (intersection) and no parentheses are needed.
    """
    if isinstance(query, (Union, Intersect, Complement)):
        query = to_cnf(query)
    result = _render(query)
    logger.debug("Rendered %r as %s", query, result)
    return result


def _render(query: Query) -> str:
    match query:
        case Interval(name=name, lower=lo, upper=hi):
            if lo == hi:
                return f"{lo}{name}"
            return f"{'' if lo is None else lo}-{'' if hi is None else hi}{name}"
        case Term(name=name):
            return name
        case Universal():
            return "0-"
        case Null():
            return "!0-"
        case Complement(operand=o):
            return "!" + _render(o)
        case Union(children=children):
            return ",".join(_render(c) for c in children)
        case Intersect(children=children):
            return "&".join(_render(c) for c in children)
        case _:
            raise UnimplementedMethod(f"Cannot render query node: {query!r}")
