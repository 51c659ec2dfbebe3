from .cnf import distribute, to_cnf
from .combinators import (
    Complement,
    Intersect,
    Interval,
    NodeType,
    Null,
    Operator,
    Query,
    Term,
    Union,
    Universal,
    all_of,
    any_of,
    interval,
    not_,
    operator,
    term,
)
from .intervals import INVERTIBLE_DOMAINS, invert, is_invertible, merge_intervals
from .serialize import to_search_string
from .shorthand import convert, parse
from .simplify import simplify

__all__ = [
    "Query",
    "NodeType",
    "Term",
    "Interval",
    "Operator",
    "Union",
    "Intersect",
    "Complement",
    "Universal",
    "Null",
    "term",
    "interval",
    "any_of",
    "all_of",
    "not_",
    "operator",
    "INVERTIBLE_DOMAINS",
    "is_invertible",
    "invert",
    "merge_intervals",
    "simplify",
    "to_cnf",
    "distribute",
    "to_search_string",
    "convert",
    "parse",
]
