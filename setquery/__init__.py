# setquery/__init__.py
"""setquery - Set-algebra search queries with CNF normalization."""

from setquery.errors import (
    InsufficientChildren,
    InvalidInterval,
    InvalidOperatorType,
    QueryError,
    UnimplementedMethod,
)
from setquery.query import (
    Complement,
    Intersect,
    Interval,
    NodeType,
    Null,
    Query,
    Term,
    Union,
    Universal,
    all_of,
    any_of,
    convert,
    interval,
    not_,
    parse,
    simplify,
    term,
    to_cnf,
    to_search_string,
)

__all__ = [
    # Query nodes
    "Query",
    "NodeType",
    "Term",
    "Interval",
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
    # Normalization
    "simplify",
    "to_cnf",
    "to_search_string",
    # Shorthand
    "convert",
    "parse",
    # Errors
    "QueryError",
    "InvalidOperatorType",
    "InsufficientChildren",
    "InvalidInterval",
    "UnimplementedMethod",
]
