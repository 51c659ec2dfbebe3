# setquery/errors.py
"""Errors raised while building query trees."""


class QueryError(ValueError):
    """Base class for malformed query trees."""


class InvalidOperatorType(QueryError):
    """Operator node built with a type other than union, intersect or complement."""


class InsufficientChildren(QueryError):
    """Union or intersect built with fewer than two children."""


class InvalidInterval(QueryError):
    """Interval built without any bound, or with lower > upper."""


class UnimplementedMethod(QueryError, NotImplementedError):
    """A transform was asked to handle a node class it does not know."""
