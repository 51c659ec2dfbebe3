# setquery/query/combinators.py
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from setquery.errors import (
    InsufficientChildren,
    InvalidInterval,
    InvalidOperatorType,
)


class NodeType(StrEnum):
    TERM = "term"
    INTERVAL = "interval"
    UNION = "union"
    INTERSECT = "intersect"
    COMPLEMENT = "complement"
    UNIVERSAL = "universal"
    NULL = "null"


@dataclass(frozen=True)
class Query:
    """Base node for set-algebra search queries."""

    children: ClassVar[tuple["Query", ...]] = ()

    def __and__(self, other: "Query") -> "Intersect":
        return Intersect(self, other)

    def __or__(self, other: "Query") -> "Union":
        return Union(self, other)

    def __invert__(self) -> "Complement":
        return Complement(self)

    def simplify(self) -> "Query":
        from setquery.query.simplify import simplify

        return simplify(self)

    def to_cnf(self) -> "Query":
        from setquery.query.cnf import to_cnf

        return to_cnf(self)

    def to_search_string(self) -> str:
        from setquery.query.serialize import to_search_string

        return to_search_string(self)


@dataclass(frozen=True)
class Term(Query):
    """Named search predicate."""

    name: str

    @property
    def type(self) -> NodeType:
        return NodeType.TERM


@dataclass(frozen=True)
class Interval(Term):
    """Numeric attribute restricted to [lower, upper]; None means unbounded."""

    lower: int | None = None
    upper: int | None = None

    def __post_init__(self) -> None:
        for bound in (self.lower, self.upper):
            if bound is not None and (not isinstance(bound, int) or isinstance(bound, bool)):
                raise InvalidInterval(f"Interval {self.name!r} has non-integer bound {bound!r}")
        if self.lower is None and self.upper is None:
            raise InvalidInterval(f"Interval {self.name!r} needs at least one bound")
        if self.lower is not None and self.upper is not None and self.lower > self.upper:
            raise InvalidInterval(
                f"Interval {self.name!r} has lower bound {self.lower} above upper bound {self.upper}"
            )

    @property
    def type(self) -> NodeType:
        return NodeType.INTERVAL

    def is_invertible(self) -> bool:
        from setquery.query.intervals import is_invertible

        return is_invertible(self)

    def invert(self) -> Query:
        from setquery.query.intervals import invert

        return invert(self)


@dataclass(frozen=True)
class Universal(Query):
    """Matches everything."""

    @property
    def type(self) -> NodeType:
        return NodeType.UNIVERSAL


@dataclass(frozen=True)
class Null(Query):
    """Matches nothing."""

    @property
    def type(self) -> NodeType:
        return NodeType.NULL


@dataclass(frozen=True, init=False)
class Operator(Query):
    """Union or intersection over two or more children."""

    children: tuple[Query, ...]

    def __init__(self, *children: Query) -> None:
        if len(children) < 2:
            raise InsufficientChildren(
                f"{type(self).__name__} needs at least two children, got {len(children)}"
            )
        object.__setattr__(self, "children", tuple(children))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.children)})"


@dataclass(frozen=True, init=False, repr=False)
class Union(Operator):
    """Logical OR of its children."""

    @property
    def type(self) -> NodeType:
        return NodeType.UNION


@dataclass(frozen=True, init=False, repr=False)
class Intersect(Operator):
    """Logical AND of its children."""

    @property
    def type(self) -> NodeType:
        return NodeType.INTERSECT


@dataclass(frozen=True)
class Complement(Query):
    """Logical NOT of a single operand."""

    operand: Query

    @property
    def type(self) -> NodeType:
        return NodeType.COMPLEMENT

    @property
    def children(self) -> tuple[Query, ...]:
        return (self.operand,)


# Factory functions (public API)
def term(name: str) -> Term:
    return Term(name)


def interval(name: str, lower: int | None = None, upper: int | None = None) -> Interval:
    return Interval(name, lower, upper)


def any_of(*children: Query) -> Union:
    return Union(*children)


def all_of(*children: Query) -> Intersect:
    return Intersect(*children)


def not_(operand: Query) -> Complement:
    return Complement(operand)


def operator(kind: NodeType | str, children: Iterable[Query]) -> Query:
    """Build an operator node from its type tag.

    Raises InvalidOperatorType for tags other than union, intersect and
    complement, and InsufficientChildren when the child count does not fit.
    """
    try:
        kind = NodeType(kind)
    except ValueError:
        raise InvalidOperatorType(f"Unsupported operator type: {kind!r}") from None

    children = tuple(children)
    match kind:
        case NodeType.UNION:
            return Union(*children)
        case NodeType.INTERSECT:
            return Intersect(*children)
        case NodeType.COMPLEMENT:
            if len(children) != 1:
                raise InsufficientChildren(
                    f"Complement needs exactly one child, got {len(children)}"
                )
            return Complement(children[0])
        case _:
            raise InvalidOperatorType(f"Unsupported operator type: {kind!r}")
