# setquery/query/intervals.py
"""Interval algebra for numeric attribute ranges.

Intervals on the same attribute are merged when they overlap (or touch, for
unions), and intervals on attributes with a small known integer domain can be
complemented by taking "domain minus range" instead of keeping a symbolic NOT.
"""

import logging
from collections.abc import Iterable
from math import inf

from setquery.query.combinators import Interval, NodeType, Null, Query, Union, Universal

logger = logging.getLogger(__name__)

# Attribute name (lowercase) -> closed integer domain (min, max)
INVERTIBLE_DOMAINS: dict[str, tuple[int, int]] = {
    "attack": (0, 4),
    "defense": (0, 4),
    "hp": (0, 4),
}


def _low(iv: Interval) -> float:
    return -inf if iv.lower is None else iv.lower


def _high(iv: Interval) -> float:
    return inf if iv.upper is None else iv.upper


def domain_of(iv: Interval) -> tuple[int, int] | None:
    return INVERTIBLE_DOMAINS.get(iv.name.lower())


def is_invertible(iv: Interval) -> bool:
    return domain_of(iv) is not None


def invert(iv: Interval) -> Query:
    """Complement an interval within its attribute's domain.

    Non-invertible intervals are returned unchanged; the caller keeps the
    surrounding complement. Missing bounds are read as the domain edge.
    """
    domain = domain_of(iv)
    if domain is None:
        return iv

    lo, hi = domain
    lower = lo if iv.lower is None else max(iv.lower, lo)
    upper = hi if iv.upper is None else min(iv.upper, hi)

    if lower > upper:
        # Range lies entirely outside the domain
        return Interval(iv.name, lo, hi)
    if lower == lo and upper == hi:
        return Null()
    if lower == lo:
        return Interval(iv.name, upper + 1, hi)
    if upper == hi:
        return Interval(iv.name, lo, lower - 1)
    return Union(Interval(iv.name, lo, lower - 1), Interval(iv.name, upper + 1, hi))


def _bounds(iv: Interval) -> tuple[float, float]:
    return _low(iv), _high(iv)


def _touches(a: tuple[float, float], b: tuple[float, float], adjacent: bool) -> bool:
    gap = 1 if adjacent else 0
    return a[0] - gap <= b[1] and a[1] >= b[0] - gap


def _combine(
    a: tuple[float, float], b: tuple[float, float], kind: NodeType
) -> tuple[float, float]:
    match kind:
        case NodeType.UNION:
            return min(a[0], b[0]), max(a[1], b[1])
        case NodeType.INTERSECT:
            return max(a[0], b[0]), min(a[1], b[1])
        case _:
            raise ValueError(f"Intervals merge under union or intersect, not {kind}")


def _to_query(name: str, lower: float, upper: float) -> Query:
    if lower == -inf and upper == inf:
        # Open on both sides: every value of the attribute
        domain = INVERTIBLE_DOMAINS.get(name.lower())
        return Universal() if domain is None else Interval(name, *domain)
    return Interval(
        name,
        None if lower == -inf else int(lower),
        None if upper == inf else int(upper),
    )


def overlaps(a: Interval, b: Interval, *, adjacent: bool = True) -> bool:
    """Whether `a` and `b` share a value, or sit next to each other if `adjacent`."""
    return _touches(_bounds(a), _bounds(b), adjacent)


def merge(a: Interval, b: Interval, kind: NodeType) -> Query:
    """Combine two overlapping intervals on the same attribute.

    A union open on both sides covers every value: it becomes the full domain
    for invertible names and Universal otherwise.
    """
    return _to_query(a.name, *_combine(_bounds(a), _bounds(b), kind))


def merge_intervals(intervals: Iterable[Interval], kind: NodeType) -> list[Query]:
    """Reduce intervals on one attribute under `kind`.

    Keeps an accumulator of bounds ordered by lower bound. Each incoming
    interval merges into the first accumulated range it touches; under union
    the merged range then swallows any following ranges it now reaches.
    Otherwise it is inserted before the first range starting above its upper
    bound. The result does not depend on input order and takes the name of the
    first interval.
    """
    # Touching ranges only combine under union: [0, 1] & [2, 3] is empty
    adjacent = kind == NodeType.UNION
    name: str | None = None
    ranges: list[tuple[float, float]] = []

    for iv in intervals:
        if name is None:
            name = iv.name
        new = _bounds(iv)
        for i, existing in enumerate(ranges):
            if _touches(new, existing, adjacent):
                merged = _combine(existing, new, kind)
                if kind == NodeType.UNION:
                    while i + 1 < len(ranges) and _touches(merged, ranges[i + 1], adjacent):
                        merged = _combine(merged, ranges.pop(i + 1), kind)
                ranges[i] = merged
                break
        else:
            for i, existing in enumerate(ranges):
                if existing[0] > new[1]:
                    ranges.insert(i, new)
                    break
            else:
                ranges.append(new)

    if len(ranges) > 1:
        logger.debug("Kept %s disjoint %s ranges for %s", len(ranges), kind, name)
    return [_to_query(name, lower, upper) for lower, upper in ranges]
