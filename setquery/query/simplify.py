# setquery/query/simplify.py
import logging

from setquery.errors import UnimplementedMethod
from setquery.query.combinators import (
    Complement,
    Intersect,
    Interval,
    Null,
    Operator,
    Query,
    Term,
    Union,
    Universal,
)
from setquery.query.intervals import invert, is_invertible, merge_intervals

logger = logging.getLogger(__name__)


def simplify(query: Query) -> Query:
    """Return an equivalent, structurally reduced query.

    Flattens nested unions/intersections, drops duplicate children, merges
    intervals on the same attribute, resolves complements of invertible
    intervals and collapses single-child operators.
    """
    match query:
        case Term() | Universal() | Null():
            return query
        case Complement(operand=o):
            return _simplify_complement(simplify(o))
        case Union() | Intersect():
            result = _simplify_operator(query)
            if result != query:
                logger.debug("Simplified %r -> %r", query, result)
            return result
        case _:
            raise UnimplementedMethod(f"Cannot simplify query node: {query!r}")


def _simplify_complement(operand: Query) -> Query:
    match operand:
        case Universal():
            return Null()
        case Null():
            return Universal()
        case Complement(operand=inner):
            return inner
        case Interval() if is_invertible(operand):
            return simplify(invert(operand))
        case _:
            return Complement(operand)


def _simplify_operator(node: Operator) -> Query:
    kind = type(node)
    # (absorbing element, identity element)
    absorbing, identity = (Universal, Null) if kind is Union else (Null, Universal)

    flat: list[Query] = []
    for child in node.children:
        child = simplify(child)
        if type(child) is kind:
            flat.extend(child.children)
        else:
            flat.append(child)

    if any(isinstance(c, absorbing) for c in flat):
        return absorbing()

    # Intervals are grouped by attribute name, ignoring case. Each group takes
    # the slot of its first member and is filled in after merging.
    slots: list[Query | str] = []
    seen: set[Query] = set()
    groups: dict[str, list[Interval]] = {}
    for child in flat:
        match child:
            case Interval(name=name):
                key = name.lower()
                if key not in groups:
                    groups[key] = []
                    slots.append(key)
                groups[key].append(child)
            case _ if isinstance(child, identity) or child in seen:
                continue
            case _:
                seen.add(child)
                slots.append(child)

    children: list[Query] = []
    for slot in slots:
        if isinstance(slot, str):
            children.extend(merge_intervals(groups[slot], node.type))
        else:
            children.append(slot)

    # A union of ranges covering every value merges to Universal
    if any(isinstance(c, absorbing) for c in children):
        return absorbing()
    if not children:
        return identity()
    if len(children) == 1:
        return children[0]
    return kind(*children)
