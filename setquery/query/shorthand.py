# setquery/query/shorthand.py
"""Translate the array shorthand into query trees.

    ["AND", "beep", ["OR", "x", "y"]]         -> beep & (x | y)
    ["NOT", ["INTERVAL", "attack", 0, 2]]     -> ~attack[0, 2]

The head of a list picks the operator; anything that is not a list becomes a
Term. A list whose head is not a known keyword is read as a Term of its head.
"""

import json
import logging
from typing import Any

from setquery.errors import QueryError
from setquery.query.combinators import Interval, NodeType, Query, Term, operator

logger = logging.getLogger(__name__)

KEYWORDS: dict[str, NodeType] = {
    "OR": NodeType.UNION,
    "AND": NodeType.INTERSECT,
    "NOT": NodeType.COMPLEMENT,
    "INTERVAL": NodeType.INTERVAL,
}


def convert(tree: Any) -> Query:
    """Convert a nested shorthand list into a query tree."""
    if not isinstance(tree, list):
        return Term(str(tree))
    if not tree:
        raise QueryError("Empty shorthand list")

    head = tree[0]
    match KEYWORDS.get(head) if isinstance(head, str) else None:
        case NodeType.INTERVAL:
            name, lower, upper = (tree[1:] + [None, None])[:3]
            return Interval(str(name), lower, upper)
        case None:
            return Term(str(head))
        case kind:
            return operator(kind, [convert(child) for child in tree[1:]])


def parse(text: str) -> Query:
    """Parse the JSON form of the shorthand, e.g. '["OR", "a", "b"]'."""
    logger.debug("Parsing shorthand: %s", text)
    return convert(json.loads(text))
