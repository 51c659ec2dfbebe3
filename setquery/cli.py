# setquery/cli.py
import json
import logging
import os
import sys
from typing import Annotated

import cyclopts

from setquery.errors import QueryError
from setquery.query import Query, parse, simplify as do_simplify, to_cnf, to_search_string

app = cyclopts.App(
    name="setquery",
    help="Normalize set-algebra queries and render them as search strings.",
)

QueryArg = Annotated[
    str,
    cyclopts.Parameter(help='Shorthand query as JSON, e.g. \'["AND", "beep", ["OR", "x", "y"]]\''),
]
VerboseOpt = Annotated[
    bool,
    cyclopts.Parameter(name=["--verbose", "-v"], help="Log each normalization step"),
]


def _log_level(verbose: bool) -> str:
    """Pick the log level; unknown SETQUERY_LOG_LEVEL values fall back to WARNING."""
    if verbose:
        return "DEBUG"
    level = os.getenv("SETQUERY_LOG_LEVEL", "WARNING").upper()
    return level if level in logging.getLevelNamesMapping() else "WARNING"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=_log_level(verbose), format="%(levelname)s %(name)s: %(message)s")


def _load(query: str) -> Query:
    """Parse shorthand from the command line, exiting on malformed input."""
    try:
        return parse(query)
    except json.JSONDecodeError as e:
        print(f"Error: Query is not valid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except QueryError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


@app.command(name="render")
def render(query: QueryArg, verbose: VerboseOpt = False) -> None:
    """Print the search string for a shorthand query."""
    _configure_logging(verbose)
    print(to_search_string(_load(query)))


@app.command(name="simplify")
def simplify(query: QueryArg, verbose: VerboseOpt = False) -> None:
    """Print the simplified query tree."""
    _configure_logging(verbose)
    print(repr(do_simplify(_load(query))))


@app.command(name="cnf")
def cnf(query: QueryArg, verbose: VerboseOpt = False) -> None:
    """Print the query tree in conjunctive normal form."""
    _configure_logging(verbose)
    print(repr(to_cnf(_load(query))))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
