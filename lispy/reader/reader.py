"""Reader: maps a labeled parse tree onto Lispy values.

This is a structural transform only; nothing is evaluated here. Any parser
producing nodes with `tag`, `contents` and `children` can feed it.
"""

from __future__ import annotations

from typing import Iterator

from lispy import SExpression
from lispy.errors import LispySyntaxError
from lispy.reader.parser import ParseNode, parse, ROOT_TAG
from lispy.types import Error, ExprList, Number, QuoteList, Symbol, in_i64_range

DELIMITERS = frozenset({"(", ")", "{", "}"})


def read_number(text: str) -> Number | Error:
    try:
        n = int(text, 10)
    except ValueError:
        return Error("Invalid number")
    if not in_i64_range(n):
        return Error("Invalid number")
    return Number(n)


def _skipped(node: ParseNode) -> bool:
    return node.contents in DELIMITERS or node.tag == "regex"


def read_value(node: ParseNode) -> SExpression:
    if "number" in node.tag:
        return read_number(node.contents)
    if "symbol" in node.tag:
        return Symbol(node.contents)

    if node.tag == ROOT_TAG or "sexpr" in node.tag:
        container = ExprList()
    elif "qexpr" in node.tag:
        container = QuoteList()
    else:
        raise LispySyntaxError(f"Cannot read parse node tagged {node.tag!r}", node.position)

    for child in node.children:
        if _skipped(child):
            continue
        container.append(read_value(child))
    return container


def read(source: str) -> ExprList:
    """Read a whole program as one top-level S-expression."""
    return read_value(parse(source))


def read_forms(source: str) -> Iterator[SExpression]:
    """Read each top-level expression of `source` separately."""
    for child in parse(source).children:
        if _skipped(child):
            continue
        yield read_value(child)
