"""
  Lispy Lexer and Parser

Turns source text into a generic labeled parse tree. Each ParseNode carries a
tag, the literal text it matched (leaves only) and its ordered children:

    - number  -> leaf, text like "-12"
    - symbol  -> leaf, text like "+", "def", "&", "\\"
    - sexpr   -> "(" children... ")"
    - qexpr   -> "{" children... "}"
    - char    -> a literal delimiter token kept in the tree
    - regex   -> the start/end anchors of the top-level match
    - >       -> the root: a whole program of zero or more expressions

The tree keeps the delimiter and anchor nodes; lispy.reader.reader skips them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r"|(?P<number>-?[0-9]+)"  # integers, tried before symbols
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&%^]+)"
    r")",
    re.DOTALL,
)

OPENERS = {"lparen": ("sexpr", "rparen"), "lbrace": ("qexpr", "rbrace")}
CLOSERS = {"rparen", "rbrace"}

ROOT_TAG = ">"


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)
    position: int = 0

    def __str__(self) -> str:
        if self.children:
            inner = " ".join(str(c) for c in self.children)
            return f"{self.tag}[{inner}]"
        return f"{self.tag}:{self.contents!r}"


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, position) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m or m.lastgroup is None:
            rest = source[pos:]
            if rest.strip() == "":
                break
            bad = pos + (len(rest) - len(rest.lstrip()))
            raise LispySyntaxError(f"Unexpected character {source[bad]!r}", bad)
        pos = m.end()
        if m.lastgroup == "comment":
            continue
        yield m.lastgroup, m.group(m.lastgroup), m.start(m.lastgroup)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str, int]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str, int]] = []

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, -1
        return self.buffer[0]

    def advance(self) -> tuple[str, str, int]:
        tok = self.peek()
        if self.buffer:
            self.buffer.pop(0)
        return tok

    def parse_expr(self) -> Optional[ParseNode]:
        tok_type, tok_val, pos = self.peek()
        if tok_type is None:
            return None

        if tok_type in ("number", "symbol"):
            self.advance()
            return ParseNode(tok_type, tok_val, position=pos)

        if tok_type in OPENERS:
            tag, closer = OPENERS[tok_type]
            self.advance()
            node = ParseNode(tag, position=pos)
            node.children.append(ParseNode("char", tok_val, position=pos))
            while True:
                inner_type, inner_val, inner_pos = self.peek()
                if inner_type is None:
                    raise LispySyntaxError(f"Unexpected EOF, expected closing of {tok_val!r}", pos)
                if inner_type == closer:
                    self.advance()
                    node.children.append(ParseNode("char", inner_val, position=inner_pos))
                    return node
                if inner_type in CLOSERS:
                    raise LispySyntaxError(f"Mismatched {inner_val!r}", inner_pos)
                node.children.append(self.parse_expr())

        if tok_type in CLOSERS:
            raise LispySyntaxError(f"Unexpected {tok_val!r}", pos)

        raise LispySyntaxError(f"Unknown token: {tok_type} {tok_val}", pos)

    def parse_all(self) -> Iterator[ParseNode]:
        while True:
            node = self.parse_expr()
            if node is None:
                break
            yield node


def parse(source: str) -> ParseNode:
    """Parse a whole program into a root node wrapped in start/end anchors."""
    stream = TokenStream(lex(source))
    root = ParseNode(ROOT_TAG)
    root.children.append(ParseNode("regex", "", position=0))
    root.children.extend(stream.parse_all())
    root.children.append(ParseNode("regex", "", position=len(source)))
    return root
