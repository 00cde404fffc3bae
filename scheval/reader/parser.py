"""
  Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives instead of cons cells:

    - lists -> Python list ('() -> [])
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / #f -> True / False
    - 'x -> [quote, x]
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from scheval import SExpression
from scheval.errors import SchevalSyntaxError
from scheval.types.symbol import QUOTE, Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<boolean>#[tf](?![^\s()'\";]))"  # #t / #f
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            if source[pos] == '"':
                raise SchevalSyntaxError(f"Unterminated string at {pos}")
            raise SchevalSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if nm != "comment" and m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(text: str) -> SExpression:
    try:
        return int(text)
    except ValueError:
        pass
    # float() also accepts names such as "inf" and "nan"
    if not any(c.isdigit() for c in text):
        return Symbol(text)
    try:
        return float(text)
    except ValueError:
        return Symbol(text)


def parse_string(text: str) -> str:
    body = text[1:-1]
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\" and i + 1 < len(body):
            out.append(STRING_ESCAPES.get(body[i + 1], body[i + 1]))
            i += 2
            continue
        out.append(c)
        i += 1
    return "".join(out)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Read one expression; None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "boolean":
            self.advance()
            return tok_val == "#t"

        if tok_type == "string":
            self.advance()
            return parse_string(tok_val)

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] is None:
                raise SchevalSyntaxError("Unexpected EOF after quote")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                next_type = self.peek()[0]
                if next_type == "rparen":
                    self.advance()
                    break
                if next_type is None:
                    raise SchevalSyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise SchevalSyntaxError("Unexpected ')'")

        raise SchevalSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_all(source: str) -> list[SExpression]:
    return list(TokenStream(lex(source)).parse_all())


def read(source: str) -> SExpression:
    """Read the first expression in `source`."""
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise SchevalSyntaxError("Unexpected EOF: no expression to read")
    return stream.parse_expr()
