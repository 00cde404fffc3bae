from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        self.id = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Reserved tags of the special forms and the other names the evaluator relies on.
QUOTE = Symbol("quote")
SET = Symbol("set!")
DEFINE = Symbol("define")
LAMBDA = Symbol("lambda")
IF = Symbol("if")
BEGIN = Symbol("begin")
COND = Symbol("cond")
ELSE = Symbol("else")
OK = Symbol("ok")
