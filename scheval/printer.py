"""Rendering of runtime values in Scheme notation.

Compound procedures render as an opaque tagged list with an elided
environment placeholder; a closure's environment usually contains the
closure itself.
"""

from __future__ import annotations

import json
import sys
from typing import Optional, TextIO

from scheval import LispValue
from scheval.types.environment import Environment
from scheval.types.procedure import CompoundProcedure, Primitive
from scheval.types.symbol import Symbol
from scheval.types.thunk import Thunk

PROCEDURE_ENV_PLACEHOLDER = "<procedure-env>"


def _seq(items) -> str:
    return "(" + " ".join(to_string(x) for x in items) + ")"


def to_string(value: LispValue) -> str:
    match value:
        case True:
            return "#t"
        case False:
            return "#f"
        case Symbol():
            return str(value)
        case str():
            return json.dumps(value, ensure_ascii=False)
        case int() | float():
            return str(value)
        case list():
            return _seq(value)
        case (head, tail):
            return f"({to_string(head)} . {to_string(tail)})"
        case Primitive():
            return f"<primitive {value.name}>"
        case CompoundProcedure():
            return (
                f"(compound-procedure {_seq(value.parameters)} "
                f"{_seq(value.body)} {PROCEDURE_ENV_PLACEHOLDER})"
            )
        case Thunk():
            return to_string(value.value) if value.evaluated else "<thunk>"
        case Environment():
            return "<environment>"
        case _:
            return repr(value)


def user_print(value: LispValue, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(to_string(value))
    out.write("\n")
