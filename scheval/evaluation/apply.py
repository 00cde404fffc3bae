"""Application engine for scheval.

Centralizes procedure application so the evaluator and primitives that call
back into the evaluator (e.g. `map`) share one set of rules:
- Primitive procedures receive their arguments as a list and their result is
  returned directly.
- Compound procedures extend their captured environment with the parameters
  bound to the arguments and evaluate their body sequence there.
- Anything else raises SchevalUnknownProcedureType.
"""

from __future__ import annotations

import logging

from scheval import LispValue
from scheval.errors import (
    SchevalError,
    SchevalPrimitiveError,
    SchevalUnknownProcedureType,
)
from scheval.types.procedure import CompoundProcedure, Primitive

logger = logging.getLogger(__name__)


def apply_primitive(procedure: Primitive, arguments: list[LispValue], evaluator) -> LispValue:
    """Invoke the host callable of a primitive.

    Host exceptions are re-raised as SchevalPrimitiveError naming the primitive,
    chained to the original. Scheval errors raised by callbacks into the
    evaluator and host stack exhaustion propagate unchanged.
    """
    try:
        return procedure(evaluator, arguments)
    except (SchevalError, RecursionError):
        raise
    except Exception as ex:
        raise SchevalPrimitiveError(procedure.name, ex) from ex


def apply_compound(procedure: CompoundProcedure, arguments: list[LispValue], evaluator) -> LispValue:
    """Apply a closure.

    Parameters:
    - procedure: The CompoundProcedure being applied.
    - arguments: Values (eager) or thunks (lazy) to bind positionally.
    - evaluator: The Evaluator used to run the body.

    Arity is checked by Environment.extend before anything is bound.
    """
    new_env = procedure.env.extend(list(procedure.parameters), list(arguments))
    return evaluator.eval_sequence(procedure.body, new_env)


def apply(procedure: LispValue, arguments: list[LispValue], evaluator) -> LispValue:
    if isinstance(procedure, Primitive):
        logger.debug("Applying primitive %s to %d argument(s)", procedure.name, len(arguments))
        return apply_primitive(procedure, arguments, evaluator)
    elif isinstance(procedure, CompoundProcedure):
        logger.debug(
            "Applying compound procedure with parameters %s",
            " ".join(str(p) for p in procedure.parameters),
        )
        return apply_compound(procedure, arguments, evaluator)
    else:
        raise SchevalUnknownProcedureType(procedure)
