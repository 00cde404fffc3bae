# Core type aliases for the scheval data model.
# Expressions and runtime values are plain Python values: int/float for numbers,
# str for strings, bool for the two designated booleans, Symbol for symbols and
# list for compound expressions. No explicit Cons type is defined.
#
# Naming guidance:
# - SExpression: use in reader/classifier code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (often used interchangeably with LispValue)
SExpression = LispValue

# Host-level body of a primitive procedure: (evaluator, evaluated args) -> value
PrimitiveFn = Callable[..., LispValue]
