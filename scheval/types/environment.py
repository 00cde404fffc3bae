"""Runtime environment for scheval.

An Environment is a chain of Frames searched from the innermost frame outward.
Frames are shared by reference: every closure and every environment extended
from a frame sees later mutations made through any other holder of it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from scheval import LispValue
from scheval.errors import (
    SchevalError,
    SchevalSyntaxError,
    SchevalTooFewArguments,
    SchevalTooManyArguments,
    SchevalUnboundVariable,
)
from scheval.types.symbol import Symbol


class Frame:
    """One scope level: a mutable mapping from Symbols to values."""

    __slots__ = ("vars",)

    def __init__(self, variables: Iterable[Symbol] = (), values: Iterable[LispValue] = ()):
        self.vars: dict[Symbol, LispValue] = dict(zip(variables, values))

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def get(self, name: Symbol, default: LispValue = None) -> LispValue:
        return self.vars.get(name, default)

    def bind(self, name: Symbol, value: LispValue) -> None:
        """Insert or overwrite `name` in this frame."""
        self.vars[name] = value

    def write(self, buffer: StringIO) -> None:
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __repr__(self) -> str:
        with StringIO() as buffer:
            self.write(buffer)
            return buffer.getvalue()


class Environment:
    """Ordered chain of frames; the empty environment has no frame."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Optional[Frame] = None, outer: Optional[Environment] = None):
        if frame is None and outer is not None:
            raise SchevalError("The empty environment cannot have an enclosing environment")
        self.frame: Frame | None = frame
        self.outer: Environment | None = outer

    @property
    def is_empty(self) -> bool:
        return self.frame is None

    def frames(self) -> Iterator[Frame]:
        """Yield frames from innermost to outermost."""
        env: Optional[Environment] = self
        while env is not None and env.frame is not None:
            yield env.frame
            env = env.outer

    def find(self, name: Symbol) -> Optional[Frame]:
        """Find the innermost frame in the chain that binds `name`."""
        for frame in self.frames():
            if name in frame:
                return frame
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SchevalUnboundVariable if no frame in the chain binds it.
        """
        frame = self.find(name)
        if frame is None:
            raise SchevalUnboundVariable(name)
        return frame.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the existing binding for `name` in the frame that holds it.

        Never creates a binding. Raises SchevalUnboundVariable if the symbol is not found.
        """
        frame = self.find(name)
        if frame is None:
            raise SchevalUnboundVariable(name)
        frame.bind(name, value)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in the innermost frame, shadowing any outer binding."""
        if not isinstance(name, Symbol):
            raise SchevalSyntaxError(f"Cannot define {name!r} as a variable")
        if self.frame is None:
            raise SchevalError(f"Cannot define {name} in the empty environment")
        self.frame.bind(name, value)

    def extend(self, parameters: list[Symbol], arguments: list[LispValue]) -> Environment:
        """Return a new environment whose first frame pairs parameters with arguments.

        The arity is checked before any binding is made.
        """
        parameters = list(parameters)
        arguments = list(arguments)
        if len(arguments) > len(parameters):
            raise SchevalTooManyArguments(
                f"Too many arguments supplied: {len(parameters)} expected, got {len(arguments)}",
                parameters,
                arguments,
            )
        if len(arguments) < len(parameters):
            raise SchevalTooFewArguments(
                f"Too few arguments supplied: {len(parameters)} expected, got {len(arguments)}",
                parameters,
                arguments,
            )
        outer = None if self.is_empty else self
        return Environment(Frame(parameters, arguments), outer)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the innermost frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        if self.frame is None:
            return "<empty environment>"
        with StringIO() as buffer:
            self.frame.write(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={sum(1 for _ in self.frames())}>"


def the_empty_environment() -> Environment:
    return Environment()
