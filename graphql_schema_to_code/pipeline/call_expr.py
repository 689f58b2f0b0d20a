"""
Structured representation of generated constructor calls.

Fields and arguments are built up incrementally (description, arguments,
deprecation reason, default value). Keeping the call as a structure until the
final render avoids rewriting already generated text.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Union

from ..utils import quote_string

Expr = Union[str, "CallExpr"]


def render_expr(expr: Expr) -> str:
    if isinstance(expr, CallExpr):
        return expr.render()
    return expr


@dataclass(frozen=True)
class CallExpr:
    """A call `callee(*args, **kwargs)` whose parts are source text or nested calls."""

    callee: str
    args: tuple[Expr, ...] = ()
    kwargs: tuple[tuple[str, Expr], ...] = ()

    def render(self) -> str:
        parts = [render_expr(arg) for arg in self.args]
        parts.extend(f"{key}={render_expr(value)}" for key, value in self.kwargs)
        return f"{self.callee}({', '.join(parts)})"

    def retarget(self, callee: str) -> CallExpr:
        """Same arguments, different callee (e.g. `Field` -> `Argument`)."""
        return replace(self, callee=callee)

    def kwarg(self, key: str) -> Expr | None:
        for name, value in self.kwargs:
            if name == key:
                return value
        return None

    def __str__(self) -> str:
        return self.render()


def merge_kwargs(call: CallExpr, new_kwargs: Mapping[str, Expr | None]) -> CallExpr:
    """
    Append keyword arguments to a call.

    Keys whose value is empty or None are skipped. A key that is already
    present has its value replaced in place.

    Args:
        call: The call to extend
        new_kwargs: Keyword name -> value source text (or nested call)

    Returns:
        The extended call (the original is left untouched)
    """
    kwargs = list(call.kwargs)
    for key, value in new_kwargs.items():
        if not value:
            continue
        for index, (existing, _) in enumerate(kwargs):
            if existing == key:
                kwargs[index] = (key, value)
                break
        else:
            kwargs.append((key, value))

    if tuple(kwargs) == call.kwargs:
        return call
    return replace(call, kwargs=tuple(kwargs))


@dataclass(frozen=True)
class FieldAssignment:
    """`name = <call>` line of a class body."""

    name: str
    call: CallExpr
    # graphene names the call refers to
    imports: frozenset[str] = field(default_factory=frozenset)
    # Field or argument name as written in the schema
    graphql_name: str = ""

    def render(self) -> str:
        return f"{self.name} = {self.call.render()}"

    def as_argument(self) -> tuple[str, CallExpr]:
        """Keyword form used inside a field call: `name=Argument(...)`."""
        return self.name, self.call.retarget("Argument")

    def renamed(self, name: str) -> FieldAssignment:
        """Move to another Python name, pinning the schema name with `name=`."""
        schema_name = self.graphql_name or self.name
        return replace(self, name=name, call=merge_kwargs(self.call, {"name": quote_string(schema_name)}))

    def __str__(self) -> str:
        return self.render()
