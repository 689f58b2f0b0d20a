"""
Translation of type references (`[User!]!` and friends) into graphene
wrapper calls (`NonNull(List(NonNull(User)))`).
"""

from __future__ import annotations

from graphql import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from .call_expr import CallExpr
from .errors import UnsupportedNodeKind

LIST_WRAPPER = "List"
NON_NULL_WRAPPER = "NonNull"


def translate_type_ref(type_node: TypeNode) -> str:
    """
    Translate a (possibly wrapped) type reference.

    Wrappers are unwound iteratively, so nesting depth is only bounded by
    what the parser accepts.

    Args:
        type_node: Named, list or non-null type node

    Returns:
        Python expression text, e.g. `NonNull(List(String))`
    """
    wrappers: list[str] = []
    node = type_node
    while not isinstance(node, NamedTypeNode):
        if isinstance(node, ListTypeNode):
            wrappers.append(LIST_WRAPPER)
        elif isinstance(node, NonNullTypeNode):
            wrappers.append(NON_NULL_WRAPPER)
        else:
            raise UnsupportedNodeKind(getattr(node, "kind", type(node).__name__))
        node = node.type

    expr = node.name.value
    for wrapper in reversed(wrappers):
        expr = CallExpr(wrapper, (expr,)).render()
    return expr


def base_type_name(type_node: TypeNode) -> str:
    """Name of the named type at the bottom of the wrappers."""
    node = type_node
    while not isinstance(node, NamedTypeNode):
        node = node.type
    return node.name.value


def wrapper_names(type_node: TypeNode) -> set[str]:
    """Graphene wrapper names used by a type reference."""
    names = set()
    node = type_node
    while not isinstance(node, NamedTypeNode):
        names.add(LIST_WRAPPER if isinstance(node, ListTypeNode) else NON_NULL_WRAPPER)
        node = node.type
    return names
