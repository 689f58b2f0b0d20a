"""
Translation of GraphQL literal values (default values, directive arguments)
into Python literal source text.
"""

from __future__ import annotations

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)

from ..utils import quote_string
from .errors import UnsupportedLiteralKind


def translate_value(value: ValueNode) -> str:
    """
    Translate a literal value node to Python source.

    Args:
        value: The parsed literal

    Returns:
        Python literal text

    Raises:
        UnsupportedLiteralKind: For value kinds without a Python literal form
    """
    match value:
        case BooleanValueNode():
            return "True" if value.value else "False"
        case IntValueNode() | FloatValueNode():
            return value.value
        case NullValueNode():
            return "None"
        case StringValueNode() | EnumValueNode():
            return quote_string(value.value)
        case ListValueNode():
            return f"[{', '.join(translate_value(item) for item in value.values)}]"
        case ObjectValueNode():
            pairs = (f"{quote_string(f.name.value)}: {translate_value(f.value)}" for f in value.fields)
            return f"{{{', '.join(pairs)}}}"
        case _:
            raise UnsupportedLiteralKind(getattr(value, "kind", type(value).__name__))
