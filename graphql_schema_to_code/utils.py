"""
Utility functions for GraphQL schema to code generator.
"""

import json
import keyword
import re

# Regex pattern to split text into words: acronym runs stay together and
# trailing digits stick to the word they follow
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])[0-9]*|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+")

# Control characters that cannot appear raw in a docstring (newline and tab can)
_DOCSTRING_CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def to_snake_case(text: str) -> str:
    """Convert camelCase, PascalCase or mixed text to snake_case.

    Examples:
        "firstName" -> "first_name"
        "userID" -> "user_id"
        "HTTPServer" -> "http_server"
        "address2Line" -> "address2_line"
        "_internalId" -> "_internal_id"
        "value_" -> "value_"
        "already_snake" -> "already_snake"

    Args:
        text: The text to convert

    Returns:
        snake_case string
    """
    stripped = text.strip("_")
    if not stripped:
        return text
    prefix = text[: len(text) - len(text.lstrip("_"))]
    suffix = text[len(text.rstrip("_")) :]
    words = _split_into_words(_normalize_separators(stripped))
    return prefix + "_".join(word.lower() for word in words) + suffix


def to_python_identifier(name: str, snake_case: bool = True) -> str:
    """Turn a schema field name into a valid Python assignment target.

    Python keywords get a trailing underscore. graphene keeps that underscore
    in the schema name, so callers pass the original name explicitly.
    """
    if snake_case:
        name = to_snake_case(name)
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def quote_string(text: str) -> str:
    """Render text as a double-quoted Python string literal.

    JSON string escapes are a subset of Python's, so control characters come
    out escaped and the literal always compiles.
    """
    return json.dumps(text, ensure_ascii=False)


def docstring(text: str) -> str:
    """Render text as a triple-quoted docstring."""
    escaped = text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    escaped = _DOCSTRING_CONTROL_PATTERN.sub(lambda m: f"\\x{ord(m.group()):02x}", escaped)
    if escaped.endswith('"'):
        escaped = escaped[:-1] + '\\"'
    return f'"""{escaped}"""'
