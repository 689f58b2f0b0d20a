"""
Exceptions raised while generating code from a schema document.

Any of these aborts the whole generation run: no partial output is produced.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base exception for code generation errors."""

    pass


class UnsupportedLiteralKind(GenerationError):
    """Raised when a default value or directive argument uses a literal kind
    that has no Python counterpart (e.g. a variable reference)."""

    def __init__(self, kind: str):
        super().__init__(f"Literal of kind '{kind}' is not supported.")
        self.kind = kind


class UnsupportedNodeKind(GenerationError):
    """Raised when the schema document contains a node kind the translator
    does not handle (type extensions, executable definitions, ...)."""

    def __init__(self, kind: str):
        super().__init__(f"Node of kind '{kind}' is not supported.")
        self.kind = kind
