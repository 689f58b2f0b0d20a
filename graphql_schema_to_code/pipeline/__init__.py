"""
Pipeline - GraphQL schema to graphene code generator.

1. Phase 1 (Normalize): print the schema to SDL and parse it back
2. Phase 2 (Translate): bottom-up visit producing one fragment per definition
3. Phase 3 (Assemble): concatenate fragments, optionally prepend the header
"""

from __future__ import annotations

from .call_expr import CallExpr, FieldAssignment, merge_kwargs
from .config import CodeGeneratorConfig, ConfigError
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .errors import GenerationError, UnsupportedLiteralKind, UnsupportedNodeKind
from .generator import GenerationResult, SchemaGenerator, generate_code
from .type_refs import translate_type_ref
from .values import translate_value
from .visitor import GrapheneVisitor

__all__ = [
    "SchemaGenerator",
    "GenerationResult",
    "generate_code",
    "CodeGeneratorConfig",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "GenerationError",
    "UnsupportedLiteralKind",
    "UnsupportedNodeKind",
    "GrapheneVisitor",
    "CallExpr",
    "FieldAssignment",
    "merge_kwargs",
    "translate_type_ref",
    "translate_value",
]
