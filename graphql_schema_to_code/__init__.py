"""GraphQL Schema to Code Generator

A Python package for generating graphene classes from GraphQL schema
definitions: object, interface, input, union, enum and scalar types with
their fields, arguments, defaults, descriptions and deprecations.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .pipeline import (
    CodeGeneratorConfig,
    Diagnostics,
    GenerationError,
    GenerationResult,
    SchemaGenerator,
    UnsupportedLiteralKind,
    generate_code,
)

__all__ = [
    "SchemaGenerator",
    "GenerationResult",
    "generate_code",
    "CodeGeneratorConfig",
    "Diagnostics",
    "GenerationError",
    "UnsupportedLiteralKind",
]
