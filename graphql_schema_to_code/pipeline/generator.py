"""
Entry point of the pipeline: schema in, graphene module source out.

1. Print the schema to canonical SDL and parse it back into a document
2. Walk the document bottom-up with `GrapheneVisitor`
3. Concatenate the top-level fragments in declaration order
4. Optionally prepend the module header (generation comment, imports)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import jinja2
from graphql import GraphQLSchema, build_schema, parse, print_schema, visit

from .. import __version__
from ..cli_utils import reconstruct_command_line
from .config import CodeGeneratorConfig
from .diagnostics import Diagnostics
from .visitor import GrapheneVisitor

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent / "templates" / "python"


@dataclass
class GenerationResult:
    """Generated code together with the warnings raised while producing it."""

    code: str
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def warnings(self) -> list[str]:
        return self.diagnostics.messages


class SchemaGenerator:
    """Generates a graphene module from a GraphQL schema."""

    def __init__(self, schema: GraphQLSchema | str, config: CodeGeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema: A built schema, or SDL text to build one from
            config: Code generation configuration
        """
        if isinstance(schema, str):
            schema = build_schema(schema)
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.py.jinja2")

    def generate(self, diagnostics: Diagnostics | None = None) -> GenerationResult:
        """
        Generate the module source.

        Args:
            diagnostics: Collector for non-fatal warnings (a fresh one if omitted)

        Returns:
            The code and the diagnostics collected during the run

        Raises:
            GenerationError: On literal or node kinds the translator cannot handle
        """
        if diagnostics is None:
            diagnostics = Diagnostics()

        document = parse(print_schema(self.schema))
        visitor = GrapheneVisitor(self.config, diagnostics)
        translated = visit(document, visitor)

        fragments = [fragment for fragment in translated.definitions if fragment]
        logger.debug("Generated %d of %d definitions", len(fragments), len(translated.definitions))

        code = "".join(fragments).rstrip("\n")
        if code:
            code += "\n"

        if self.config.add_imports:
            header = self._render_prefix(sorted(visitor.used_names)).strip("\n")
            if header:
                code = f"{header}\n\n{code}" if code else f"{header}\n"

        return GenerationResult(code, diagnostics)

    def _render_prefix(self, imports: list[str]) -> str:
        return self.prefix_template.render(
            GENERATION_COMMENT=self._generate_command_comment(),
            IMPORTS=imports,
        )

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        # Reconstruct command line using CLI utilities
        try:
            from ..graphql_schema_to_code import graphql_schema_to_code as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "graphql_schema_to_code"

        return f"# Generated by graphql_schema_to_code v{__version__} : {command_line}"


def generate_code(schema: GraphQLSchema | str, config: CodeGeneratorConfig | None = None) -> GenerationResult:
    """Convenience wrapper around `SchemaGenerator(schema, config).generate()`."""
    return SchemaGenerator(schema, config).generate()
