"""
Schema document to graphene source translation.

The visitor is driven by `graphql.visit`: every `leave_<kind>` method receives
its node with the children already replaced by what their own `leave_*`
returned, and its return value replaces the node in turn. Fields and input
values become `FieldAssignment`s, top-level definitions become text fragments.
"""

from __future__ import annotations

from collections.abc import Iterable

from graphql import (
    DirectiveDefinitionNode,
    EnumTypeDefinitionNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    Node,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    SchemaDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    Visitor,
)

from ..utils import docstring, quote_string, to_python_identifier, to_snake_case
from .call_expr import CallExpr, FieldAssignment, merge_kwargs
from .config import CodeGeneratorConfig
from .diagnostics import Diagnostics
from .errors import UnsupportedNodeKind
from .type_refs import base_type_name, translate_type_ref, wrapper_names
from .values import translate_value

INDENT = "    "

# Built-in scalars that graphene provides under the same name
GRAPHENE_SCALARS = frozenset({"String", "Int", "Float", "Boolean", "ID"})

# Keyword parameters of graphene.Field; arguments with these names go through `args={...}`
RESERVED_FIELD_KWARGS = frozenset(
    {"args", "resolver", "source", "deprecation_reason", "name", "description", "required", "default_value"}
)

# Node kinds that only carry data for their parent definition
PASSTHROUGH_KINDS = frozenset(
    {
        "document",
        "name",
        "named_type",
        "list_type",
        "non_null_type",
        "directive",
        "argument",
        "int_value",
        "float_value",
        "string_value",
        "boolean_value",
        "null_value",
        "enum_value",
        "list_value",
        "object_value",
        "object_field",
        "variable",
        "enum_value_definition",
        "operation_type_definition",
    }
)


def indent(line: str, count: int = 1) -> str:
    return INDENT * count + line


def _description(node: Node) -> str:
    description = getattr(node, "description", None)
    return description.value if description else ""


def _type_imports(type_node: TypeNode) -> frozenset[str]:
    """graphene names needed by `Field(lambda: <type>)`."""
    names = {"Field"} | wrapper_names(type_node)
    if base_type_name(type_node) in GRAPHENE_SCALARS:
        names.add(base_type_name(type_node))
    return frozenset(names)


def _unique_names(assignments: Iterable[FieldAssignment]) -> list[FieldAssignment]:
    """Rename assignments whose Python name is already taken (`userId` and `user_id`)."""
    seen: set[str] = set()
    unique = []
    for assignment in assignments:
        name = assignment.name
        while name in seen:
            name += "_"
        if name != assignment.name:
            assignment = assignment.renamed(name)
        seen.add(name)
        unique.append(assignment)
    return unique


class GrapheneVisitor(Visitor):
    """Leave-visitor turning a schema document into graphene declarations."""

    def __init__(self, config: CodeGeneratorConfig, diagnostics: Diagnostics):
        super().__init__()
        self.config = config
        self.diagnostics = diagnostics
        # graphene names referenced by the generated code
        self.used_names: set[str] = set()

    # Fields and arguments

    def leave_input_value_definition(self, node: InputValueDefinitionNode, *_args) -> FieldAssignment:
        call = self._field_call(node)
        if node.default_value is not None:
            call = merge_kwargs(call, {"default_value": translate_value(node.default_value)})
        return self._assignment(node, call, _type_imports(node.type))

    def leave_field_definition(self, node: FieldDefinitionNode, *_args) -> FieldAssignment:
        call = self._field_call(node)
        imports = _type_imports(node.type)

        if node.arguments:
            imports |= {"Argument"}.union(*(argument.imports for argument in node.arguments))
            arguments = [argument.as_argument() for argument in _unique_names(node.arguments)]
            call = merge_kwargs(call, {key: value for key, value in arguments if key not in RESERVED_FIELD_KWARGS})
            reserved = [(key, value) for key, value in arguments if key in RESERVED_FIELD_KWARGS]
            if reserved:
                args = ", ".join(f"{quote_string(key)}: {value.render()}" for key, value in reserved)
                call = merge_kwargs(call, {"args": f"{{{args}}}"})

        for directive in node.directives or ():
            if directive.name.value != "deprecated":
                continue
            reason = next((arg.value for arg in directive.arguments or () if arg.name.value == "reason"), None)
            if reason is not None:
                reason_text = translate_value(reason)
            else:
                reason_text = quote_string(self.config.default_deprecation_reason)
            call = merge_kwargs(call, {"deprecation_reason": reason_text})

        return self._assignment(node, call, imports)

    def _assignment(
        self, node: FieldDefinitionNode | InputValueDefinitionNode, call: CallExpr, imports: frozenset[str]
    ) -> FieldAssignment:
        graphql_name = node.name.value
        name = to_snake_case(graphql_name) if self.config.convert_field_names else graphql_name
        assignment = FieldAssignment(name, call, imports, graphql_name)
        # Keywords get a trailing underscore, graphene would keep it in the schema name
        identifier = to_python_identifier(name, snake_case=False)
        if identifier != name:
            assignment = assignment.renamed(identifier)
        return assignment

    def _field_call(self, node: FieldDefinitionNode | InputValueDefinitionNode) -> CallExpr:
        """`Field(lambda: <type>)` plus the description, common to fields and input values."""
        call = CallExpr("Field", (f"lambda: {translate_type_ref(node.type)}",))
        description = _description(node)
        if description:
            call = merge_kwargs(call, {"description": quote_string(description)})
        return call

    # Top-level definitions

    def leave_object_type_definition(self, node: ObjectTypeDefinitionNode, *_args) -> str:
        return self._fields_class(node, "ObjectType")

    def leave_interface_type_definition(self, node: InterfaceTypeDefinitionNode, *_args) -> str:
        return self._fields_class(node, "Interface")

    def leave_input_object_type_definition(self, node: InputObjectTypeDefinitionNode, *_args) -> str:
        return self._fields_class(node, "InputObjectType")

    def _fields_class(
        self,
        node: ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode | InputObjectTypeDefinitionNode,
        base: str,
    ) -> str:
        name = node.name.value
        if name in self.config.ignore_types:
            return ""
        if getattr(node, "interfaces", None):
            self.diagnostics.unsupported("Interface inheritance is not yet supported!", name)
        fields = _unique_names(node.fields or ())
        self.used_names.update(*(field.imports for field in fields))
        return self._class_block(name, base, _description(node), [field.render() for field in fields])

    def leave_union_type_definition(self, node: UnionTypeDefinitionNode, *_args) -> str:
        name = node.name.value
        if name in self.config.ignore_types:
            return ""
        # Deferred references: members may be declared further down the module
        members = [f"lambda: {member.name.value}" for member in node.types or ()]
        body = []
        if members:
            trailing = "," if len(members) == 1 else ""
            body = ["class Meta:", indent(f"types = ({', '.join(members)}{trailing})")]
        return self._class_block(name, "Union", _description(node), body)

    def leave_enum_type_definition(self, node: EnumTypeDefinitionNode, *_args) -> str:
        name = node.name.value
        if name in self.config.ignore_types:
            return ""
        self.used_names.add("Enum")
        members = ", ".join(quote_string(value.name.value) for value in node.values or ())
        call = CallExpr("Enum", (quote_string(name), f"[{members}]"))
        description = _description(node)
        if description:
            call = merge_kwargs(call, {"description": quote_string(description)})
        return f"{name} = {call.render()}\n\n"

    def leave_scalar_type_definition(self, node: ScalarTypeDefinitionNode, *_args) -> str:
        name = node.name.value
        if name in self.config.ignore_types:
            return ""
        return self._class_block(name, "Scalar", _description(node), ["serialize = lambda x: str(x)"])

    def leave_directive_definition(self, node: DirectiveDefinitionNode, *_args) -> str:
        self.diagnostics.unsupported("Directives are not implemented yet!", f"@{node.name.value}")
        return ""

    def leave_schema_definition(self, node: SchemaDefinitionNode, *_args) -> str:
        self.diagnostics.unsupported("Schema definitions are not generated, root types are emitted as classes.", "schema")
        return ""

    def leave(self, node: Node, *_args) -> None:
        if node.kind not in PASSTHROUGH_KINDS:
            raise UnsupportedNodeKind(node.kind)

    def _class_block(self, name: str, base: str, description: str, body: list[str]) -> str:
        self.used_names.add(base)
        lines = [f"class {name}({base}):"]
        if description:
            lines.append(indent(docstring(description)))
        lines.extend(indent(line) for line in body)
        if len(lines) == 1:
            lines.append(indent("pass"))
        return "\n".join(lines) + "\n\n"
