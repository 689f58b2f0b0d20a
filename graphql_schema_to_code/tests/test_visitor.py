import pytest
from graphql import parse, parse_value, visit

from graphql_schema_to_code.pipeline import (
    CodeGeneratorConfig,
    Diagnostics,
    FieldAssignment,
    GrapheneVisitor,
    UnsupportedLiteralKind,
    UnsupportedNodeKind,
)


def _visit(sdl, config=None):
    diagnostics = Diagnostics()
    visitor = GrapheneVisitor(config or CodeGeneratorConfig(), diagnostics)
    document = visit(parse(sdl), visitor)
    return list(document.definitions), visitor, diagnostics


def test_fields_are_structured_until_their_type_is_rendered():
    definitions, _, _ = _visit("type Foo { bar(id: ID): String }")
    assert definitions == ["class Foo(ObjectType):\n    bar = Field(lambda: String, id=Argument(lambda: ID))\n\n"]


def test_directive_arguments_do_not_leak_into_output():
    sdl = "directive @auth(role: String = \"admin\") on FIELD_DEFINITION"
    definitions, visitor, diagnostics = _visit(sdl)
    assert definitions == [""]
    assert len(diagnostics) == 1
    assert visitor.used_names == set()


def test_input_value_default_is_translated():
    visitor = GrapheneVisitor(CodeGeneratorConfig(), Diagnostics())
    definitions = list(visit(parse("input Page { size: Int = 20 }"), visitor).definitions)
    assert definitions == ["class Page(InputObjectType):\n    size = Field(lambda: Int, default_value=20)\n\n"]


def test_type_extension_fails_loudly():
    with pytest.raises(UnsupportedNodeKind) as excinfo:
        _visit("extend type Foo { extra: String }")
    assert excinfo.value.kind == "object_type_extension"


def test_executable_definition_fails_loudly():
    with pytest.raises(UnsupportedNodeKind):
        _visit("query { me }")


def test_variable_default_fails_the_run():
    # The SDL parser rejects variables in defaults, so build the node by hand
    document = parse("input Page { size: Int = 20 }")
    document.definitions[0].fields[0].default_value = parse_value("$x")
    with pytest.raises(UnsupportedLiteralKind):
        visit(document, GrapheneVisitor(CodeGeneratorConfig(), Diagnostics()))


def test_used_names():
    _, visitor, _ = _visit(
        """
        enum Color { RED }
        type Foo { bar(id: ID!): [String] }
        """
    )
    assert visitor.used_names == {"Enum", "ObjectType", "Field", "Argument", "NonNull", "ID", "List", "String"}


def test_ignored_types_do_not_contribute_imports():
    _, visitor, _ = _visit("type Foo { bar: String }", CodeGeneratorConfig(ignore_types=["Foo"]))
    assert visitor.used_names == set()


def test_field_assignment_imports():
    assignment = GrapheneVisitor(CodeGeneratorConfig(), Diagnostics()).leave_input_value_definition(
        parse("input A { b: [Int!] }").definitions[0].fields[0]
    )
    assert isinstance(assignment, FieldAssignment)
    assert assignment.imports == {"Field", "List", "NonNull", "Int"}
