import ast

import pytest
from graphql import parse_value

from graphql_schema_to_code.pipeline import UnsupportedLiteralKind, translate_value


@pytest.mark.parametrize(
    "literal, expected",
    [
        ("true", "True"),
        ("false", "False"),
        ("42", "42"),
        ("-7", "-7"),
        ("1.5", "1.5"),
        ("6.02e23", "6.02e23"),
        ("null", "None"),
        ('"text"', '"text"'),
        ("RED", '"RED"'),
        ("[]", "[]"),
        ("[1, 2, 3]", "[1, 2, 3]"),
        ("{}", "{}"),
        ('{name: "x", size: 2}', '{"name": "x", "size": 2}'),
    ],
)
def test_translate_value(literal, expected):
    assert translate_value(parse_value(literal)) == expected


def test_translate_nested_value():
    value = parse_value('{tags: ["a", RED, null], inner: {flag: true, ratio: 0.5}, matrix: [[1], []]}')
    assert translate_value(value) == (
        '{"tags": ["a", "RED", None], "inner": {"flag": True, "ratio": 0.5}, "matrix": [[1], []]}'
    )


def test_translate_string_escapes_quotes():
    assert translate_value(parse_value(r'"say \"hi\""')) == r'"say \"hi\""'


def test_translate_string_escapes_control_characters():
    translated = translate_value(parse_value(r'["a\rb", "x\u0000y", "tab\tstop"]'))
    assert translated == r'["a\rb", "x\u0000y", "tab\tstop"]'
    assert ast.literal_eval(translated) == ["a\rb", "x\x00y", "tab\tstop"]


def test_variable_is_unsupported():
    with pytest.raises(UnsupportedLiteralKind) as excinfo:
        translate_value(parse_value("$limit"))
    assert excinfo.value.kind == "variable"


def test_variable_nested_in_list_is_unsupported():
    with pytest.raises(UnsupportedLiteralKind):
        translate_value(parse_value("[1, $other]"))
