from graphql_schema_to_code.pipeline import CallExpr, FieldAssignment, merge_kwargs


def test_render_empty_call():
    assert CallExpr("Field").render() == "Field()"


def test_merge_into_empty_call():
    call = merge_kwargs(CallExpr("Field"), {"a": "1"})
    assert call.render() == "Field(a=1)"


def test_merge_after_positional_arguments():
    call = merge_kwargs(CallExpr("Field", ("lambda: String",)), {"description": '"desc"'})
    assert call.render() == 'Field(lambda: String, description="desc")'


def test_merge_order_of_independent_keys():
    a_then_b = merge_kwargs(merge_kwargs(CallExpr("Field"), {"a": "1"}), {"b": "2"}).render()
    b_then_a = merge_kwargs(merge_kwargs(CallExpr("Field"), {"b": "2"}), {"a": "1"}).render()
    for rendered in (a_then_b, b_then_a):
        assert "a=1" in rendered
        assert "b=2" in rendered


def test_merge_empty_values_is_noop():
    call = CallExpr("Field", ("lambda: Int",), (("a", "1"),))
    assert merge_kwargs(call, {"c": ""}) is call
    assert merge_kwargs(call, {"c": None}) is call
    assert merge_kwargs(call, {}).render() == "Field(lambda: Int, a=1)"


def test_merge_skips_only_empty_keys():
    call = merge_kwargs(CallExpr("Field"), {"a": "1", "c": "", "b": "2"})
    assert call.render() == "Field(a=1, b=2)"


def test_merge_existing_key_replaces_value():
    call = merge_kwargs(CallExpr("Field"), {"a": "1", "b": "2"})
    call = merge_kwargs(call, {"a": "3"})
    assert call.render() == "Field(a=3, b=2)"


def test_merge_does_not_mutate_original():
    original = CallExpr("Field", ("lambda: Int",))
    merge_kwargs(original, {"a": "1"})
    assert original.render() == "Field(lambda: Int)"


def test_nested_call_kwargs():
    argument = merge_kwargs(CallExpr("Argument", ("lambda: ID",)), {"default_value": '"x"'})
    call = merge_kwargs(CallExpr("Field", ("lambda: User",)), {"user_id": argument})
    assert call.render() == 'Field(lambda: User, user_id=Argument(lambda: ID, default_value="x"))'


def test_field_assignment_as_argument():
    field = FieldAssignment("user_id", CallExpr("Field", ("lambda: NonNull(ID)",)))
    assert field.render() == "user_id = Field(lambda: NonNull(ID))"
    name, call = field.as_argument()
    assert name == "user_id"
    assert call.render() == "Argument(lambda: NonNull(ID))"


def test_field_assignment_renamed_pins_schema_name():
    field = FieldAssignment("user_id", CallExpr("Field", ("lambda: ID",)), graphql_name="user_id")
    renamed = field.renamed("user_id_")
    assert renamed.render() == 'user_id_ = Field(lambda: ID, name="user_id")'
    assert renamed.as_argument()[1].render() == 'Argument(lambda: ID, name="user_id")'
    assert field.render() == "user_id = Field(lambda: ID)"
