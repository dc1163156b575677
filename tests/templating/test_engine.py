import pytest

from docerrors.templating import (
    DUPLICATE_KEY_TEMPLATE,
    INDEX_TEMPLATE,
    compile,
    decompile,
)


def test_compile_substitutes_placeholders():
    result = compile("{path_name} must be a {type_name}", {"path_name": "birthday", "type_name": "date"})
    assert result == "birthday must be a date"


def test_compile_missing_values_render_empty():
    assert compile("{a}-{missing}-{b}", {"a": 1, "b": None}) == "1--"


def test_compile_repeated_and_dotted_placeholders():
    context = {"path_name": "email", "properties": {"max": 10}}
    assert compile("{path_name}/{path_name} <= {properties.max}", context) == "email/email <= 10"


def test_compile_allows_padding_inside_braces():
    assert compile("{ path_name } is required", {"path_name": "age"}) == "age is required"


def test_compile_joins_lists():
    assert compile("one of {values}", {"values": ["admin", "normal"]}) == "one of admin,normal"


def test_decompile_skips_brace_groups_with_spaces():
    message = compile(DUPLICATE_KEY_TEMPLATE, {"collection": "c", "index": "i_1", "value": "v"})
    assert list(decompile(DUPLICATE_KEY_TEMPLATE, message)) == ["collection", "index", "value"]


def test_decompile_duplicate_key_message():
    message = 'E11000 duplicate key error collection: test.Users index: username_1 dup key: { : "bob" }'
    assert decompile(DUPLICATE_KEY_TEMPLATE, message) == {
        "collection": "test.Users",
        "index": "username_1",
        "value": '"bob"',
    }


@pytest.mark.parametrize(
    "data",
    [
        {"collection": "test.Users", "index": "username_1", "value": "1000"},
        {"collection": "shop.orders", "index": "code_-1", "value": '"A-17"'},
        {"collection": "db.c", "index": "_id_", "value": "ObjectId('5f1d')"},
    ],
)
def test_decompile_inverts_compile_for_duplicate_key_template(data):
    assert decompile(DUPLICATE_KEY_TEMPLATE, compile(DUPLICATE_KEY_TEMPLATE, data)) == data


def test_decompile_simple_template():
    assert decompile("{path_name} must be a {type}", "birthday must be a date") == {
        "path_name": "birthday",
        "type": "date",
    }


def test_decompile_index_template_from_right_keeps_underscored_paths():
    assert decompile(INDEX_TEMPLATE, "first_name_1", from_right=True) == {
        "path": "first_name",
        "direction": "1",
    }
    # left to right the first separator wins
    assert decompile(INDEX_TEMPLATE, "first_name_1") == {"path": "first", "direction": "name_1"}


def test_decompile_unmatched_text_yields_empty_values():
    assert decompile("{a} and {b}", "nothing here") == {"a": "nothing here", "b": ""}
