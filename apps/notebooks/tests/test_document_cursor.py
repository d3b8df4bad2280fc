"""Тесты курсора по документу."""

# --- Imports ---
import pytest

from apps.notebooks.exceptions import MalformedInputError
from apps.notebooks.services.document import DocumentCursor, Token, ensure_expected_token, open_cursor


# --- Основные блоки ---
def test_tokens_follow_document_structure() -> None:
    cursor = DocumentCursor.from_text('{"a": [1, "x", true, null], "b": {"c": 1.5}}')

    tokens = []
    while (token := cursor.next_token()) is not None:
        tokens.append(token)

    assert tokens == [
        Token.START_OBJECT,
        Token.FIELD_NAME,
        Token.START_ARRAY,
        Token.VALUE_NUMBER,
        Token.VALUE_STRING,
        Token.VALUE_BOOLEAN,
        Token.VALUE_NULL,
        Token.END_ARRAY,
        Token.FIELD_NAME,
        Token.START_OBJECT,
        Token.FIELD_NAME,
        Token.VALUE_NUMBER,
        Token.END_OBJECT,
        Token.END_OBJECT,
    ]


def test_fresh_cursor_is_before_first_token() -> None:
    cursor = DocumentCursor.from_text("{}")
    assert cursor.current_token() is None
    assert open_cursor("{}").current_token() is Token.START_OBJECT


def test_current_name_tracks_enclosing_field() -> None:
    cursor = open_cursor('{"outer": {"inner": "v"}}')

    assert cursor.next_token() is Token.FIELD_NAME
    assert cursor.current_name() == "outer"
    assert cursor.next_token() is Token.START_OBJECT
    assert cursor.current_name() == "outer"
    cursor.next_token()
    assert cursor.current_name() == "inner"
    cursor.next_token()
    assert cursor.text() == "v"
    assert cursor.current_name() == "inner"
    assert cursor.next_token() is Token.END_OBJECT
    assert cursor.current_name() == "outer"


def test_skip_children_consumes_subtree() -> None:
    cursor = open_cursor('{"skip": {"a": [1, {"b": 2}]}, "keep": 3}')
    cursor.next_token()
    cursor.next_token()

    cursor.skip_children()

    assert cursor.current_token() is Token.END_OBJECT
    assert cursor.next_token() is Token.FIELD_NAME
    assert cursor.current_name() == "keep"


def test_skip_children_on_scalar_is_noop() -> None:
    cursor = open_cursor('{"a": 1}')
    cursor.next_token()
    cursor.next_token()
    cursor.skip_children()
    assert cursor.current_token() is Token.VALUE_NUMBER


def test_read_value_materializes_subtree() -> None:
    cursor = open_cursor('{"a": [1, {"b": false}], "c": "d"}')
    assert cursor.read_value() == {"a": [1, {"b": False}], "c": "d"}
    assert cursor.current_token() is Token.END_OBJECT
    assert cursor.next_token() is None


def test_text_on_structural_token_fails() -> None:
    with pytest.raises(MalformedInputError):
        open_cursor("{}").text()


def test_text_renders_scalars() -> None:
    cursor = open_cursor("[12, false]")
    cursor.next_token()
    assert cursor.text() == "12"
    cursor.next_token()
    assert cursor.text() == "false"


def test_ensure_expected_token_reports_both_tokens() -> None:
    with pytest.raises(MalformedInputError, match=r"\[START_OBJECT\].*\[START_ARRAY\]"):
        ensure_expected_token(Token.START_OBJECT, open_cursor("[]"))


@pytest.mark.parametrize("body", ["", "{", b"\xff\xfe", "{'a': 1}"])
def test_invalid_documents_are_malformed(body) -> None:
    with pytest.raises(MalformedInputError):
        DocumentCursor.from_text(body)


def test_unsupported_value_type_is_malformed() -> None:
    cursor = DocumentCursor.from_value({"a": object()})
    cursor.next_token()
    cursor.next_token()
    with pytest.raises(MalformedInputError):
        cursor.next_token()


def test_deeply_nested_document_is_malformed() -> None:
    body = '{"id":"a","resource":{"name":"n"},"extra":' + "[" * 5000 + "]" * 5000 + "}"
    with pytest.raises(MalformedInputError, match="nesting too deep"):
        DocumentCursor.from_text(body)


def test_deeply_nested_value_is_malformed_when_walked() -> None:
    value: list = []
    for _ in range(5000):
        value = [value]
    cursor = DocumentCursor.from_value(value)
    cursor.next_token()
    with pytest.raises(MalformedInputError):
        cursor.read_value()


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "1e999"])
def test_non_json_numbers_are_malformed(literal: str) -> None:
    with pytest.raises(MalformedInputError):
        DocumentCursor.from_text('{"id":"a","resource":{"name":"n"},"extra":' + literal + "}")


def test_non_finite_python_float_is_malformed() -> None:
    cursor = DocumentCursor.from_value({"a": float("nan")})
    cursor.next_token()
    cursor.next_token()
    with pytest.raises(MalformedInputError):
        cursor.next_token()
