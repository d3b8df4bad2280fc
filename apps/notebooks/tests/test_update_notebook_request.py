"""Тесты кодека UpdateNotebookRequest."""

# --- Imports ---
import io
import logging
from unittest.mock import Mock

import pytest

from apps.notebooks.config import LOG_PREFIX
from apps.notebooks.exceptions import MalformedInputError, MissingFieldError
from apps.notebooks.schemas import Notebook, UpdateNotebookRequest
from apps.notebooks.services.document import DocumentCursor, open_cursor

RESOURCE = {
    "name": "My Notebook",
    "dateCreated": "2020-12-11T20:51:15.509Z",
    "backend": "Default",
    "paragraphs": [
        {
            "id": "paragraph_1",
            "input": {"inputType": "MARKDOWN", "inputText": "%md # Title"},
            "output": [{"outputType": "MARKDOWN", "result": "# Title", "executionTime": "0s"}],
        }
    ],
}


def _parse(document, notebook_id=None, log=None) -> UpdateNotebookRequest:
    cursor = DocumentCursor.from_value(document)
    cursor.next_token()
    return UpdateNotebookRequest.parse(cursor, notebook_id, log)


# --- Основные блоки ---
def test_scenario_document_parses_and_serializes_in_field_order() -> None:
    body = '{"id":"nb-1","resource":{"name":"My Notebook","paragraphs":[]}}'

    request = UpdateNotebookRequest.parse(open_cursor(body))

    assert request.notebook_id == "nb-1"
    assert request.notebook == Notebook(name="My Notebook", paragraphs=[])
    document = request.to_document()
    assert list(document) == ["id", "resource"]
    assert document == {"id": "nb-1", "resource": {"name": "My Notebook", "paragraphs": []}}


def test_document_round_trip() -> None:
    request = _parse({"id": "nb-2", "resource": RESOURCE})

    assert _parse(request.to_document()) == request
    assert request.to_document()["resource"] == RESOURCE


def test_stream_round_trip() -> None:
    request = _parse({"id": "nb-3", "resource": RESOURCE})
    buffer = io.BytesIO()

    request.write_to(buffer)
    buffer.seek(0)

    assert UpdateNotebookRequest.from_stream(buffer) == request
    assert buffer.read() == b""


def test_body_id_overrides_hint() -> None:
    request = _parse({"id": "xyz", "resource": {"name": "n"}}, notebook_id="abc")
    assert request.notebook_id == "xyz"


def test_hint_used_when_body_has_no_id() -> None:
    request = _parse({"resource": {"name": "n"}}, notebook_id="abc")
    assert request.notebook_id == "abc"


def test_missing_id_without_hint_fails() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        _parse({"resource": {"name": "n"}})
    assert exc_info.value.field_name == "id"


def test_empty_id_counts_as_missing() -> None:
    with pytest.raises(MissingFieldError):
        _parse({"id": "", "resource": {"name": "n"}})
    with pytest.raises(MissingFieldError):
        _parse({"id": None, "resource": {"name": "n"}})


def test_null_id_keeps_hint() -> None:
    request = _parse({"id": None, "resource": {"name": "n"}}, notebook_id="abc")
    assert request.notebook_id == "abc"


def test_missing_resource_fails() -> None:
    with pytest.raises(MissingFieldError) as exc_info:
        _parse({"id": "nb-1"}, notebook_id="abc")
    assert exc_info.value.field_name == "resource"
    assert str(exc_info.value) == "resource field absent"


def test_unknown_fields_are_skipped() -> None:
    with_extra = _parse({"id": "a", "extra": {"x": 1, "nested": [1, {"y": 2}]}, "resource": {"name": "n"}, "flag": True})
    without_extra = _parse({"id": "a", "resource": {"name": "n"}})

    assert with_extra == without_extra


def test_unknown_field_is_logged(caplog) -> None:
    caplog.set_level(logging.INFO, logger="apps.notebooks.schemas.requests")

    _parse({"id": "a", "resource": {"name": "n"}, "extra": {"x": 1}})

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.endswith(":Skipping Unknown field extra") for message in messages)


def test_injected_logger_receives_skip_events() -> None:
    log = Mock(spec=logging.Logger)

    request = _parse({"id": "a", "resource": {"name": "n"}, "extra": 1, "other": [1, 2]}, log=log)

    assert request.notebook_id == "a"
    assert log.info.call_count == 2
    assert log.info.call_args_list[0].args[2] == "extra"
    assert log.info.call_args_list[1].args[2] == "other"


@pytest.mark.parametrize("body", ['["id", "nb-1"]', '"nb-1"', "42", "null"])
def test_non_object_document_is_malformed(body: str) -> None:
    with pytest.raises(MalformedInputError):
        UpdateNotebookRequest.parse(open_cursor(body), "abc")


def test_cursor_not_advanced_is_malformed() -> None:
    cursor = DocumentCursor.from_text('{"id":"a","resource":{"name":"n"}}')
    with pytest.raises(MalformedInputError):
        UpdateNotebookRequest.parse(cursor)


def test_invalid_json_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        UpdateNotebookRequest.parse(open_cursor('{"id": "a", "resource": '))


def test_invalid_resource_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        _parse({"id": "a", "resource": {"paragraphs": []}})
    with pytest.raises(MalformedInputError):
        _parse({"id": "a", "resource": ["not", "an", "object"]})


def test_structured_id_is_malformed() -> None:
    with pytest.raises(MalformedInputError):
        _parse({"id": {"value": "a"}, "resource": {"name": "n"}})


def test_request_is_immutable_and_valid() -> None:
    request = _parse({"id": "a", "resource": {"name": "n"}})

    assert request.validate() is None
    with pytest.raises(AttributeError):
        request.notebook_id = "b"  # type: ignore[misc]


def test_skip_log_uses_lazy_arguments(caplog) -> None:
    caplog.set_level(logging.INFO, logger="apps.notebooks.schemas.requests")

    _parse({"id": "a", "resource": {"name": "n"}, "extra": 1})

    (record,) = [r for r in caplog.records if "Skipping" in r.msg]
    assert record.msg == "%s:Skipping Unknown field %s"
    assert record.args == (LOG_PREFIX, "extra")
    assert record.event == "notebooks.parse.skip_field"
