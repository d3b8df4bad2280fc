"""Запросы жизненного цикла ноутбука и их кодек.

Каждый запрос умеет:
  - ``parse(cursor)``      : разбор из курсора, стоящего на начале объекта;
  - ``from_stream(stream)``: разбор из бинарной формы (см. services/document/stream.py);
  - ``to_document()``      : документ с фиксированным порядком полей;
  - ``write_to(stream)``   : запись бинарной формы;
  - ``validate()``         : точка расширения для межполевых проверок.

Формат UpdateNotebookRequest::

    {
      "id": "notebookId",
      "resource": { ... см. schemas/notebooks.py ... }
    }

``id`` может прийти из пути URL (``notebook_id``); значение из тела имеет приоритет.
"""
# --- Imports ---
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, BinaryIO, Optional

from ..config import LOG_PREFIX
from ..exceptions import MalformedInputError, MissingFieldError
from ..services.document import DocumentCursor, Token, ensure_expected_token, read_cursor, write_document
from .common import ID_FIELD, RESOURCE_FIELD
from .notebooks import Notebook

logger = logging.getLogger(__name__)


# --- Functions ---
def _iter_fields(cursor: DocumentCursor):
    """Перебирает поля объекта, оставляя курсор на значении каждого поля."""
    ensure_expected_token(Token.START_OBJECT, cursor)
    while True:
        token = cursor.next_token()
        if token is Token.END_OBJECT:
            return
        if token is not Token.FIELD_NAME:
            raise MalformedInputError("Unexpected end of document" if token is None else f"Unexpected token [{token.value}]")
        field_name = cursor.current_name()
        cursor.next_token()
        yield field_name


def _read_id(cursor: DocumentCursor, default: Optional[str]) -> Optional[str]:
    # null в теле не перекрывает id из пути
    if cursor.current_token() is Token.VALUE_NULL:
        return default
    return cursor.text()


def _skip_unknown(cursor: DocumentCursor, field_name: str, log: logging.Logger) -> None:
    cursor.skip_children()
    log.info("%s:Skipping Unknown field %s", LOG_PREFIX, field_name, extra={"event": "notebooks.parse.skip_field"})


def _require_id(notebook_id: Optional[str]) -> str:
    if not notebook_id:
        raise MissingFieldError(ID_FIELD)
    return notebook_id


# --- Models / Classes ---
@dataclass(frozen=True)
class CreateNotebookRequest:
    notebook: Notebook

    @classmethod
    def parse(cls, cursor: DocumentCursor, log: Optional[logging.Logger] = None) -> "CreateNotebookRequest":
        log = log if log is not None else logger
        notebook: Optional[Notebook] = None
        for field_name in _iter_fields(cursor):
            if field_name == RESOURCE_FIELD:
                notebook = Notebook.parse(cursor)
            else:
                _skip_unknown(cursor, field_name, log)
        if notebook is None:
            raise MissingFieldError(RESOURCE_FIELD)
        return cls(notebook=notebook)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "CreateNotebookRequest":
        return cls.parse(read_cursor(stream))

    def to_document(self) -> dict[str, Any]:
        return {RESOURCE_FIELD: self.notebook.to_document()}

    def write_to(self, stream: BinaryIO) -> None:
        write_document(stream, self.to_document())

    def validate(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class UpdateNotebookRequest:
    """Запрос на замену содержимого существующего ноутбука."""

    notebook_id: str
    notebook: Notebook

    @classmethod
    def parse(
        cls,
        cursor: DocumentCursor,
        notebook_id: Optional[str] = None,
        log: Optional[logging.Logger] = None,
    ) -> "UpdateNotebookRequest":
        """Разбирает запрос из курсора.

        ``notebook_id``: значение по умолчанию (обычно из пути URL). Поле ``id``
        из тела его перезаписывает без проверки на совпадение. Неизвестные поля
        пропускаются и логируются через ``log``.
        """
        log = log if log is not None else logger
        notebook: Optional[Notebook] = None
        for field_name in _iter_fields(cursor):
            if field_name == ID_FIELD:
                notebook_id = _read_id(cursor, notebook_id)
            elif field_name == RESOURCE_FIELD:
                notebook = Notebook.parse(cursor)
            else:
                _skip_unknown(cursor, field_name, log)
        notebook_id = _require_id(notebook_id)
        if notebook is None:
            raise MissingFieldError(RESOURCE_FIELD)
        return cls(notebook_id=notebook_id, notebook=notebook)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> "UpdateNotebookRequest":
        return cls.parse(read_cursor(stream))

    def to_document(self) -> dict[str, Any]:
        return {
            ID_FIELD: self.notebook_id,
            RESOURCE_FIELD: self.notebook.to_document(),
        }

    def write_to(self, stream: BinaryIO) -> None:
        write_document(stream, self.to_document())

    def validate(self) -> Optional[str]:
        # Все инварианты проверяются при разборе
        return None


@dataclass(frozen=True)
class _NotebookIdRequest:
    notebook_id: str

    def __post_init__(self) -> None:
        _require_id(self.notebook_id)

    @classmethod
    def parse(cls, cursor: DocumentCursor, notebook_id: Optional[str] = None, log: Optional[logging.Logger] = None):
        log = log if log is not None else logger
        for field_name in _iter_fields(cursor):
            if field_name == ID_FIELD:
                notebook_id = _read_id(cursor, notebook_id)
            else:
                _skip_unknown(cursor, field_name, log)
        return cls(notebook_id=_require_id(notebook_id))

    @classmethod
    def from_stream(cls, stream: BinaryIO):
        return cls.parse(read_cursor(stream))

    def to_document(self) -> dict[str, Any]:
        return {ID_FIELD: self.notebook_id}

    def write_to(self, stream: BinaryIO) -> None:
        write_document(stream, self.to_document())

    def validate(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class GetNotebookRequest(_NotebookIdRequest):
    pass


@dataclass(frozen=True)
class DeleteNotebookRequest(_NotebookIdRequest):
    pass
