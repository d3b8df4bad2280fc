"""Ответы жизненного цикла ноутбука."""
# --- Imports ---
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO

from ..services.document import write_document
from .common import CREATED_TIME_FIELD, ID_FIELD, LAST_UPDATED_TIME_FIELD, NOTEBOOK_DETAILS_FIELD, RESOURCE_FIELD
from .notebooks import Notebook


# --- Models / Classes ---
@dataclass(frozen=True)
class NotebookDetails:
    """Сохранённый ноутбук вместе со служебными метками времени."""

    notebook_id: str
    created_time: str
    last_updated_time: str
    notebook: Notebook

    def to_document(self) -> dict[str, Any]:
        return {
            ID_FIELD: self.notebook_id,
            CREATED_TIME_FIELD: self.created_time,
            LAST_UPDATED_TIME_FIELD: self.last_updated_time,
            RESOURCE_FIELD: self.notebook.to_document(),
        }


@dataclass(frozen=True)
class _NotebookIdResponse:
    notebook_id: str

    def to_document(self) -> dict[str, Any]:
        return {ID_FIELD: self.notebook_id}

    def write_to(self, stream: BinaryIO) -> None:
        write_document(stream, self.to_document())


@dataclass(frozen=True)
class CreateNotebookResponse(_NotebookIdResponse):
    pass


@dataclass(frozen=True)
class UpdateNotebookResponse(_NotebookIdResponse):
    pass


@dataclass(frozen=True)
class DeleteNotebookResponse(_NotebookIdResponse):
    pass


@dataclass(frozen=True)
class GetNotebookResponse:
    details: NotebookDetails

    def to_document(self) -> dict[str, Any]:
        return {NOTEBOOK_DETAILS_FIELD: self.details.to_document()}

    def write_to(self, stream: BinaryIO) -> None:
        write_document(stream, self.to_document())
