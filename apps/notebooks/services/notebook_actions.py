"""Слой действий: выполняет разобранные запросы над индексом ноутбуков."""
# --- Imports ---
from __future__ import annotations

import logging

from ..exceptions import InvalidRequestError, NotebookNotFoundError
from ..schemas import (
    CreateNotebookRequest,
    CreateNotebookResponse,
    DeleteNotebookRequest,
    DeleteNotebookResponse,
    GetNotebookRequest,
    GetNotebookResponse,
    UpdateNotebookRequest,
    UpdateNotebookResponse,
)
from ..store import InMemoryNotebookIndex

logger = logging.getLogger(__name__)


# --- Models / Classes ---
class NotebookActions:
    def __init__(self, index: InMemoryNotebookIndex) -> None:
        self.index = index

    @staticmethod
    def _validate(request) -> None:
        error = request.validate()
        if error is not None:
            raise InvalidRequestError(error)

    def create(self, request: CreateNotebookRequest) -> CreateNotebookResponse:
        self._validate(request)
        notebook_id = self.index.create(request.notebook)
        logger.info("Notebook created", extra={"event": "notebooks.create", "details": f"id={notebook_id}"})
        return CreateNotebookResponse(notebook_id=notebook_id)

    def update(self, request: UpdateNotebookRequest) -> UpdateNotebookResponse:
        self._validate(request)
        if not self.index.update(request.notebook_id, request.notebook):
            raise NotebookNotFoundError(request.notebook_id)
        logger.info("Notebook updated", extra={"event": "notebooks.update", "details": f"id={request.notebook_id}"})
        return UpdateNotebookResponse(notebook_id=request.notebook_id)

    def get(self, request: GetNotebookRequest) -> GetNotebookResponse:
        self._validate(request)
        details = self.index.get(request.notebook_id)
        if details is None:
            raise NotebookNotFoundError(request.notebook_id)
        logger.info("Notebook fetched", extra={"event": "notebooks.get", "details": f"id={request.notebook_id}"})
        return GetNotebookResponse(details=details)

    def delete(self, request: DeleteNotebookRequest) -> DeleteNotebookResponse:
        self._validate(request)
        if not self.index.delete(request.notebook_id):
            raise NotebookNotFoundError(request.notebook_id)
        logger.info("Notebook deleted", extra={"event": "notebooks.delete", "details": f"id={request.notebook_id}"})
        return DeleteNotebookResponse(notebook_id=request.notebook_id)
