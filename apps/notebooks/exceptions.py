"""Иерархия ошибок API ноутбуков.

Каждый класс несёт ``status_code`` и ``error_code``; глобальный обработчик
в ``main.py`` превращает их в единообразный JSON-ответ.
"""
# --- Imports ---
from __future__ import annotations


# --- Models / Classes ---
class NotebooksAPIError(Exception):
    """Base exception for all notebooks API errors."""

    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedInputError(NotebooksAPIError):
    """Input is not a well-formed document where one is expected."""

    status_code = 400
    error_code = "malformed_input"


class MissingFieldError(NotebooksAPIError):
    """A required field was absent after the whole object was consumed."""

    status_code = 400
    error_code = "missing_field"

    def __init__(self, field_name: str) -> None:
        super().__init__(f"{field_name} field absent")
        self.field_name = field_name


class InvalidRequestError(NotebooksAPIError):
    status_code = 400
    error_code = "invalid_request"


class NotebookNotFoundError(NotebooksAPIError):
    status_code = 404
    error_code = "notebook_not_found"

    def __init__(self, notebook_id: str) -> None:
        super().__init__(f"Notebook {notebook_id} not found")
        self.notebook_id = notebook_id
