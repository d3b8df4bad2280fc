"""Реэкспорт публичного API модуля document."""
# --- Imports ---
from __future__ import annotations

from .cursor import DocumentCursor, Token, ensure_expected_token, open_cursor  # noqa: F401
from .stream import encode_document, read_cursor, write_document  # noqa: F401

__all__ = [
    "DocumentCursor",
    "Token",
    "ensure_expected_token",
    "open_cursor",
    "encode_document",
    "read_cursor",
    "write_document",
]
