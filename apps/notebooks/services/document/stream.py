"""Бинарная форма документа для передачи между узлами.

Кадр: 4 байта длины (big-endian, без знака) + документ в компактном UTF-8 JSON.
"""
# --- Imports ---
from __future__ import annotations

import json
import struct
from typing import Any, BinaryIO

from ...config import MAX_DOCUMENT_BYTES
from ...exceptions import MalformedInputError
from .cursor import DocumentCursor

_LENGTH = struct.Struct(">I")


# --- Functions ---
def encode_document(document: dict[str, Any]) -> bytes:
    payload = json.dumps(document, ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
    return _LENGTH.pack(len(payload)) + payload


def write_document(output: BinaryIO, document: dict[str, Any]) -> None:
    output.write(encode_document(document))


def _read_exact(input: BinaryIO, size: int) -> bytes:
    data = input.read(size)
    if data is None or len(data) < size:
        raise MalformedInputError(
            f"Premature end of stream: expected {size} bytes, got {0 if data is None else len(data)}"
        )
    return data


def read_cursor(input: BinaryIO, max_bytes: int = MAX_DOCUMENT_BYTES) -> DocumentCursor:
    """Читает один кадр и возвращает курсор, продвинутый к первому токену документа."""
    (length,) = _LENGTH.unpack(_read_exact(input, _LENGTH.size))
    if length > max_bytes:
        raise MalformedInputError(f"Embedded document of {length} bytes exceeds limit of {max_bytes}")
    cursor = DocumentCursor.from_text(_read_exact(input, length))
    cursor.next_token()
    return cursor
