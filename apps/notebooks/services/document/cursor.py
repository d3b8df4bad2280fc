"""Курсор по JSON-документу: потоковое чтение токен за токеном.

Парсеры запросов работают с документом как с последовательностью токенов
(начало/конец объекта, имя поля, значение), а не с готовым словарём.
Так вложенные объекты разбираются своими парсерами, а неизвестные поля
пропускаются целиком через ``skip_children``.
"""
# --- Imports ---
from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from ...exceptions import MalformedInputError


# --- Models / Classes ---
class Token(Enum):
    START_OBJECT = "START_OBJECT"
    END_OBJECT = "END_OBJECT"
    START_ARRAY = "START_ARRAY"
    END_ARRAY = "END_ARRAY"
    FIELD_NAME = "FIELD_NAME"
    VALUE_STRING = "VALUE_STRING"
    VALUE_NUMBER = "VALUE_NUMBER"
    VALUE_BOOLEAN = "VALUE_BOOLEAN"
    VALUE_NULL = "VALUE_NULL"


_START_TOKENS = {Token.START_OBJECT, Token.START_ARRAY}
_END_TOKENS = {Token.END_OBJECT, Token.END_ARRAY}


def _events(value: Any) -> Iterator[tuple[Token, Any]]:
    if isinstance(value, dict):
        yield Token.START_OBJECT, None
        for key, item in value.items():
            yield Token.FIELD_NAME, str(key)
            yield from _events(item)
        yield Token.END_OBJECT, None
    elif isinstance(value, (list, tuple)):
        yield Token.START_ARRAY, None
        for item in value:
            yield from _events(item)
        yield Token.END_ARRAY, None
    elif isinstance(value, str):
        yield Token.VALUE_STRING, value
    # bool is a subclass of int, check it first
    elif isinstance(value, bool):
        yield Token.VALUE_BOOLEAN, value
    elif isinstance(value, int):
        yield Token.VALUE_NUMBER, value
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise MalformedInputError(f"Non-finite number {value!r} is not valid JSON")
        yield Token.VALUE_NUMBER, value
    elif value is None:
        yield Token.VALUE_NULL, None
    else:
        raise MalformedInputError(f"Unsupported document value of type {type(value).__name__}")


class DocumentCursor:
    """Позиция чтения в документе. Новый курсор стоит *до* первого токена."""

    def __init__(self, events: Iterable[tuple[Token, Any]]) -> None:
        self._events = iter(events)
        self._token: Optional[Token] = None
        self._value: Any = None
        # имя текущего поля для каждого открытого контейнера
        self._names: list[Optional[str]] = []

    @classmethod
    def from_value(cls, value: Any) -> "DocumentCursor":
        return cls(_events(value))

    @classmethod
    def from_text(cls, text: str | bytes) -> "DocumentCursor":
        if isinstance(text, (bytes, bytearray)):
            try:
                text = bytes(text).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MalformedInputError(f"Document is not valid UTF-8: {exc}") from exc
        try:
            value = json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
        except json.JSONDecodeError as exc:
            raise MalformedInputError(f"Failed to parse document: {exc.msg} at position {exc.pos}") from exc
        except RecursionError as exc:
            raise MalformedInputError("Document nesting too deep") from exc
        except ValueError as exc:
            raise MalformedInputError(f"Failed to parse document: {exc}") from exc
        return cls.from_value(value)

    def current_token(self) -> Optional[Token]:
        return self._token

    def next_token(self) -> Optional[Token]:
        if self._token in _END_TOKENS:
            self._names.pop()
        try:
            self._token, self._value = next(self._events)
        except StopIteration:
            self._token, self._value = None, None
            return None
        except RecursionError as exc:
            raise MalformedInputError("Document nesting too deep") from exc
        if self._token in _START_TOKENS:
            self._names.append(None)
        elif self._token is Token.FIELD_NAME:
            self._names[-1] = self._value
        return self._token

    def current_name(self) -> Optional[str]:
        """Имя поля, к которому относится текущий токен (None вне объекта)."""
        # контейнер текущего start/end-токена ещё на стеке
        if self._token in _START_TOKENS or self._token in _END_TOKENS:
            return self._names[-2] if len(self._names) > 1 else None
        return self._names[-1] if self._names else None

    def text(self) -> str:
        if self._token is Token.VALUE_STRING or self._token is Token.FIELD_NAME:
            return self._value
        if self._token is Token.VALUE_BOOLEAN:
            return "true" if self._value else "false"
        if self._token is Token.VALUE_NUMBER:
            return str(self._value)
        raise MalformedInputError(f"Expected a scalar value but found [{_token_name(self._token)}]")

    def skip_children(self) -> None:
        """На start-токене пропускает поддерево целиком, оставляя курсор на парном end-токене."""
        if self._token not in _START_TOKENS:
            return
        depth = 1
        while depth:
            token = self.next_token()
            if token is None:
                raise MalformedInputError("Unexpected end of document")
            if token in _START_TOKENS:
                depth += 1
            elif token in _END_TOKENS:
                depth -= 1

    def read_value(self) -> Any:
        """Материализует текущее поддерево в Python-значение."""
        try:
            return self._read_subtree()
        except RecursionError as exc:
            raise MalformedInputError("Document nesting too deep") from exc

    def _read_subtree(self) -> Any:
        token = self._token
        if token is Token.START_OBJECT:
            result: dict[str, Any] = {}
            while self._advance() is not Token.END_OBJECT:
                name = self._value
                self._advance()
                result[name] = self._read_subtree()
            return result
        if token is Token.START_ARRAY:
            items: list[Any] = []
            while self._advance() is not Token.END_ARRAY:
                items.append(self._read_subtree())
            return items
        if token in (Token.VALUE_STRING, Token.VALUE_NUMBER, Token.VALUE_BOOLEAN, Token.VALUE_NULL):
            return self._value
        raise MalformedInputError(f"Expected a value but found [{_token_name(token)}]")

    def _advance(self) -> Token:
        token = self.next_token()
        if token is None:
            raise MalformedInputError("Unexpected end of document")
        return token


# --- Functions ---
def _reject_constant(name: str) -> Any:
    raise MalformedInputError(f"{name} is not valid JSON")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise MalformedInputError(f"Number {text} is out of range")
    return value


def _token_name(token: Optional[Token]) -> str:
    return token.value if token is not None else "END_OF_DOCUMENT"


def ensure_expected_token(expected: Token, cursor: DocumentCursor) -> None:
    actual = cursor.current_token()
    if actual is not expected:
        raise MalformedInputError(
            f"Failed to parse object: expecting token of type [{expected.value}] but found [{_token_name(actual)}]"
        )


def open_cursor(body: str | bytes) -> DocumentCursor:
    """Курсор по телу запроса, уже продвинутый к первому токену."""
    cursor = DocumentCursor.from_text(body)
    cursor.next_token()
    return cursor
