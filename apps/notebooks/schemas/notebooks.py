"""Pydantic-схемы содержимого ноутбука (resource в запросах)."""
# --- Imports ---
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import MalformedInputError
from ..services.document import DocumentCursor, Token, ensure_expected_token


# --- Models / Classes ---
class _DocumentModel(BaseModel):
    # Незнакомые поля внутри определения игнорируются (совместимость вперёд)
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ParagraphInput(_DocumentModel):
    input_type: str = Field(alias="inputType")
    input_text: str = Field(default="", alias="inputText")


class ParagraphOutput(_DocumentModel):
    output_type: str = Field(alias="outputType")
    result: str = ""
    execution_time: str | None = Field(default=None, alias="executionTime")


class Paragraph(_DocumentModel):
    id: str | None = None
    date_created: str | None = Field(default=None, alias="dateCreated")
    date_modified: str | None = Field(default=None, alias="dateModified")
    input: ParagraphInput | None = None
    output: list[ParagraphOutput] = Field(default_factory=list)


class Notebook(_DocumentModel):
    """Определение ноутбука: имя, служебные даты, бэкенд и список параграфов."""

    name: str
    date_created: str | None = Field(default=None, alias="dateCreated")
    date_modified: str | None = Field(default=None, alias="dateModified")
    backend: str | None = None
    paragraphs: list[Paragraph] = Field(default_factory=list)

    @classmethod
    def parse(cls, cursor: DocumentCursor) -> "Notebook":
        """Разбирает ровно один объект, на начале которого стоит курсор."""
        ensure_expected_token(Token.START_OBJECT, cursor)
        raw = cursor.read_value()
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise MalformedInputError(f"Invalid notebook definition: {exc.errors()[0]['msg']}") from exc

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
