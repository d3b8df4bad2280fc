"""Реэкспорт схем и кодеков запросов/ответов ноутбуков."""
# --- Imports ---
from __future__ import annotations

from .common import ID_FIELD, RESOURCE_FIELD, now_iso  # noqa: F401
from .notebooks import Notebook, Paragraph, ParagraphInput, ParagraphOutput  # noqa: F401
from .requests import (  # noqa: F401
    CreateNotebookRequest,
    DeleteNotebookRequest,
    GetNotebookRequest,
    UpdateNotebookRequest,
)
from .responses import (  # noqa: F401
    CreateNotebookResponse,
    DeleteNotebookResponse,
    GetNotebookResponse,
    NotebookDetails,
    UpdateNotebookResponse,
)
