"""Общие утилиты и константы полей, переиспользуемые в нескольких схемах."""
# --- Imports ---
from __future__ import annotations

from datetime import datetime, timezone

# --- Имена полей документа (регистрозависимые) ---
ID_FIELD = "id"
RESOURCE_FIELD = "resource"
NOTEBOOK_DETAILS_FIELD = "notebookDetails"
CREATED_TIME_FIELD = "createdTime"
LAST_UPDATED_TIME_FIELD = "lastUpdatedTime"


# --- Functions ---
def now_iso() -> str:
    """Возвращает текущее время в формате ISO 8601 (UTC)."""
    return datetime.now(timezone.utc).isoformat()
