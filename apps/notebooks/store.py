"""In-memory индекс ноутбуков, с которым работает слой действий."""

# --- Imports ---
from __future__ import annotations

import threading
from uuid import uuid4

from .schemas import Notebook, NotebookDetails, now_iso


# --- Основные блоки ---
class InMemoryNotebookIndex:
    def __init__(self) -> None:
        self._items: dict[str, NotebookDetails] = {}
        self._lock = threading.Lock()

    def create(self, notebook: Notebook) -> str:
        notebook_id = str(uuid4())
        ts = now_iso()
        with self._lock:
            self._items[notebook_id] = NotebookDetails(
                notebook_id=notebook_id,
                created_time=ts,
                last_updated_time=ts,
                notebook=notebook,
            )
        return notebook_id

    def get(self, notebook_id: str) -> NotebookDetails | None:
        with self._lock:
            return self._items.get(notebook_id)

    def update(self, notebook_id: str, notebook: Notebook) -> bool:
        with self._lock:
            current = self._items.get(notebook_id)
            if current is None:
                return False
            self._items[notebook_id] = NotebookDetails(
                notebook_id=notebook_id,
                created_time=current.created_time,
                last_updated_time=now_iso(),
                notebook=notebook,
            )
            return True

    def delete(self, notebook_id: str) -> bool:
        with self._lock:
            return self._items.pop(notebook_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


index = InMemoryNotebookIndex()
