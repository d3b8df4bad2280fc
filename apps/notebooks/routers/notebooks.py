"""Роуты жизненного цикла ноутбуков.

Тело запроса читается как есть и разбирается курсором (schemas/requests.py),
а не через pydantic-биндинг FastAPI: так неизвестные поля пропускаются
с записью в лог, а id из пути служит значением по умолчанию.
"""

# --- Imports ---
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..config import NOTEBOOKS_URL
from ..schemas import CreateNotebookRequest, DeleteNotebookRequest, GetNotebookRequest, UpdateNotebookRequest
from ..services.document import open_cursor
from ..services.notebook_actions import NotebookActions
from ..store import index

router = APIRouter(prefix=NOTEBOOKS_URL, tags=["notebooks"])
actions = NotebookActions(index)


# --- Основные блоки ---
@router.post("")
async def create_notebook(request: Request) -> JSONResponse:
    """Request body: CreateNotebookRequest. Response body: CreateNotebookResponse."""
    payload = CreateNotebookRequest.parse(open_cursor(await request.body()))
    return JSONResponse(actions.create(payload).to_document())


@router.put("/{notebook_id}")
async def update_notebook(notebook_id: str, request: Request) -> JSONResponse:
    """Request body: UpdateNotebookRequest. Response body: UpdateNotebookResponse."""
    payload = UpdateNotebookRequest.parse(open_cursor(await request.body()), notebook_id)
    return JSONResponse(actions.update(payload).to_document())


@router.get("/{notebook_id}")
def get_notebook(notebook_id: str) -> JSONResponse:
    return JSONResponse(actions.get(GetNotebookRequest(notebook_id)).to_document())


@router.delete("/{notebook_id}")
def delete_notebook(notebook_id: str) -> JSONResponse:
    return JSONResponse(actions.delete(DeleteNotebookRequest(notebook_id)).to_document())
