"""Точка входа FastAPI-приложения и регистрация middleware/роутеров."""

# --- Imports ---
import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .exceptions import NotebooksAPIError
from .logging_setup import setup_logging
from .routers import notebooks

app = FastAPI(title="Notebooks API")
logger = logging.getLogger(__name__)

app.include_router(notebooks.router)


# --- Основные блоки ---
@app.on_event("startup")
def on_startup() -> None:
    log_file = setup_logging()
    logger.info(
        "Application startup completed",
        extra={"event": "app.ready", "details": f"log_file={log_file or '-'}"},
    )


@app.exception_handler(NotebooksAPIError)
async def notebooks_api_error_handler(request: Request, exc: NotebooksAPIError) -> JSONResponse:
    logger.warning(
        exc.message,
        extra={
            "event": "http.request.error",
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "details": f"code={exc.error_code}",
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": {"code": exc.error_code, "message": exc.message}},
    )


@app.middleware("http")
async def http_logging_middleware(request: Request, call_next):
    started = time.perf_counter()
    client_ip = request.client.host if request.client else "-"
    logger.info(
        "HTTP request started",
        extra={
            "event": "http.request.start",
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip,
        },
    )
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "HTTP request completed",
        extra={
            "event": "http.request.end",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
            "client_ip": client_ip,
        },
    )
    return response


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
