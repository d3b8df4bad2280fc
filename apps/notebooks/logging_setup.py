"""Настройка структуры и вывода логирования.

Все записи идут в консоль и (если не отключено через ``NOTEBOOKS_LOG_TO_FILE``)
в файл ``notebooks_<SESSION_ID>.log`` с ротацией каждые 4 часа.
Файлы хранятся в data/logs/sessions/.
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from .config import LOG_LEVEL, LOG_TO_FILE, LOGS_DIR

# Идентификатор сессии: дата и время запуска (один раз при импорте)
SESSION_ID: str = datetime.now().strftime("%Y-%m-%d_%H-%M")

SESSIONS_DIR: Path = LOGS_DIR / "sessions"
APP_LOG_FILE: Path = SESSIONS_DIR / f"notebooks_{SESSION_ID}.log"


# --- Форматтеры ---

class SafeExtraFormatter(logging.Formatter):
    """Formatter со стабильными extra-полями (подставляет '-' если поле отсутствует)."""

    _EXTRA_FIELDS = ("client_ip", "method", "path", "status_code", "duration_ms", "event", "details")

    def format(self, record: logging.LogRecord) -> str:
        for field in self._EXTRA_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return super().format(record)


APP_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    " | event=%(event)s | method=%(method)s | path=%(path)s"
    " | status=%(status_code)s | duration_ms=%(duration_ms)s"
    " | ip=%(client_ip)s | details=%(details)s"
)


# --- Настройка ---

_CONFIGURED = False


def setup_logging() -> Path | None:
    """Настраивает логирование и возвращает путь к файлу лога (None, если файл отключён)."""
    global _CONFIGURED
    log_file = APP_LOG_FILE if LOG_TO_FILE else None
    if _CONFIGURED:
        return log_file

    root_logger = logging.getLogger()
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    root_logger.setLevel(level if isinstance(level, int) else logging.INFO)

    # Убрать все существующие хендлеры
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = SafeExtraFormatter(APP_FORMAT)

    if log_file is not None:
        SESSIONS_DIR.mkdir(parents=True, exist_ok=True)
        # Ротация каждые 4 часа, хранить до 12 файлов (48 ч непрерывной работы)
        file_handler = TimedRotatingFileHandler(
            log_file, when="H", interval=4, backupCount=12, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    _CONFIGURED = True
    root_logger.info(
        "Logging configured",
        extra={
            "event": "app.startup",
            "details": f"session={SESSION_ID} | log_file={log_file or '-'} | level={LOG_LEVEL}",
        },
    )
    return log_file
