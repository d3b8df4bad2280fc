"""Runtime configuration for the notebooks API."""

from pathlib import Path
import os

ROOT_DIR = Path(__file__).resolve().parents[2]
DATA_DIR = ROOT_DIR / "data"
LOGS_DIR = Path(os.getenv("NOTEBOOKS_LOGS_DIR", str(DATA_DIR / "logs")))

BASE_NOTEBOOKS_URI = os.getenv("BASE_NOTEBOOKS_URI", "/_opendistro/_notebooks").rstrip("/")
NOTEBOOKS_URL = f"{BASE_NOTEBOOKS_URI}/notebook"

LOG_PREFIX = os.getenv("NOTEBOOKS_LOG_PREFIX", "notebooks")
LOG_LEVEL = os.getenv("NOTEBOOKS_LOG_LEVEL", "INFO").strip().upper()
LOG_TO_FILE = os.getenv("NOTEBOOKS_LOG_TO_FILE", "1").strip().lower() not in {"0", "false", "no"}

MAX_DOCUMENT_MB = 10
MAX_DOCUMENT_BYTES = int(os.getenv("NOTEBOOKS_MAX_DOCUMENT_BYTES", str(MAX_DOCUMENT_MB * 1024 * 1024)))
