import json
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent


def load_json(name: str):
    path = BASE_DIR / name
    if not path.exists():
        return {}
    raw = path.read_text(encoding="utf-8").strip()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return {}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


GRADE_ENVELOPES = load_json("grade_envelopes.json")
QUESTION_SCHEMA = load_json("question_schema.json")

LOG_LEVEL = os.getenv("MATHIFY_LOG_LEVEL", "INFO").upper()
DEFAULT_QUESTION_COUNT = _env_int("MATHIFY_DEFAULT_QUESTION_COUNT", 10)
MAX_QUESTION_COUNT = _env_int("MATHIFY_MAX_QUESTION_COUNT", 50)
API_URL = os.getenv("MATHIFY_API_URL", "http://127.0.0.1:8000")

VERSION = "0.3.0"


def configure_logging(level: str = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
