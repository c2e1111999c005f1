import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %d", name, raw, default)
        return default


def _level_env(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if isinstance(logging.getLevelName(raw), int):
        return raw
    logger.warning("Unknown log level for %s=%r, using %s", name, raw, default)
    return default


# Gradio server binding
HOST = os.getenv("SCHEMA_BUILDER_HOST", "127.0.0.1")
PORT = _int_env("SCHEMA_BUILDER_PORT", 7860)

LOG_LEVEL = _level_env("SCHEMA_BUILDER_LOG_LEVEL", "INFO")  # DEBUG | INFO | WARNING

# Indentation of the "JSON Output" panel
JSON_INDENT = _int_env("SCHEMA_BUILDER_JSON_INDENT", 2)
