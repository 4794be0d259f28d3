import logging
import os

IMPORT_PATH_ENV = "PROTO_LINT_IMPORT_PATH"
LOG_LEVEL_ENV = "PROTO_LINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def get_import_paths() -> list[str]:
    raw = os.getenv(IMPORT_PATH_ENV, "")
    return [p for p in raw.split(os.pathsep) if p]


def get_log_level() -> str:
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level
