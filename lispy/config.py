from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE = _LISPY_DIR / 'prelude' / 'core.lspy'
_DEFAULT_HISTORY_FILE = Path.home() / '.lispy_history'
_DEFAULT_PROMPT = 'lispy> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_prelude_path() -> Path:
    return path_from_env('LISPY_PRELUDE_PATH', _DEFAULT_PRELUDE)


def get_history_file() -> Path:
    return path_from_env('LISPY_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    level = os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    # unknown names map to a 'Level X' string rather than an int
    if not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level
