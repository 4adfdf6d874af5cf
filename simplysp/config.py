from __future__ import annotations
import os
from pathlib import Path

VERSION = '0.0.0.0.1'

_DEFAULT_HISTORY_PATH = Path.home() / '.simplysp_history'
_DEFAULT_PROMPT = 'simplysp> '


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_history_path() -> Path:
    return path_from_env('SIMPLYSP_HISTORY_PATH', _DEFAULT_HISTORY_PATH)


def get_prompt() -> str:
    return os.environ.get('SIMPLYSP_PROMPT') or _DEFAULT_PROMPT


def banner() -> list[str]:
    return [f'simplysp version {VERSION}', 'Press Ctrl+c to Exit', '']
