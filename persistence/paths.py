from __future__ import annotations

from pathlib import Path

from settings import get_settings


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def data_dir() -> Path:
    return ensure_dir(get_settings().data_dir)


def logs_dir() -> Path:
    return ensure_dir(get_settings().log_dir)
