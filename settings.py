from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ADMIN_PASSWORD = "default_39_char_password_for_dvx_studio_12345"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _project_root() -> Path:
    # settings.py lives at the project root
    return Path(__file__).resolve().parent


@dataclass(frozen=True)
class Settings:
    # Admin gate
    admin_password: str

    # Storage
    data_dir: Path

    # Access log
    log_dir: Path
    access_log_to_file: bool

    # HTTP
    cors_allow_origins: list[str]
    port: int


def get_settings() -> Settings:
    # NOTE: default is insecure; set ADMIN_PASSWORD in production
    admin_password = os.getenv("ADMIN_PASSWORD", DEFAULT_ADMIN_PASSWORD)

    root = _project_root()
    data_dir = Path(os.getenv("DATA_DIR", str(root / "data")))
    log_dir = Path(os.getenv("LOG_DIR", str(root / "logs")))
    access_log_to_file = _env_bool("ACCESS_LOG_TO_FILE", True)

    cors_allow_origins = _env_list("CORS_ALLOW_ORIGINS", ["*"])
    port = int(os.getenv("PORT", "3000"))

    return Settings(
        admin_password=admin_password,
        data_dir=data_dir,
        log_dir=log_dir,
        access_log_to_file=access_log_to_file,
        cors_allow_origins=cors_allow_origins,
        port=port,
    )
