from __future__ import annotations

import importlib
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

ADMIN_PASSWORD = "dvx-studio-admin-password-for-tests-039"


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Redirect data/log directories to a temp project directory so tests never touch real ./data.
    """
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("ACCESS_LOG_TO_FILE", "0")
    monkeypatch.setenv("ADMIN_PASSWORD", ADMIN_PASSWORD)
    return tmp_path


@pytest.fixture
def data_path(sandbox_project: Path) -> Path:
    p = sandbox_project / "data"
    p.mkdir(parents=True, exist_ok=True)
    return p


@pytest.fixture
def reload_endpoints(sandbox_project: Path) -> None:
    """
    Endpoints create repo singletons at import time; reload after sandboxing paths.
    """
    import endpoints.stores as stores

    importlib.reload(stores)


@pytest.fixture
def client(reload_endpoints):
    from fastapi.testclient import TestClient

    import app as app_module

    # Entering the client runs the lifespan, which writes the default documents.
    with TestClient(app_module.create_app()) as c:
        yield c


@pytest.fixture(autouse=True)
def close_access_log_handlers():
    """
    create_app() may attach a FileHandler to the process-wide `access` logger;
    drop it after each test so temp log dirs do not leak between tests.
    """
    import logging

    yield
    access = logging.getLogger("access")
    for handler in list(access.handlers):
        if isinstance(handler, logging.FileHandler):
            access.removeHandler(handler)
            handler.close()
