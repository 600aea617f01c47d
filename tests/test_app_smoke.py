from __future__ import annotations


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["service"] == "DVX Studio API"
    assert body["version"] == "1.0.0"
    assert body["timestamp"].endswith("Z")
    assert body["uptime"] >= 0


def test_startup_writes_default_documents(client, data_path):
    for name in ("posts", "orders", "settings"):
        assert (data_path / f"{name}.json").exists()

    r = client.get("/api/data")
    assert r.status_code == 200
    data = r.json()
    assert [p["id"] for p in data["posts"]["posts"]] == [1, 2, 3]
    assert data["orders"] == {"orders": []}
    assert data["settings"]["discordLink"] == "https://discord.gg/example"


def test_unknown_route_lists_endpoints(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    body = r.json()
    assert body["error"] == "Не найдено"
    assert "/api/nope" in body["message"]
    assert "GET  /api/health" in body["availableEndpoints"]
    assert len(body["availableEndpoints"]) == 12


def test_cors_header_present(client):
    r = client.get("/api/health", headers={"Origin": "https://example.com"})
    assert r.headers.get("access-control-allow-origin") == "*"


def test_access_log_written_to_file(reload_endpoints, sandbox_project, monkeypatch):
    from fastapi.testclient import TestClient

    import app as app_module

    monkeypatch.setenv("ACCESS_LOG_TO_FILE", "1")
    TestClient(app_module.create_app()).get("/api/posts", params={"category": "design"})
    log = (sandbox_project / "logs" / "access.log").read_text(encoding="utf-8")
    assert "GET /api/posts?category=design | IP:" in log


def test_new_log_dir_replaces_access_log_handler(reload_endpoints, sandbox_project, monkeypatch):
    import logging

    import app as app_module

    monkeypatch.setenv("ACCESS_LOG_TO_FILE", "1")
    monkeypatch.setenv("LOG_DIR", str(sandbox_project / "logs-a"))
    app_module.create_app()
    app_module.create_app()
    monkeypatch.setenv("LOG_DIR", str(sandbox_project / "logs-b"))
    app_module.create_app()

    file_handlers = [h for h in logging.getLogger("access").handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str((sandbox_project / "logs-b" / "access.log").resolve())
