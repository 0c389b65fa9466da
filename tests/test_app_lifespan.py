from fastapi.testclient import TestClient

from recipease.app import main


def test_startup_creates_tables(monkeypatch):
    calls = []
    monkeypatch.setattr(main, "init_db", lambda: calls.append("init_db"))

    with TestClient(main.create_app()) as client:
        assert calls == ["init_db"]
        assert client.get("/health").json() == {"status": "ok"}
