from __future__ import annotations

from fastapi.testclient import TestClient

from code_sandbox.config import Settings
from code_sandbox.main import create_app
from tests.conftest import FakeRuntime


def test_health_returns_ok(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.text == "ok"
    assert resp.headers["content-type"].startswith("text/plain")


def test_health_ignores_runtime_state(settings: Settings) -> None:
    runtime = FakeRuntime(error="Cannot connect to the Docker daemon")
    client = TestClient(create_app(runtime, settings))

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.text == "ok"
    assert runtime.list_calls == 0
    assert runtime.create_calls == []


def test_runtime_closed_on_shutdown(settings: Settings) -> None:
    runtime = FakeRuntime()
    with TestClient(create_app(runtime, settings)) as client:
        assert client.get("/health").status_code == 200
        assert runtime.closed is False
    assert runtime.closed is True
