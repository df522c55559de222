from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from code_sandbox.config import Settings
from code_sandbox.errors import RuntimeCallError
from code_sandbox.main import create_app


class FakeRuntime:
    """Stands in for DockerRuntime; records calls instead of talking to a daemon."""

    def __init__(
        self,
        containers: list[dict[str, Any]] | None = None,
        created_id: str = "abc123",
        error: str | None = None,
    ) -> None:
        self.containers = containers if containers is not None else []
        self.created_id = created_id
        self.error = error
        self.create_calls: list[tuple[str, list[str] | None]] = []
        self.list_calls = 0
        self.closed = False

    def list_containers(self) -> list[dict[str, Any]]:
        self.list_calls += 1
        if self.error is not None:
            raise RuntimeCallError(self.error)
        return self.containers

    def create_container(self, image: str, cmd: list[str] | None = None) -> str:
        self.create_calls.append((image, cmd))
        if self.error is not None:
            raise RuntimeCallError(self.error)
        return self.created_id

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(DEFAULT_IMAGE="busybox")


@pytest.fixture
def runtime() -> FakeRuntime:
    return FakeRuntime()


@pytest.fixture
def client(runtime: FakeRuntime, settings: Settings) -> TestClient:
    return TestClient(create_app(runtime, settings))
