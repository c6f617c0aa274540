"""
Pytest configuration and shared fixtures.
"""
import json
import os

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []
        handler = handler or (lambda request: httpx.Response(201))

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep host settings (.env files, JENKINS_BUILDER_*, PROJECTS) out of tests."""
    for key in list(os.environ):
        if key.startswith("JENKINS_BUILDER_") or key == "PROJECTS":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials.json"
    path.write_text(json.dumps({"user": "alice", "token": "s3cr3t"}), encoding="utf-8")
    return path


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def use_transport(monkeypatch):
    """Routes the client built for a run through the given transport."""
    from core.services import build_pipeline

    def _install(transport):
        real = build_pipeline.build_http_client

        def _build(credentials, settings=None):
            return real(credentials, settings, transport=transport)

        monkeypatch.setattr(build_pipeline, "build_http_client", _build)
        return transport

    return _install
