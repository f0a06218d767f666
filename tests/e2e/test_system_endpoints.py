from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from health_probes.domain.entities.health import ProbeStatus, Report, ReportBuilder
from health_probes.infrastructure.probes import ProbeRegistry
from health_probes.main.app import create_app
from health_probes.main.container import get_container


class _StubProbe:
    def __init__(self, name: str, status: ProbeStatus, **details) -> None:
        self.name = name
        self._status = status
        self._details = details

    def check(self) -> Report:
        return ReportBuilder().status(self._status).with_details(self._details).build()


def _client_for(*probes: _StubProbe):
    app = create_app()
    container = get_container()
    container.probe_registry.override(providers.Object(ProbeRegistry(probes)))
    return TestClient(app)


@pytest.fixture()
def healthy_client():
    with _client_for(
        _StubProbe("mongo", ProbeStatus.UP, result="yes", time_ms=2),
        _StubProbe("redis", ProbeStatus.UP, result="ok", version="7.2.4"),
    ) as test_client:
        yield test_client


@pytest.fixture()
def degraded_client():
    with _client_for(
        _StubProbe("mongo", ProbeStatus.UP, result="yes"),
        _StubProbe("zookeeper", ProbeStatus.DOWN, error="Client not started"),
    ) as test_client:
        yield test_client


def test_health_endpoint(healthy_client):
    response = healthy_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "UP"
    assert body["components"]["redis"]["details"]["version"] == "7.2.4"


def test_health_endpoint_down(degraded_client):
    response = degraded_client.get("/health")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "DOWN"
    assert body["components"]["zookeeper"]["details"] == {"error": "Client not started"}
    assert body["components"]["mongo"]["status"] == "UP"


def test_single_probe_endpoint(degraded_client):
    assert degraded_client.get("/health/mongo").status_code == 200

    response = degraded_client.get("/health/zookeeper")
    assert response.status_code == 503
    assert response.json()["status"] == "DOWN"


def test_unknown_probe_endpoint(healthy_client):
    response = healthy_client.get("/health/kafka")

    assert response.status_code == 404
    assert "kafka" in response.json()["detail"]
