from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Optional

from health_probes.domain.entities.health import ProbeStatus
from health_probes.infrastructure.probes.zookeeper_probe import (
    NOT_STARTED_ERROR,
    ROOT_MISSING_ERROR,
    CoordinationState,
    ZookeeperProbe,
    translate_state,
)


class _Client:
    def __init__(self, state: str, stat: Optional[Any] = None, error: Exception | None = None):
        self.state = state
        self._stat = stat
        self._error = error
        self.paths = []

    def exists(self, path: str) -> Optional[Any]:
        self.paths.append(path)
        if self._error is not None:
            raise self._error
        return self._stat


def test_state_translation() -> None:
    assert translate_state("CONNECTED") is CoordinationState.STARTED
    assert translate_state("SUSPENDED") is CoordinationState.LATENT
    assert translate_state("LOST") is CoordinationState.STOPPED
    assert translate_state("STARTED") is CoordinationState.STARTED
    assert translate_state("SOMETHING_NEW") is CoordinationState.LATENT


def test_started_with_root_is_up() -> None:
    client = _Client("CONNECTED", stat=SimpleNamespace(version=0))
    report = ZookeeperProbe(client).check()

    assert report.status is ProbeStatus.UP
    assert report.details["time_ms"] >= 0
    assert client.paths == ["/"]


def test_started_without_root_is_down() -> None:
    report = ZookeeperProbe(_Client("CONNECTED", stat=None)).check()

    assert report.status is ProbeStatus.DOWN
    assert report.details["error"] == ROOT_MISSING_ERROR
    assert "time_ms" in report.details


def test_not_started_is_down() -> None:
    client = _Client("LOST")
    report = ZookeeperProbe(client).check()

    assert report.status is ProbeStatus.DOWN
    assert report.details["error"] == NOT_STARTED_ERROR
    assert client.paths == []


def test_exists_failure_is_down() -> None:
    report = ZookeeperProbe(_Client("CONNECTED", error=RuntimeError("session expired"))).check()

    assert report.status is ProbeStatus.DOWN
    assert report.details["error"] == "session expired"


def test_unknown_without_client() -> None:
    report = ZookeeperProbe(None).check()

    assert report.status is ProbeStatus.UP
    assert dict(report.details) == {"zookeeper": "unknown"}
