from __future__ import annotations

import threading

import pytest

from health_probes.domain.entities.errors import ProbeNotFoundError
from health_probes.domain.entities.health import ProbeStatus, Report, ReportBuilder
from health_probes.infrastructure.probes.registry import ProbeRegistry
from health_probes.infrastructure.services.health_check_service import (
    HealthCheckService,
)


class _StubProbe:
    def __init__(self, name: str, status: ProbeStatus) -> None:
        self.name = name
        self._status = status
        self.calls = 0
        self.threads = []

    def check(self) -> Report:
        self.calls += 1
        self.threads.append(threading.get_ident())
        return ReportBuilder().status(self._status).with_detail("probe", self.name).build()


def _make_service(*probes: _StubProbe) -> HealthCheckService:
    return HealthCheckService(probe_registry=ProbeRegistry(probes))


@pytest.mark.asyncio
async def test_evaluate_is_up_when_every_probe_is_up() -> None:
    probes = [_StubProbe("mongo", ProbeStatus.UP), _StubProbe("redis", ProbeStatus.UP)]
    health = await _make_service(*probes).evaluate()

    assert health.status is ProbeStatus.UP
    assert list(health.components) == ["mongo", "redis"]
    assert all(probe.calls == 1 for probe in probes)


@pytest.mark.asyncio
async def test_single_down_probe_brings_system_down() -> None:
    health = await _make_service(
        _StubProbe("mongo", ProbeStatus.UP),
        _StubProbe("zookeeper", ProbeStatus.DOWN),
        _StubProbe("redis", ProbeStatus.UP),
    ).evaluate()

    assert health.status is ProbeStatus.DOWN
    assert health.components["zookeeper"].status is ProbeStatus.DOWN
    assert health.components["redis"].details["probe"] == "redis"


@pytest.mark.asyncio
async def test_no_probes_is_up() -> None:
    health = await _make_service().evaluate()

    assert health.status is ProbeStatus.UP
    assert health.components == {}


@pytest.mark.asyncio
async def test_probes_run_off_the_event_loop_thread() -> None:
    probe = _StubProbe("redis", ProbeStatus.UP)
    await _make_service(probe).evaluate()

    assert probe.threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_evaluate_probe_runs_only_the_named_probe() -> None:
    mongo = _StubProbe("mongo", ProbeStatus.DOWN)
    redis = _StubProbe("redis", ProbeStatus.UP)

    report = await _make_service(mongo, redis).evaluate_probe("mongo")

    assert report.status is ProbeStatus.DOWN
    assert (mongo.calls, redis.calls) == (1, 0)


@pytest.mark.asyncio
async def test_evaluate_probe_unknown_name() -> None:
    with pytest.raises(ProbeNotFoundError):
        await _make_service().evaluate_probe("kafka")
