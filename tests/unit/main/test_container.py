from __future__ import annotations

from dataclasses import dataclass

import pytest
from dependency_injector import providers

from health_probes.domain.entities.health import ProbeStatus
from health_probes.main.config import AppSettings
from health_probes.main.container import app_lifespan, get_container, init_container
from health_probes.shared import EnumProbe
from tests.conftest import FakeReferenceBean, FakeRpcFramework


@dataclass
class _StubRedis:
    closed: bool = False

    def get(self, key):
        return None

    def info(self, section):
        return {"redis_version": "7.2.4"}

    def close(self) -> None:
        self.closed = True


@dataclass
class _StubZookeeper:
    state: str = "LOST"
    started: bool = False
    stopped: bool = False
    closed: bool = False

    def start(self) -> None:
        self.started = True
        self.state = "CONNECTED"

    def exists(self, path):
        return object()

    def stop(self) -> None:
        self.stopped = True

    def close(self) -> None:
        self.closed = True


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())

    assert get_container() is container
    assert container.probe_registry().names == [probe.value for probe in EnumProbe]


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("health_probes.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()


@pytest.mark.asyncio
async def test_unconfigured_dependencies_report_unknown() -> None:
    container = init_container(AppSettings())

    health = await container.health_check_service().evaluate()

    assert health.status is ProbeStatus.UP
    assert health.components["datasource"].details == {"database": "unknown"}
    assert health.components["zookeeper"].details == {"zookeeper": "unknown"}


@pytest.mark.asyncio
async def test_rpc_framework_slot_can_be_overridden() -> None:
    settings = AppSettings()
    settings.rpc.echo_checks = {"orders": "com.example.OrderService"}
    container = init_container(settings)
    container.rpc_framework.override(
        providers.Object(
            FakeRpcFramework(beans=[FakeReferenceBean("com.example.OrderService")])
        )
    )

    report = await container.health_check_service().evaluate_probe("rpc")

    assert report.status is ProbeStatus.UP
    assert report.details["orders_invoke_check"]["result"] == "ok"


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources() -> None:
    container = init_container(AppSettings())
    redis = _StubRedis()
    zookeeper = _StubZookeeper()
    container.redis_client.override(providers.Object(redis))
    container.zookeeper_client.override(providers.Object(zookeeper))

    async with app_lifespan() as managed:
        assert managed is container
        assert zookeeper.started is True
        report = await container.health_check_service().evaluate_probe("zookeeper")
        assert report.status is ProbeStatus.UP

    assert redis.closed is True
    assert (zookeeper.stopped, zookeeper.closed) == (True, True)


@pytest.mark.asyncio
async def test_app_lifespan_tolerates_unreachable_coordination_service() -> None:
    class _Unreachable(_StubZookeeper):
        def start(self) -> None:
            raise TimeoutError("Connection time-out")

    container = init_container(AppSettings())
    zookeeper = _Unreachable()
    container.zookeeper_client.override(providers.Object(zookeeper))

    async with app_lifespan():
        report = await container.health_check_service().evaluate_probe("zookeeper")
        assert report.status is ProbeStatus.DOWN

    assert zookeeper.closed is True
