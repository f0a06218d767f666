from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from health_probes.domain.ports.rpc_framework import RpcStatusLevel  # noqa: E402


class FakeEchoService:
    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: List[Any] = []

    def echo(self, message: Any) -> Any:
        self.calls.append(message)
        if self.error is not None:
            raise self.error
        return message


@dataclass
class FakeReferenceBean:
    interface: str
    service: Optional[FakeEchoService] = field(default_factory=FakeEchoService)

    def get_object(self) -> Optional[FakeEchoService]:
        return self.service


class FakeRpcFramework:
    def __init__(
        self,
        threadpool: RpcStatusLevel = RpcStatusLevel.OK,
        registry: RpcStatusLevel = RpcStatusLevel.OK,
        beans: Iterable[FakeReferenceBean] = (),
    ) -> None:
        self.levels: Dict[str, RpcStatusLevel] = {
            "threadpool": threadpool,
            "registry": registry,
        }
        self.beans = list(beans)
        self.reference_lookups = 0

    def check_status(self, name: str) -> RpcStatusLevel:
        return self.levels[name]

    def reference_beans(self) -> List[FakeReferenceBean]:
        self.reference_lookups += 1
        return list(self.beans)


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeHttpClient:
    """Maps URLs to responses or exceptions; records every requested URL."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes = routes or {}
        self.requested: List[str] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requested.append(url)
        outcome = self.routes.get(url, FakeResponse(404))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture()
def fake_http_client() -> FakeHttpClient:
    return FakeHttpClient()


@pytest.fixture()
def fake_rpc_framework() -> FakeRpcFramework:
    return FakeRpcFramework()
