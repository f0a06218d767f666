"""Coordination service probe: client started, then the root path exists."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from health_probes.domain.entities.health import ReportBuilder
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import EnumProbe

ROOT_PATH = "/"

ROOT_MISSING_ERROR = "Root for namespace does not exist"
NOT_STARTED_ERROR = "Client not started"


class CoordinationState(str, Enum):
    LATENT = "LATENT"
    STARTED = "STARTED"
    STOPPED = "STOPPED"


# kazoo.protocol.states.KazooState values.
_KAZOO_STATES: Mapping[str, CoordinationState] = MappingProxyType(
    {
        "CONNECTED": CoordinationState.STARTED,
        "SUSPENDED": CoordinationState.LATENT,
        "LOST": CoordinationState.STOPPED,
    }
)


def translate_state(state: Any) -> CoordinationState:
    label = str(getattr(state, "value", state)).upper()
    if label in CoordinationState.__members__:
        return CoordinationState(label)
    return _KAZOO_STATES.get(label, CoordinationState.LATENT)


class ZookeeperProbe(HealthProbe):
    name = EnumProbe.ZOOKEEPER.value

    def __init__(self, client: Optional[Any], root_path: str = ROOT_PATH) -> None:
        self._client = client
        self._root_path = root_path

    def _is_configured(self) -> bool:
        return self._client is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        client = self._client
        if translate_state(client.state) is not CoordinationState.STARTED:
            builder.down().with_detail("error", NOT_STARTED_ERROR)
            return

        outcome = timed_call(lambda: client.exists(self._root_path))
        if not outcome.succeeded:
            raise outcome.error

        self._record_time(builder, outcome)
        if outcome.value is not None:
            builder.up()
        else:
            builder.down().with_detail("error", ROOT_MISSING_ERROR)
