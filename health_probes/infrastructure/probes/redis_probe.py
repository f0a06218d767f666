"""
Key-value cache probe.

Reads a well-known key through the connection, then reports the topology:
cluster size and slot health for a cluster client, the server version
otherwise. The two detail shapes never appear together.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import redis
from redis.cluster import RedisCluster

from health_probes.domain.entities.health import ReportBuilder
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import EnumProbe

PROBE_KEY = "ok"

RedisClient = Union[redis.Redis, RedisCluster]


def _as_int(value: Any) -> int:
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    return int(value)


class RedisProbe(HealthProbe):
    name = EnumProbe.REDIS.value

    def __init__(self, client: Optional[RedisClient]) -> None:
        self._client = client

    def _is_configured(self) -> bool:
        return self._client is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        client = self._client
        outcome = timed_call(lambda: client.get(PROBE_KEY))
        if outcome.succeeded:
            builder.with_detail("result", "ok")
            self._record_time(builder, outcome)
            builder.up()
        else:
            builder.down(outcome.error)

        if isinstance(client, RedisCluster):
            info = self._cluster_info(client)
            builder.with_detail("cluster_size", _as_int(info["cluster_size"]))
            builder.with_detail("slots_up", _as_int(info["cluster_slots_ok"]))
            builder.with_detail("slots_fail", _as_int(info["cluster_slots_fail"]))
        else:
            server_info = client.info("server")
            builder.with_detail("version", server_info.get("redis_version"))

    @staticmethod
    def _cluster_info(client: RedisCluster) -> Mapping[str, Any]:
        info = client.cluster_info()
        # Targeting several nodes yields one mapping per node; any node will do.
        if info and "cluster_size" not in info:
            info = next(iter(info.values()))
        return info
