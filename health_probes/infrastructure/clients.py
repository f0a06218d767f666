"""
Client factories - Infrastructure Layer

Each factory builds an already-configured client handle from settings
values, or returns None when the dependency is not configured. Probes treat
None as "unknown" rather than as a failure.
"""

from __future__ import annotations

from typing import Optional, Union

import httpx
import redis
from kazoo.client import KazooClient
from redis.cluster import RedisCluster
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from health_probes.infrastructure.database.mongo_database import MongoDatabase
from health_probes.shared import get_logger

logger = get_logger(__name__)


def build_http_client(timeout: float = 5.0) -> httpx.Client:
    return httpx.Client(timeout=timeout, follow_redirects=True)


def build_mongo_database(
    mongo_uri: str, database_name: str, timeout_ms: int = 5000
) -> Optional[MongoDatabase]:
    if not mongo_uri:
        return None
    return MongoDatabase(
        mongo_uri=mongo_uri,
        db_name=database_name,
        server_selection_timeout_ms=timeout_ms,
    )


def build_redis_client(
    url: str, cluster: bool = False, socket_timeout: float = 5.0
) -> Optional[Union[redis.Redis, RedisCluster]]:
    if not url:
        return None
    options = {
        "socket_connect_timeout": socket_timeout,
        "socket_timeout": socket_timeout,
    }
    if cluster:
        return RedisCluster.from_url(url, **options)
    return redis.Redis.from_url(url, **options)


def build_sql_engine(url: str) -> Optional[Engine]:
    if not url:
        return None
    return create_engine(url)


def build_zookeeper_client(hosts: str, timeout: float = 10.0) -> Optional[KazooClient]:
    if not hosts:
        return None
    return KazooClient(hosts=hosts, timeout=timeout)


def close_quietly(resource: object, name: str) -> None:
    """Release a client on shutdown; failures are logged, not raised."""
    if resource is None:
        return
    # kazoo needs stop() before close(); other clients expose one of these.
    for method in ("stop", "close", "dispose"):
        release = getattr(resource, method, None)
        if not callable(release):
            continue
        try:
            release()
        except Exception as exc:
            logger.warning(
                "client.close.failure", client=name, method=method, error=str(exc)
            )
