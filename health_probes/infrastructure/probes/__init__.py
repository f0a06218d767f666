"""
Probes Package - Infrastructure Layer

One probe per dependency type, each performing a lightweight real call
against an already-configured client.
"""

from .base import HealthProbe
from .config_server_probe import ConfigServerProbe
from .datasource_probe import DataSourceProbe
from .discovery_probe import DiscoveryProbe
from .mongo_probe import MongoProbe
from .redis_probe import RedisProbe
from .registry import ProbeRegistry
from .rpc_probe import RpcProbe
from .zookeeper_probe import ZookeeperProbe

__all__ = [
    "HealthProbe",
    "ConfigServerProbe",
    "RpcProbe",
    "DiscoveryProbe",
    "DataSourceProbe",
    "MongoProbe",
    "RedisProbe",
    "ZookeeperProbe",
    "ProbeRegistry",
]
