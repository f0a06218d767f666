"""Domain ports package."""

from .discovery_client import (
    IDiscoveryApplication,
    IDiscoveryClient,
    IDiscoveryInstance,
)
from .health_check import IHealthCheckService
from .health_probe import IHealthProbe
from .rpc_framework import IEchoService, IReferenceBean, IRpcFramework, RpcStatusLevel

__all__ = [
    "IHealthCheckService",
    "IHealthProbe",
    "IRpcFramework",
    "IReferenceBean",
    "IEchoService",
    "RpcStatusLevel",
    "IDiscoveryClient",
    "IDiscoveryApplication",
    "IDiscoveryInstance",
]
