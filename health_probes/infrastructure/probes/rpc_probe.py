"""
RPC framework probe.

Combines three independent sub-checks into one verdict: the thread pool
status extension, the registry status extension and a real echo round trip
against every registered remote interface. All sub-checks always run and
each one is recorded in the report, so a DOWN verdict names its cause.
"""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from health_probes.domain.entities.health import (
    ProbeStatus,
    ReportBuilder,
    describe_error,
)
from health_probes.domain.ports.rpc_framework import (
    IReferenceBean,
    IRpcFramework,
    RpcStatusLevel,
)
from health_probes.domain.services import aggregate_status, timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import TIME_DETAIL_KEY, EnumProbe, get_logger

logger = get_logger(__name__)

ECHO_MESSAGE = "ok"

THREADPOOL_EXTENSION = "threadpool"
REGISTRY_EXTENSION = "registry"

# An overloaded pool reports WARN; a pool the framework cannot inspect is not a failure.
_THREADPOOL_LEVELS: Mapping[RpcStatusLevel, ProbeStatus] = MappingProxyType(
    {
        RpcStatusLevel.OK: ProbeStatus.UP,
        RpcStatusLevel.UNKNOWN: ProbeStatus.UP,
        RpcStatusLevel.WARN: ProbeStatus.DOWN,
        RpcStatusLevel.ERROR: ProbeStatus.DOWN,
    }
)

_REGISTRY_LEVELS: Mapping[RpcStatusLevel, ProbeStatus] = MappingProxyType(
    {
        RpcStatusLevel.OK: ProbeStatus.UP,
        RpcStatusLevel.UNKNOWN: ProbeStatus.DOWN,
        RpcStatusLevel.WARN: ProbeStatus.DOWN,
        RpcStatusLevel.ERROR: ProbeStatus.DOWN,
    }
)


def translate_threadpool_level(level: RpcStatusLevel) -> ProbeStatus:
    return _THREADPOOL_LEVELS.get(RpcStatusLevel(level), ProbeStatus.DOWN)


def translate_registry_level(level: RpcStatusLevel) -> ProbeStatus:
    return _REGISTRY_LEVELS.get(RpcStatusLevel(level), ProbeStatus.DOWN)


def echo_detail_key(provider_name: str) -> str:
    return f"{provider_name}_invoke_check"


class RpcProbe(HealthProbe):
    """Thread pool, registry and echo checks folded by strict conjunction."""

    name = EnumProbe.RPC.value

    def __init__(
        self,
        framework: Optional[IRpcFramework],
        echo_checks: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._framework = framework
        self._echo_checks: Dict[str, str] = {}
        self._references: Mapping[str, IReferenceBean] = MappingProxyType({})
        self._resolved = False
        self._resolve_lock = threading.Lock()
        for provider_name, interface in (echo_checks or {}).items():
            self.register_echo_check(provider_name, interface)

    def register_echo_check(self, provider_name: str, interface: str) -> None:
        """
        Register a remote interface to echo-test under ``provider_name``.

        Registrations are expected at configuration time, before the first
        check resolves them to live references.
        """
        if self._resolved:
            logger.warning(
                "rpc.echo_check.late_registration",
                provider=provider_name,
                interface=interface,
            )
        self._echo_checks[provider_name] = interface

    @property
    def registered_echo_checks(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._echo_checks))

    def _is_configured(self) -> bool:
        return self._framework is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        framework = self._framework
        sub_results: Dict[str, ProbeStatus] = {}

        for extension, translate in (
            (THREADPOOL_EXTENSION, translate_threadpool_level),
            (REGISTRY_EXTENSION, translate_registry_level),
        ):
            detail = self._check_extension(framework, extension, translate)
            sub_results[extension] = ProbeStatus(detail["status"])
            builder.with_detail(extension, detail)

        for provider_name, reference in self._resolve_references().items():
            key = echo_detail_key(provider_name)
            try:
                echo_service = reference.get_object()
            except Exception as exc:
                logger.warning(
                    "rpc.echo_check.proxy_failure",
                    provider=provider_name,
                    error=str(exc),
                )
                builder.with_detail(
                    key,
                    {"status": ProbeStatus.DOWN.value, "error": describe_error(exc)},
                )
                sub_results[key] = ProbeStatus.DOWN
                continue
            if echo_service is None:
                continue

            outcome = timed_call(lambda: echo_service.echo(ECHO_MESSAGE))
            echo_status = ProbeStatus.UP if outcome.succeeded else ProbeStatus.DOWN
            echo_detail: Dict[str, object] = {"status": echo_status.value}
            if outcome.succeeded:
                echo_detail["result"] = outcome.value
            else:
                echo_detail["error"] = describe_error(outcome.error)
            echo_detail[TIME_DETAIL_KEY] = outcome.elapsed_ms

            builder.with_detail(key, echo_detail)
            sub_results[key] = echo_status

        builder.status(aggregate_status(sub_results))

    def _check_extension(
        self,
        framework: IRpcFramework,
        extension: str,
        translate: Callable[[RpcStatusLevel], ProbeStatus],
    ) -> Dict[str, str]:
        try:
            status = translate(framework.check_status(extension))
        except Exception as exc:
            logger.warning(
                "rpc.status_extension.failure", extension=extension, error=str(exc)
            )
            return {"status": ProbeStatus.DOWN.value, "error": describe_error(exc)}
        return {"status": status.value}

    def _resolve_references(self) -> Mapping[str, IReferenceBean]:
        if self._resolved:
            return self._references

        with self._resolve_lock:
            if not self._resolved:
                self._references = MappingProxyType(self._match_references())
                self._resolved = True
                logger.info(
                    "rpc.echo_checks.resolved",
                    registered=len(self._echo_checks),
                    resolved=len(self._references),
                )
        return self._references

    def _match_references(self) -> Dict[str, IReferenceBean]:
        beans = list(self._framework.reference_beans())
        matched: Dict[str, IReferenceBean] = {}
        for provider_name, interface in self._echo_checks.items():
            for bean in beans:
                if bean.interface.lower() == interface.lower():
                    matched[provider_name] = bean
                    break
            else:
                logger.warning(
                    "rpc.echo_check.unresolved",
                    provider=provider_name,
                    interface=interface,
                )
        return matched
