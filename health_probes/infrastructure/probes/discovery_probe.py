"""
Service-discovery client probe.

The top-level status comes from the local client only: the status the
registry server holds for this instance, qualified by how long ago the
client last fetched the registry. Every registered instance is also called
on its own health endpoint and the results are reported under ``servers``,
but those per-instance results do not change the top-level status.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import httpx

from health_probes.domain.entities.health import (
    ProbeStatus,
    ReportBuilder,
    describe_error,
)
from health_probes.domain.ports.discovery_client import (
    IDiscoveryClient,
    IDiscoveryInstance,
)
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import TIME_DETAIL_KEY, EnumProbe, get_logger

logger = get_logger(__name__)

DEFAULT_HEALTH_PATH = "/actuator/health"

NOT_CONNECTED_REASON = (
    "Discovery client has not yet successfully connected to a registry server"
)
CONNECT_FAILURES_REASON = (
    "Discovery client is reporting failures to connect to a registry server"
)
REMOTE_STATUS_REASON = "Remote status from registry server"
NO_APPLICATIONS_REASON = "Discovery client returned no applications snapshot"


def translate_remote_status(remote_status: Any) -> Tuple[ProbeStatus, Optional[str]]:
    """Map the registry's instance status label to a probe status and reason."""
    label = str(getattr(remote_status, "value", remote_status)).upper()
    if label == ProbeStatus.UP.value:
        return ProbeStatus.UP, None
    return ProbeStatus.DOWN, f"{REMOTE_STATUS_REASON}: {label}"


class DiscoveryProbe(HealthProbe):
    """Local discovery client status plus per-instance reachability."""

    name = EnumProbe.DISCOVERY.value

    def __init__(
        self,
        discovery_client: Optional[IDiscoveryClient],
        http_client: Optional[httpx.Client],
        *,
        required_applications: Sequence[str] = (),
        info_endpoint_overrides: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._discovery_client = discovery_client
        self._http_client = http_client
        self._required_applications = list(required_applications)
        self._info_endpoint_overrides = {
            app.upper(): path for app, path in (info_endpoint_overrides or {}).items()
        }

    def _is_configured(self) -> bool:
        return self._discovery_client is not None and self._http_client is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        outcome = timed_call(self._collect)
        if not outcome.succeeded:
            raise outcome.error

        (status, reason), servers = outcome.value
        if servers is None:
            builder.status(ProbeStatus.DOWN, NO_APPLICATIONS_REASON)
            return

        builder.status(status, reason)
        self._record_time(builder, outcome)
        builder.with_detail("servers", servers)

    def _collect(
        self,
    ) -> Tuple[Tuple[ProbeStatus, Optional[str]], Optional[Dict[str, Any]]]:
        client_status = self._client_status()
        applications = self._discovery_client.applications()
        if applications is None:
            return client_status, None

        servers: Dict[str, Any] = {}
        for application in applications:
            instances = list(application.instances)
            if not instances:
                continue
            app_result: Dict[str, Any] = {"total": len(instances)}
            for instance in instances:
                app_result.update(self._instance_health(instance))
            servers[application.name] = app_result

        for required in self._required_applications:
            servers.setdefault(required, ProbeStatus.DOWN.value)

        return client_status, servers

    def _client_status(self) -> Tuple[ProbeStatus, Optional[str]]:
        client = self._discovery_client
        status, reason = translate_remote_status(client.instance_remote_status())

        if client.should_fetch_registry:
            last_fetch = client.last_registry_fetch_age_ms()
            if last_fetch is not None:
                if last_fetch < 0:
                    return ProbeStatus.UP, NOT_CONNECTED_REASON
                if last_fetch > client.registry_fetch_interval_seconds * 2000:
                    return ProbeStatus.UP, CONNECT_FAILURES_REASON

        return status, reason

    def _instance_health(self, instance: IDiscoveryInstance) -> Dict[str, Any]:
        outcome = timed_call(lambda: self._fetch_health(instance))
        result: Dict[str, Any] = {
            f"{instance.instance_id}_{TIME_DETAIL_KEY}": outcome.elapsed_ms
        }

        if not outcome.succeeded:
            logger.warning(
                "discovery.instance.failure",
                instance=instance.instance_id,
                url=instance.health_check_url,
                error=str(outcome.error),
            )
            result[f"{instance.instance_id}_status"] = ProbeStatus.DOWN.value
            result[f"{instance.instance_id}_error"] = describe_error(outcome.error)
            return result

        response, overridden = outcome.value
        healthy = response.status_code == httpx.codes.OK
        if healthy and not overridden:
            healthy = self._reports_up(response)

        status = ProbeStatus.UP if healthy else ProbeStatus.DOWN
        result[f"{instance.instance_id}_status"] = status.value
        return result

    def _fetch_health(self, instance: IDiscoveryInstance) -> Tuple[httpx.Response, bool]:
        """GET the instance health URL, or its info override; return the override flag."""
        override = self._info_endpoint_overrides.get(instance.app_name.upper())
        url = instance.health_check_url
        if override is not None:
            url = url.replace(DEFAULT_HEALTH_PATH, override)
        return self._http_client.get(url), override is not None

    @staticmethod
    def _reports_up(response: httpx.Response) -> bool:
        try:
            body = response.json()
        except ValueError:
            return False
        if not isinstance(body, dict):
            return False
        return str(body.get("status", "")).upper() == ProbeStatus.UP.value
