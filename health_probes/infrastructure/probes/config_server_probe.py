"""Probe for the configuration server: resolve one profile over HTTP."""

from __future__ import annotations

from typing import Optional, Sequence

import httpx

from health_probes.domain.entities.health import ReportBuilder
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import EnumProbe


class ConfigServerProbe(HealthProbe):
    """Fetch ``{uri}/{name}/{profile}`` and report UP on HTTP 200."""

    name = EnumProbe.CONFIG_SERVER.value

    def __init__(
        self,
        http_client: Optional[httpx.Client],
        uris: Sequence[str],
        *,
        config_name: str = "base",
        profile: str = "dev",
    ) -> None:
        self._http_client = http_client
        self._uris = [uri for uri in uris if uri]
        self._config_name = config_name
        self._profile = profile

    def _is_configured(self) -> bool:
        return self._http_client is not None and bool(self._uris)

    @property
    def url(self) -> str:
        base = self._uris[0].rstrip("/")
        return f"{base}/{self._config_name}/{self._profile}"

    def _do_check(self, builder: ReportBuilder) -> None:
        client = self._http_client
        url = self.url
        outcome = timed_call(lambda: client.get(url))
        self._record_time(builder, outcome)

        if not outcome.succeeded:
            builder.down(outcome.error)
            return

        response: httpx.Response = outcome.value
        if response.status_code == httpx.codes.OK:
            builder.up()
        else:
            builder.down().with_detail("status_code", response.status_code)
