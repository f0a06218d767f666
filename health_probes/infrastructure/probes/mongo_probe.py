"""Document store probe: count a collection, then read the server build info."""

from __future__ import annotations

from typing import Optional

from pymongo.database import Database

from health_probes.domain.entities.health import ReportBuilder
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import EnumProbe

DEFAULT_COLLECTION = "request_log"


class MongoProbe(HealthProbe):
    name = EnumProbe.MONGO.value

    def __init__(
        self, database: Optional[Database], collection: str = DEFAULT_COLLECTION
    ) -> None:
        self._database = database
        self._collection = collection or DEFAULT_COLLECTION

    def _is_configured(self) -> bool:
        return self._database is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        collection = self._database[self._collection]
        outcome = timed_call(collection.estimated_document_count)
        if not outcome.succeeded:
            raise outcome.error

        builder.with_detail("result", "yes" if outcome.value >= 0 else "no")
        self._record_time(builder, outcome)

        build_info = self._database.command("buildInfo")
        builder.with_detail("version", build_info.get("version"))
        builder.up()
