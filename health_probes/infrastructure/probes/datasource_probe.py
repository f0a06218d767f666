"""Relational database probe running a validation query."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from health_probes.domain.entities.health import ReportBuilder
from health_probes.domain.services import timed_call
from health_probes.infrastructure.probes.base import HealthProbe
from health_probes.shared import EnumProbe

DEFAULT_QUERY = "SELECT 1"

# Dialects whose validation query differs from DEFAULT_QUERY.
_VALIDATION_QUERIES = {
    "oracle": "SELECT 1 FROM DUAL",
    "hsqldb": "SELECT COUNT(*) FROM INFORMATION_SCHEMA.SYSTEM_USERS",
    "db2": "SELECT 1 FROM SYSIBM.SYSDUMMY1",
    "informix": "SELECT 1 FROM SYSTABLES",
    "firebird": "SELECT 1 FROM RDB$DATABASE",
    "derby": "SELECT 1 FROM SYSIBM.SYSDUMMY1",
}


class UnexpectedResultError(Exception):
    """Validation query did not return exactly one row with one column."""


def validation_query_for(product: str, query: Optional[str] = None) -> str:
    if query and query.strip():
        return query
    return _VALIDATION_QUERIES.get(product.lower(), DEFAULT_QUERY)


class DataSourceProbe(HealthProbe):
    """Report the database product and whether the validation query returns 1."""

    name = EnumProbe.DATASOURCE.value

    def __init__(self, engine: Optional[Engine], query: Optional[str] = None) -> None:
        self._engine = engine
        self._query = query

    @property
    def _unknown_detail_key(self) -> str:
        return "database"

    def _is_configured(self) -> bool:
        return self._engine is not None

    def _do_check(self, builder: ReportBuilder) -> None:
        product = self._engine.dialect.name
        builder.up().with_detail("database", product)

        query = validation_query_for(product, self._query)
        outcome = timed_call(lambda: self._single_result(query))
        if not outcome.succeeded:
            raise outcome.error

        builder.with_detail("result", "ok" if str(outcome.value) == "1" else "no")
        self._record_time(builder, outcome)

    def _single_result(self, query: str) -> Any:
        with self._engine.connect() as connection:
            rows = connection.execute(text(query)).fetchall()
        if len(rows) != 1:
            raise UnexpectedResultError(
                f"Incorrect result size: expected 1, actual {len(rows)}"
            )
        row = rows[0]
        if len(row) != 1:
            raise UnexpectedResultError(
                f"Incorrect column count: expected 1, actual {len(row)}"
            )
        return row[0]
