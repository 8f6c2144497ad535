from __future__ import annotations

import asyncio
import logging

from cassandra.cluster import Session

from probe.collectors.base import RowCounter
from probe.db.cluster import DRIVER_ERRORS
from probe.errors import RowCountError

logger = logging.getLogger(__name__)


class CqlRowCounter(RowCounter):
    """Counts rows of a table over a cassandra-driver session."""

    async def count_rows(self, session: Session, keyspace: str, table: str) -> int:
        query = f"SELECT COUNT(*) FROM {keyspace}.{table}"
        logger.debug("Executing %s", query)
        try:
            result = await asyncio.to_thread(session.execute, query)
        except DRIVER_ERRORS as exc:
            raise RowCountError("row count", str(exc)) from exc

        row = result.one()
        if row is None:
            return 0
        return int(row[0])
