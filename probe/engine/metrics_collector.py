from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from probe.collectors import (
    ClusterAdminTool,
    CqlRowCounter,
    DfReader,
    DiskUsageReader,
    Nodetool,
    PsutilSampler,
    RowCounter,
    SystemSampler,
)
from probe.config import Settings
from probe.db.cluster import session_scope
from probe.models import MetricsSnapshot

logger = logging.getLogger(__name__)

SessionFactory = Callable[[Settings], AbstractAsyncContextManager[Any]]


class MetricsCollector:
    """Runs one linear collection pass and builds a ``MetricsSnapshot``.

    Each external dependency sits behind a capability object so tests can
    substitute fakes. Steps run strictly in order; the first
    ``CollectorError`` propagates and no snapshot is produced.
    """

    def __init__(
        self,
        settings: Settings,
        sampler: SystemSampler | None = None,
        admin_tool: ClusterAdminTool | None = None,
        row_counter: RowCounter | None = None,
        disk_reader: DiskUsageReader | None = None,
        session_factory: SessionFactory = session_scope,
    ) -> None:
        self.settings = settings
        self.sampler = sampler or PsutilSampler()
        self.admin_tool = admin_tool or Nodetool(
            settings.nodetool_dir, timeout=settings.tool_timeout
        )
        self.row_counter = row_counter or CqlRowCounter()
        self.disk_reader = disk_reader or DfReader(
            command=settings.df_command,
            flag=settings.df_flag,
            mount=settings.root_mount,
            timeout=settings.tool_timeout,
        )
        self._session_factory = session_factory

    async def run(self) -> MetricsSnapshot:
        """Open the cluster session, collect, and release the session."""
        async with self._session_factory(self.settings) as session:
            return await self.collect(session)

    async def collect(self, session: Any) -> MetricsSnapshot:
        s = self.settings

        cpu_usage = await self.sampler.cpu_usage()
        memory_usage = await self.sampler.memory_usage()

        read_latency, write_latency = await self.admin_tool.table_histograms(
            s.histogram_keyspace, s.histogram_table
        )
        pending_compactions = await self.admin_tool.compaction_stats()

        active_connections = await self.row_counter.count_rows(
            session, s.count_keyspace, s.count_table
        )

        storage_utilization = await self.disk_reader.storage_utilization()

        snapshot = MetricsSnapshot(
            cpu_usage=cpu_usage,
            memory_usage=memory_usage,
            read_latency=read_latency,
            write_latency=write_latency,
            pending_compactions=pending_compactions,
            active_connections=active_connections,
            storage_utilization=storage_utilization,
        )
        logger.debug("Collected snapshot %s", snapshot.model_dump(mode="json"))
        return snapshot
