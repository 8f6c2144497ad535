"""In-memory capability fakes shared by the collector and CLI tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from probe.collectors.base import (
    ClusterAdminTool,
    DiskUsageReader,
    RowCounter,
    SystemSampler,
)
from probe.collectors.disk_usage import parse_root_utilization
from probe.collectors.nodetool import parse_pending_tasks, parse_table_histograms
from probe.errors import ClusterConnectionError

HISTOGRAM_OUTPUT = (
    "Read latency histogram: 50%: 0.31ms\n"
    "Write latency histogram: 50%: 0.02ms\n"
)
COMPACTION_OUTPUT = "pending tasks: 7\n"
DF_OUTPUT = (
    "Filesystem Size Used Avail Use% Mounted on\n"
    "/dev/sda1 100G 40G 60G 40% /\n"
)


class FakeSampler(SystemSampler):
    def __init__(self, cpu: float = 12.34, memory: float = 56.78, error: Exception | None = None):
        self.cpu = cpu
        self.memory = memory
        self.error = error

    async def cpu_usage(self) -> str:
        if self.error:
            raise self.error
        return f"{self.cpu:.2f}%"

    async def memory_usage(self) -> str:
        return f"{self.memory:.2f}%"


class FakeAdminTool(ClusterAdminTool):
    def __init__(
        self,
        histograms: str = HISTOGRAM_OUTPUT,
        compactions: str = COMPACTION_OUTPUT,
        error: Exception | None = None,
    ):
        self.histograms = histograms
        self.compactions = compactions
        self.error = error
        self.calls: list[tuple] = []

    async def table_histograms(self, keyspace: str, table: str) -> tuple[str, str]:
        self.calls.append(("tablehistograms", keyspace, table))
        if self.error:
            raise self.error
        return parse_table_histograms(self.histograms)

    async def compaction_stats(self) -> int:
        self.calls.append(("compactionstats",))
        return parse_pending_tasks(self.compactions)


class FakeRowCounter(RowCounter):
    def __init__(self, count: int = 3, error: Exception | None = None):
        self.count = count
        self.error = error
        self.calls: list[tuple] = []

    async def count_rows(self, session: Any, keyspace: str, table: str) -> int:
        self.calls.append((session, keyspace, table))
        if self.error:
            raise self.error
        return self.count


class FakeDiskReader(DiskUsageReader):
    def __init__(self, output: str = DF_OUTPUT):
        self.output = output

    async def storage_utilization(self) -> str:
        return parse_root_utilization(self.output)


class FakeSessions:
    """Session factory recording open/close; optionally unreachable."""

    def __init__(self, unreachable: bool = False):
        self.unreachable = unreachable
        self.session = object()
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def __call__(self, settings):
        if self.unreachable:
            raise ClusterConnectionError("cluster session", "Unable to connect to any servers")
        self.opened += 1
        try:
            yield self.session
        finally:
            self.closed += 1
