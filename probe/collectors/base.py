from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SystemSampler(ABC):
    """Instantaneous host utilization readings."""

    @abstractmethod
    async def cpu_usage(self) -> str:
        ...

    @abstractmethod
    async def memory_usage(self) -> str:
        ...


class ClusterAdminTool(ABC):
    """Wrapper around the cluster administration CLI."""

    @abstractmethod
    async def table_histograms(self, keyspace: str, table: str) -> tuple[str, str]:
        """Return ``(read_latency, write_latency)`` for one table."""
        ...

    @abstractmethod
    async def compaction_stats(self) -> int:
        """Return the number of pending compaction tasks."""
        ...


class RowCounter(ABC):
    """Runs a count query over an open session."""

    @abstractmethod
    async def count_rows(self, session: Any, keyspace: str, table: str) -> int:
        ...


class DiskUsageReader(ABC):
    """Reports filesystem utilization of the root mount."""

    @abstractmethod
    async def storage_utilization(self) -> str:
        ...
