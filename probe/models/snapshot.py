from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel, Field


class MetricLabel(StrEnum):
    """Output labels, declared in print order."""

    CPU = "cpu"
    MEMORY = "memory"
    READ_LATENCY = "read_latency"
    WRITE_LATENCY = "write_latency"
    PENDING_COMPACTIONS = "pending_compactions"
    ACTIVE_CONNECTIONS = "active_connections"
    STORAGE_UTILIZATION = "storage_utilization"


class MetricsSnapshot(BaseModel):
    """Values gathered by a single probe pass."""

    cpu_usage: str
    memory_usage: str
    read_latency: str = ""
    write_latency: str = ""
    pending_compactions: int = Field(0, ge=0)
    active_connections: int = Field(0, ge=0)
    storage_utilization: str = ""
    collected_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    model_config = {"frozen": True}

    def values(self) -> dict[MetricLabel, str | int]:
        return {
            MetricLabel.CPU: self.cpu_usage,
            MetricLabel.MEMORY: self.memory_usage,
            MetricLabel.READ_LATENCY: self.read_latency,
            MetricLabel.WRITE_LATENCY: self.write_latency,
            MetricLabel.PENDING_COMPACTIONS: self.pending_compactions,
            MetricLabel.ACTIVE_CONNECTIONS: self.active_connections,
            MetricLabel.STORAGE_UTILIZATION: self.storage_utilization,
        }

    def lines(self) -> Iterator[str]:
        """Yield ``label: value`` lines in the fixed output order."""
        values = self.values()
        for label in MetricLabel:
            yield f"{label}: {values[label]}"
