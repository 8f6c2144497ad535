from .base import ClusterAdminTool, DiskUsageReader, RowCounter, SystemSampler
from .disk_usage import DfReader
from .nodetool import Nodetool
from .row_counter import CqlRowCounter
from .system_sampler import PsutilSampler

__all__ = [
    "ClusterAdminTool",
    "CqlRowCounter",
    "DfReader",
    "DiskUsageReader",
    "Nodetool",
    "PsutilSampler",
    "RowCounter",
    "SystemSampler",
]
