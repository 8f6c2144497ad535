from __future__ import annotations

import logging

import psutil

from probe.collectors.base import SystemSampler
from probe.errors import CollectorError

logger = logging.getLogger(__name__)


class PsutilSampler(SystemSampler):
    """Samples host CPU and memory utilization through psutil."""

    async def cpu_usage(self) -> str:
        try:
            percent = psutil.cpu_percent(interval=0)
        except (psutil.Error, OSError) as exc:
            raise CollectorError("CPU usage", str(exc)) from exc
        logger.debug("CPU sample: %.2f", percent)
        return f"{percent:.2f}%"

    async def memory_usage(self) -> str:
        try:
            percent = psutil.virtual_memory().percent
        except (psutil.Error, OSError) as exc:
            raise CollectorError("memory usage", str(exc)) from exc
        logger.debug("Memory sample: %.2f", percent)
        return f"{percent:.2f}%"
