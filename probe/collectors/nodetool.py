from __future__ import annotations

import logging
import re
from pathlib import Path

from probe.collectors.base import ClusterAdminTool
from probe.collectors.command import run_command

logger = logging.getLogger(__name__)

READ_LATENCY_PREFIX = "Read latency histogram:"
WRITE_LATENCY_PREFIX = "Write latency histogram:"
PENDING_TASKS_PREFIX = "pending tasks:"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_table_histograms(output: str) -> tuple[str, str]:
    """Extract the read and write latency summaries from ``tablehistograms``.

    Missing lines yield empty strings. When a prefix appears more than once
    the last occurrence wins.
    """
    read_latency = ""
    write_latency = ""
    for line in output.splitlines():
        line = line.strip()
        if line.startswith(READ_LATENCY_PREFIX):
            read_latency = line[len(READ_LATENCY_PREFIX):].strip()
        elif line.startswith(WRITE_LATENCY_PREFIX):
            write_latency = line[len(WRITE_LATENCY_PREFIX):].strip()
    return read_latency, write_latency


def parse_pending_tasks(output: str) -> int:
    """Return the ``pending tasks:`` count, or 0 if absent or unparseable."""
    for line in output.splitlines():
        if not line.startswith(PENDING_TASKS_PREFIX):
            continue
        raw = line[len(PENDING_TASKS_PREFIX):].strip()
        if not _INTEGER.fullmatch(raw):
            logger.debug("Unparseable pending tasks value: %r", raw)
            return 0
        return max(int(raw), 0)
    return 0


class Nodetool(ClusterAdminTool):
    """Runs ``nodetool`` sub-commands and parses their text output."""

    def __init__(self, nodetool_dir: str = "", timeout: float | None = None) -> None:
        self.executable = str(Path(nodetool_dir) / "nodetool")
        self.timeout = timeout

    async def table_histograms(self, keyspace: str, table: str) -> tuple[str, str]:
        output = await run_command(
            [self.executable, "tablehistograms", keyspace, table],
            step="tablehistograms",
            timeout=self.timeout,
        )
        read_latency, write_latency = parse_table_histograms(output)
        logger.debug(
            "Histograms for %s.%s: read=%r write=%r",
            keyspace, table, read_latency, write_latency,
        )
        return read_latency, write_latency

    async def compaction_stats(self) -> int:
        output = await run_command(
            [self.executable, "compactionstats"],
            step="compactionstats",
            timeout=self.timeout,
        )
        pending = parse_pending_tasks(output)
        logger.debug("Pending compactions: %d", pending)
        return pending
