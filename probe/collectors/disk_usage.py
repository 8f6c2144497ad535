from __future__ import annotations

import logging

from probe.collectors.base import DiskUsageReader
from probe.collectors.command import run_command

logger = logging.getLogger(__name__)


def parse_root_utilization(output: str, mount: str = "/") -> str:
    """Return the ``Use%`` column of the row mounted on ``mount``.

    Rows are ``Filesystem Size Used Avail Use% Mounted-on``; an empty string
    is returned when no row matches.
    """
    for line in output.splitlines():
        fields = line.split()
        if len(fields) >= 6 and fields[5] == mount:
            return fields[4]
    return ""


class DfReader(DiskUsageReader):
    """Reads filesystem utilization from ``df``."""

    def __init__(
        self,
        command: str = "df",
        flag: str = "-h",
        mount: str = "/",
        timeout: float | None = None,
    ) -> None:
        self.command = command
        self.flag = flag
        self.mount = mount
        self.timeout = timeout

    async def storage_utilization(self) -> str:
        output = await run_command(
            [self.command, self.flag],
            step="storage space utilization",
            timeout=self.timeout,
        )
        utilization = parse_root_utilization(output, self.mount)
        logger.debug("Utilization of %s: %r", self.mount, utilization)
        return utilization
