from __future__ import annotations


class CollectorError(Exception):
    """A collection step failed; the probe cannot produce a snapshot."""

    def __init__(self, step: str, message: str) -> None:
        super().__init__(message)
        self.step = step


class ToolError(CollectorError):
    """An external tool could not be spawned, exited non-zero or timed out."""


class RowCountError(CollectorError):
    """The row-count query failed on the driver side."""


class ClusterConnectionError(CollectorError):
    """No session could be opened against the cluster."""
