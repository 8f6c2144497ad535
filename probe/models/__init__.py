from .snapshot import MetricLabel, MetricsSnapshot

__all__ = [
    "MetricLabel",
    "MetricsSnapshot",
]
