"""One-shot cluster metrics probe.

Usage:
    cluster-probe                              # key-value lines on stdout
    cluster-probe --json                       # one JSON object instead
    cluster-probe --host 10.0.0.5 --host 10.0.0.6 --nodetool-dir /opt/dse/bin

Every option can also be set through ``PROBE_*`` environment variables or a
``.env`` file.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import get_args

from probe.config import LogLevel, Settings
from probe.engine import MetricsCollector
from probe.errors import CollectorError
from probe.models import MetricsSnapshot

logger = logging.getLogger("probe")

LOG_FORMAT = "%(asctime)s [PROBE] %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cluster-probe",
        description="Print host and cluster metrics as key-value lines.",
    )
    parser.add_argument(
        "--host", dest="contact_points", action="append", metavar="ADDRESS",
        help="Cluster contact point (repeatable)",
    )
    parser.add_argument("--port", type=int, help="CQL native port")
    parser.add_argument("--keyspace", help="Keyspace for the session")
    parser.add_argument("--nodetool-dir", help="Directory containing nodetool")
    parser.add_argument(
        "--log-level",
        choices=get_args(LogLevel),
        help="Diagnostic log level (logs go to stderr)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of lines")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line overrides applied."""
    overrides = {}
    for key in ("contact_points", "port", "keyspace", "nodetool_dir", "log_level"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    return Settings(**overrides)


def render(snapshot: MetricsSnapshot, as_json: bool = False) -> str:
    if as_json:
        return json.dumps(snapshot.model_dump(mode="json"))
    return "\n".join(snapshot.lines())


async def run(
    settings: Settings,
    as_json: bool = False,
    collector: MetricsCollector | None = None,
) -> int:
    collector = collector or MetricsCollector(settings)
    try:
        snapshot = await collector.run()
    except CollectorError as exc:
        logger.critical("Failed to get %s: %s", exc.step, exc)
        return 1
    print(render(snapshot, as_json))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, stream=sys.stderr)
    return asyncio.run(run(settings, as_json=args.json))


if __name__ == "__main__":
    sys.exit(main())
