from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from cassandra import DriverException, OperationTimedOut, RequestExecutionException
from cassandra.cluster import Cluster, NoHostAvailable, Session

from probe.config import Settings
from probe.errors import ClusterConnectionError

logger = logging.getLogger(__name__)

# Exceptions the driver raises for connection and query failures.
DRIVER_ERRORS = (
    DriverException,
    NoHostAvailable,
    OperationTimedOut,
    RequestExecutionException,
)


async def connect(settings: Settings) -> Session:
    """Open a session on ``settings.keyspace``.

    The returned session's ``cluster`` must be shut down with ``close()``.
    """
    cluster = None
    try:
        # contact points are resolved by the constructor
        cluster = Cluster(contact_points=settings.contact_points, port=settings.port)
        session = await asyncio.to_thread(cluster.connect, settings.keyspace)
    except DRIVER_ERRORS as exc:
        if cluster is not None:
            cluster.shutdown()
        raise ClusterConnectionError("cluster session", str(exc)) from exc
    logger.info(
        "Connected to %s (keyspace=%s)",
        ",".join(settings.contact_points), settings.keyspace,
    )
    return session


async def close(session: Session) -> None:
    await asyncio.to_thread(session.cluster.shutdown)
    logger.info("Cluster connection closed")


@asynccontextmanager
async def session_scope(settings: Settings) -> AsyncIterator[Session]:
    """Yield a connected session and shut the cluster down afterwards."""
    session = await connect(settings)
    try:
        yield session
    finally:
        await close(session)
