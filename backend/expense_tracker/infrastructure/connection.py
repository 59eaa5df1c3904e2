"""Connection Manager - one shared MongoDB connection, established exactly once.

Invariants:
    - However many callers race on first use, the client is built and pinged once
    - Every caller observes the same MongoConnection, or the same StorageUnavailableError
    - A failed establishment is final for the manager's lifetime (no reconnect, no retry)
    - After the first attempt completes, get_connection() takes no lock

Design Decisions:
    - Double-checked asyncio.Lock: the first caller connects, concurrent callers wait on the lock
    - Manager is constructed by the FastAPI lifespan and injected via app.state (no module global)
    - client_factory injectable so tests can count connect attempts without a server
    - Every driver call inherits timeoutMS from the client (per-operation budget)
"""

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from expense_tracker.core.errors import StorageUnavailableError
from expense_tracker.infrastructure.codecs import build_codec_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MongoConnection:
    """Established client plus the configured database handle."""
    client: Any
    database: Any


class MongoConnectionManager:
    """Owns the process-wide MongoDB client and its one-time initialization."""

    def __init__(
        self,
        uri: str,
        database_name: str,
        server_selection_timeout_ms: int = 5_000,
        operation_timeout_ms: int = 10_000,
        client_factory: Callable[..., Any] = AsyncMongoClient,
    ):
        self.uri = uri
        self.database_name = database_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.operation_timeout_ms = operation_timeout_ms
        self._client_factory = client_factory
        self._lock = asyncio.Lock()
        self._initialized = False
        self._connection: MongoConnection | None = None
        self._error: StorageUnavailableError | None = None
        self.connect_attempts = 0

    async def get_connection(self) -> MongoConnection:
        """Return the shared connection, connecting on first use."""
        if not self._initialized:
            async with self._lock:
                if not self._initialized:
                    await self._establish()
                    self._initialized = True
        return self._cached()

    def _cached(self) -> MongoConnection:
        if self._error is not None:
            raise self._error
        return self._connection

    async def _establish(self) -> None:
        self.connect_attempts += 1
        client = None
        try:
            client = self._client_factory(
                self.uri,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                timeoutMS=self.operation_timeout_ms,
            )
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(
                f"MongoDB connection failed: {e}",
                extra={"operation": "connect"},
            )
            self._error = StorageUnavailableError(str(e))
            if client is not None:
                await client.close()
            return
        database = client.get_database(
            self.database_name, codec_options=build_codec_options(),
        )
        self._connection = MongoConnection(client=client, database=database)
        logger.info(f"MongoDB connected, database '{self.database_name}'")

    async def health_check(self) -> bool:
        """Ping the server (for readiness probes). Never raises."""
        if not self._initialized or self._connection is None:
            return False
        try:
            await self._connection.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"MongoDB health check failed: {e}")
            return False

    async def close(self) -> None:
        if self._connection is not None:
            await self._connection.client.close()
            logger.info("MongoDB connection closed")


async def get_database(request: Request) -> Any:
    """FastAPI dependency: the shared database handle from the app's manager."""
    manager: MongoConnectionManager | None = getattr(
        request.app.state, "connection_manager", None,
    )
    if manager is None:
        raise RuntimeError("Database not initialized")
    connection = await manager.get_connection()
    return connection.database
