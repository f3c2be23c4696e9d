"""
shiptivity.services.client_service

Client board service (transaction + persistence owner).

Responsibilities:
- Read clients for the API (whole board, one lane, one client).
- Run the reorder cycle: load all -> reorder -> persist changes, atomically.
- Serialize writers so concurrent moves never interleave.
"""

from __future__ import annotations

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from shiptivity.board.errors import BoardError, UnknownClient
from shiptivity.board.models import Client, ClientStatus
from shiptivity.board.reorder import changed_clients, parse_status, reorder
from shiptivity.db.repositories.clients import ClientRepo
from shiptivity.observability.logging import get_logger

log = get_logger(__name__)


class ClientService:
    def __init__(self, *, session: AsyncSession, write_lock: asyncio.Lock) -> None:
        self._session = session
        self._write_lock = write_lock
        self._clients = ClientRepo(session)

    async def list_clients(self, status: ClientStatus | str | None = None) -> list[Client]:
        if status is None:
            return await self._clients.list_all()
        return await self._clients.list_by_status(parse_status(status))

    async def get_client(self, client_id: int) -> Client:
        client = await self._clients.get(client_id)
        if client is None:
            raise UnknownClient(client_id)
        return client

    async def update_client(
        self,
        client_id: int,
        *,
        status: ClientStatus | str | None = None,
        priority: int | None = None,
    ) -> list[Client]:
        """
        Move a client and return the whole board afterwards (ordered by id).

        The lock covers the full read-modify-write cycle; the commit makes the batch
        visible all at once. Any failure rolls back before re-raising.
        """

        async with self._write_lock:
            try:
                before = await self._clients.list_all()
                after = reorder(before, client_id, status=status, priority=priority)
                changed = changed_clients(before, after)
                if changed:
                    await self._clients.apply_positions(changed)
                    await self._session.commit()
            except BoardError as e:
                await self._session.rollback()
                log.info("client_reorder_rejected", client_id=client_id, error=str(e))
                raise
            except Exception:
                await self._session.rollback()
                raise

        log.info(
            "client_reordered",
            client_id=client_id,
            status=str(status) if status is not None else None,
            priority=priority,
            changed=len(changed),
        )
        return after


# --- Module Notes -----------------------------------------------------------
# The write lock is per process (created in `api.app`); multi-process deployments rely on
# the database transaction for atomicity of each batch.
