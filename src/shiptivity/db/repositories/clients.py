"""
shiptivity.db.repositories.clients

Repository for `ClientRecord` entities.

Responsibilities:
- Read clients as domain `Client` values (whole board, one lane, one id).
- Write back the status/priority of reordered clients.
- Bulk insert for seeding.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiptivity.board.models import Client, ClientStatus
from shiptivity.db.models import ClientRecord


class ClientRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Client]:
        stmt = select(ClientRecord).order_by(ClientRecord.id)
        rows = (await self._session.execute(stmt)).scalars().all()
        return [row.to_domain() for row in rows]

    async def list_by_status(self, status: ClientStatus) -> list[Client]:
        stmt = (
            select(ClientRecord)
            .where(ClientRecord.status == status)
            .order_by(ClientRecord.priority, ClientRecord.id)
        )
        rows = (await self._session.execute(stmt)).scalars().all()
        return [row.to_domain() for row in rows]

    async def get(self, client_id: int) -> Client | None:
        row = await self._session.get(ClientRecord, client_id)
        return row.to_domain() if row is not None else None

    async def count(self) -> int:
        stmt = select(func.count()).select_from(ClientRecord)
        return int((await self._session.execute(stmt)).scalar_one())

    async def add_many(self, clients: Iterable[Client]) -> None:
        self._session.add_all(
            ClientRecord(
                id=c.id,
                name=c.name,
                description=c.description,
                status=c.status,
                priority=c.priority,
            )
            for c in clients
        )
        await self._session.flush()

    async def apply_positions(self, clients: Iterable[Client]) -> int:
        """
        Write status/priority for each client and flush; the caller commits.

        Rows already loaded in this session come from the identity map, so a batch that
        follows `list_all` issues UPDATEs only.
        """

        written = 0
        for client in clients:
            row = await self._session.get(ClientRecord, client.id)
            if row is None:
                continue
            row.status = client.status
            row.priority = client.priority
            written += 1
        await self._session.flush()
        return written


# --- Module Notes -----------------------------------------------------------
# Name/description are never touched by `apply_positions`; the board only moves clients.
