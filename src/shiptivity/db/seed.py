"""
shiptivity.db.seed

Startup seeding of the `clients` table.

Responsibilities:
- Parse a JSON file of clients into domain values.
- Insert them into an empty table, leaving existing data alone.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shiptivity.board.models import Client, ClientStatus
from shiptivity.db.repositories.clients import ClientRepo
from shiptivity.db.session import session_scope
from shiptivity.observability.logging import get_logger

log = get_logger(__name__)


class SeedClient(BaseModel):
    id: int
    name: str
    description: str = ""
    status: ClientStatus
    priority: int = Field(ge=1)

    def to_domain(self) -> Client:
        return Client(
            id=self.id,
            name=self.name,
            description=self.description,
            status=self.status,
            priority=self.priority,
        )


_seed_list = TypeAdapter(list[SeedClient])


def load_seed_file(path: str | Path) -> list[Client]:
    # Raises pydantic.ValidationError on malformed entries; a bad seed should stop startup.
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [entry.to_domain() for entry in _seed_list.validate_python(raw)]


async def seed_clients(
    session_factory: async_sessionmaker[AsyncSession], clients: list[Client]
) -> int:
    """
    Insert `clients` when the table is empty. Returns the number of rows inserted.
    """

    async with session_scope(session_factory) as session:
        repo = ClientRepo(session)
        if await repo.count() > 0:
            log.info("seed_skipped", reason="table_not_empty")
            return 0
        await repo.add_many(clients)
        await session.commit()
    log.info("seeded_clients", count=len(clients))
    return len(clients)


# --- Module Notes -----------------------------------------------------------
# Seed priorities are stored as given; the first reorder touching a lane makes it dense.
