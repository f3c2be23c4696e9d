"""
shiptivity.db.models

Persistence schema for the client board.

Responsibilities:
- Define the `clients` table and its conversion to the domain `Client`.
"""

from __future__ import annotations

from sqlalchemy import Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shiptivity.board.models import Client, ClientStatus
from shiptivity.db.base import Base


class ClientRecord(Base):
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Stored as the lane string ("in-progress"), not the Python member name.
    status: Mapped[ClientStatus] = mapped_column(
        Enum(
            ClientStatus,
            name="client_status",
            native_enum=False,
            length=32,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
    )
    priority: Mapped[int] = mapped_column(Integer, nullable=False)

    # Not unique: a renumbering batch passes through duplicates before it commits.
    __table_args__ = (Index("ix_clients_status_priority", "status", "priority"),)

    def to_domain(self) -> Client:
        return Client(
            id=self.id,
            name=self.name,
            description=self.description,
            status=ClientStatus(self.status),
            priority=self.priority,
        )


# --- Module Notes -----------------------------------------------------------
# Column names match the original `clients` table so existing databases can be reused.
