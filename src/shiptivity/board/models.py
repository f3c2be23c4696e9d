"""
shiptivity.board.models

Board domain types.

Responsibilities:
- Define the three fixed status lanes.
- Define the immutable `Client` record the reordering engine works on.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ClientStatus(enum.StrEnum):
    # Declaration order is the board's left-to-right lane order.
    backlog = "backlog"
    in_progress = "in-progress"
    complete = "complete"


@dataclass(frozen=True, slots=True)
class Client:
    """
    A work item on the board.

    `priority` is the 1-based position inside the client's lane (1 = top).
    """

    id: int
    name: str
    description: str
    status: ClientStatus
    priority: int

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority,
        }


# --- Module Notes -----------------------------------------------------------
# Frozen dataclasses force the engine to build new values with `dataclasses.replace`,
# so a caller's snapshot is never modified in place.
