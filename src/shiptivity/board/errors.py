"""
shiptivity.board.errors

Error taxonomy for board operations.

Responsibilities:
- Signal precondition failures detected before any reordering happens.
- Carry user-facing message text for the API layer.
"""

from __future__ import annotations

from typing import Any


class BoardError(Exception):
    message: str = "Invalid request."
    long_message: str = ""

    def to_detail(self) -> dict[str, str]:
        return {"message": self.message, "long_message": self.long_message}


class UnknownClient(BoardError):
    message = "Invalid id provided."
    long_message = "Cannot find client with that id."

    def __init__(self, client_id: int) -> None:
        super().__init__(f"client {client_id} not found")
        self.client_id = client_id


class InvalidStatus(BoardError):
    message = "Invalid status provided."
    long_message = (
        "Status can only be one of the following: [backlog | in-progress | complete]."
    )

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid status: {value!r}")
        self.value = value
