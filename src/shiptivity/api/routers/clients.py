"""
shiptivity.api.routers.clients

Client board endpoints.

Responsibilities:
- List clients (optionally one lane) and fetch one client.
- Move a client to another lane and/or priority and return the whole board.
- Translate board errors into 400/404 responses.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, StrictInt
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from shiptivity.api.deps import client_service
from shiptivity.board.errors import InvalidStatus, UnknownClient
from shiptivity.board.models import Client
from shiptivity.board.reorder import parse_status
from shiptivity.services.client_service import ClientService

router = APIRouter(prefix="/api/v1/clients", tags=["clients"])


class ClientResponse(BaseModel):
    id: int
    name: str
    description: str
    status: str
    priority: int

    @classmethod
    def from_client(cls, client: Client) -> ClientResponse:
        return cls(**client.to_dict())


class ClientUpdateRequest(BaseModel):
    # Both optional; an empty body is a no-op that still returns the board.
    status: str | None = None
    # Strict: JSON `true` or "2" is a schema error, not priority 1 or 2.
    priority: StrictInt | None = None


# Ids are stored as signed 64-bit SQLite INTEGERs.
_MAX_ID = 2**63 - 1


def _parse_id(raw: str) -> int:
    try:
        client_id = int(raw)
    except ValueError:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid id provided.", "long_message": "Id can only be integer."},
        ) from None
    if not -_MAX_ID - 1 <= client_id <= _MAX_ID:
        raise HTTPException(
            status_code=HTTP_404_NOT_FOUND, detail=UnknownClient(client_id).to_detail()
        )
    return client_id


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    status: str | None = None,
    svc: ClientService = Depends(client_service),
) -> list[ClientResponse]:
    try:
        clients = await svc.list_clients(status or None)
    except InvalidStatus as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=e.to_detail()) from e
    return [ClientResponse.from_client(c) for c in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    svc: ClientService = Depends(client_service),
) -> ClientResponse:
    try:
        client = await svc.get_client(_parse_id(client_id))
    except UnknownClient as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=e.to_detail()) from e
    return ClientResponse.from_client(client)


@router.put("/{client_id}", response_model=list[ClientResponse])
async def update_client(
    client_id: str,
    body: ClientUpdateRequest,
    svc: ClientService = Depends(client_service),
) -> list[ClientResponse]:
    """
    Change a client's lane and/or priority.

    priority = 1 is the top of a lane; the rest of the affected lanes are renumbered so no
    two clients in a lane share a priority. Returns every client after the move.
    """

    target_id = _parse_id(client_id)
    if body.priority is not None and body.priority < 1:
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail={
                "message": "Invalid priority provided.",
                "long_message": "Priority can only be positive integer.",
            },
        )

    try:
        # An empty status means "keep the current lane".
        status = parse_status(body.status) if body.status else None
        clients = await svc.update_client(target_id, status=status, priority=body.priority)
    except InvalidStatus as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=e.to_detail()) from e
    except UnknownClient as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=e.to_detail()) from e
    return [ClientResponse.from_client(c) for c in clients]


# --- Module Notes -----------------------------------------------------------
# Validation failures are raised before the service is called, so a rejected request
# never reaches the write path.
