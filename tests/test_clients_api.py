"""
tests.test_clients_api

HTTP-level tests for the client board endpoints.

Responsibilities:
- Exercise list/get/update against a seeded SQLite database.
- Verify rejected requests leave the stored board unchanged.
- Verify concurrent moves keep every lane dense.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import httpx
import pytest
from pydantic import ValidationError

from shiptivity.api.app import create_app
from shiptivity.board.models import Client, ClientStatus
from shiptivity.board.reorder import is_dense
from shiptivity.db.seed import load_seed_file
from shiptivity.settings import Settings


def _board(payload: list[dict]) -> list[Client]:
    return [
        Client(
            id=c["id"],
            name=c["name"],
            description=c["description"],
            status=ClientStatus(c["status"]),
            priority=c["priority"],
        )
        for c in payload
    ]


def _positions(payload: list[dict]) -> dict[int, tuple[str, int]]:
    return {c["id"]: (c["status"], c["priority"]) for c in payload}


async def _all(client: httpx.AsyncClient) -> list[dict]:
    r = await client.get("/api/v1/clients")
    assert r.status_code == 200
    return r.json()


@pytest.mark.asyncio
async def test_list_clients(client: httpx.AsyncClient) -> None:
    clients = await _all(client)
    assert [c["id"] for c in clients] == [1, 2, 3, 4, 5]
    assert clients[3] == {
        "id": 4,
        "name": "Thompson PLC",
        "description": "Streamlined",
        "status": "in-progress",
        "priority": 1,
    }


@pytest.mark.asyncio
async def test_list_clients_by_status(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/v1/clients", params={"status": "backlog"})
    assert r.status_code == 200
    assert [(c["id"], c["priority"]) for c in r.json()] == [(1, 1), (2, 2), (3, 3)]


@pytest.mark.asyncio
async def test_list_clients_invalid_status(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/v1/clients", params={"status": "done"})
    assert r.status_code == 400
    assert r.json()["detail"]["message"] == "Invalid status provided."


@pytest.mark.asyncio
async def test_list_clients_empty_status_lists_all(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/v1/clients", params={"status": ""})
    assert r.status_code == 200
    assert [c["id"] for c in r.json()] == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_get_client(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/v1/clients/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Wiza LLC"


@pytest.mark.asyncio
async def test_get_client_errors(client: httpx.AsyncClient) -> None:
    r = await client.get("/api/v1/clients/abc")
    assert r.status_code == 400
    assert r.json()["detail"]["long_message"] == "Id can only be integer."

    r = await client.get("/api/v1/clients/999")
    assert r.status_code == 404
    assert r.json()["detail"]["long_message"] == "Cannot find client with that id."

    # Past the signed 64-bit range no row can exist.
    for raw in ("99999999999999999999999", "-99999999999999999999999"):
        r = await client.get(f"/api/v1/clients/{raw}")
        assert r.status_code == 404
        assert r.json()["detail"]["long_message"] == "Cannot find client with that id."


@pytest.mark.asyncio
async def test_update_priority_within_lane(client: httpx.AsyncClient) -> None:
    r = await client.put("/api/v1/clients/3", json={"priority": 1})
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 5
    assert _positions(body) == {
        1: ("backlog", 2),
        2: ("backlog", 3),
        3: ("backlog", 1),
        4: ("in-progress", 1),
        5: ("complete", 1),
    }

    # Persisted, not just returned.
    assert _positions(await _all(client)) == _positions(body)


@pytest.mark.asyncio
async def test_update_status_appends_to_lane(client: httpx.AsyncClient) -> None:
    r = await client.put("/api/v1/clients/1", json={"status": "in-progress"})
    assert r.status_code == 200
    positions = _positions(r.json())
    assert positions[1] == ("in-progress", 2)
    assert positions[2] == ("backlog", 1)
    assert positions[3] == ("backlog", 2)
    assert positions[4] == ("in-progress", 1)


@pytest.mark.asyncio
async def test_update_status_and_priority(client: httpx.AsyncClient) -> None:
    r = await client.put("/api/v1/clients/1", json={"status": "in-progress", "priority": 1})
    assert r.status_code == 200
    positions = _positions(await _all(client))
    assert positions[1] == ("in-progress", 1)
    assert positions[4] == ("in-progress", 2)
    assert positions[2] == ("backlog", 1)


@pytest.mark.asyncio
async def test_update_empty_body_is_noop(client: httpx.AsyncClient) -> None:
    before = await _all(client)
    r = await client.put("/api/v1/clients/2", json={})
    assert r.status_code == 200
    assert r.json() == before


@pytest.mark.asyncio
async def test_update_empty_status_keeps_lane(client: httpx.AsyncClient) -> None:
    r = await client.put("/api/v1/clients/2", json={"status": "", "priority": 1})
    assert r.status_code == 200
    positions = _positions(r.json())
    assert positions[2] == ("backlog", 1)
    assert positions[1] == ("backlog", 2)


@pytest.mark.asyncio
@pytest.mark.parametrize("priority", [True, "2", 2.0, 1.5])
async def test_update_rejects_non_integer_priority(
    client: httpx.AsyncClient, priority: object
) -> None:
    before = await _all(client)

    r = await client.put("/api/v1/clients/3", json={"priority": priority})
    assert r.status_code == 422

    assert await _all(client) == before


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("path", "payload", "status_code", "message"),
    [
        ("/api/v1/clients/1", {"status": "done"}, 400, "Invalid status provided."),
        ("/api/v1/clients/9999", {"status": "complete"}, 404, "Invalid id provided."),
        ("/api/v1/clients/x1", {"priority": 1}, 400, "Invalid id provided."),
        ("/api/v1/clients/99999999999999999999999", {"priority": 1}, 404, "Invalid id provided."),
        ("/api/v1/clients/1", {"priority": 0}, 400, "Invalid priority provided."),
        ("/api/v1/clients/1", {"priority": -3}, 400, "Invalid priority provided."),
    ],
)
async def test_rejected_update_leaves_board_unchanged(
    client: httpx.AsyncClient,
    path: str,
    payload: dict,
    status_code: int,
    message: str,
) -> None:
    before = await _all(client)

    r = await client.put(path, json=payload)
    assert r.status_code == status_code
    assert r.json()["detail"]["message"] == message

    assert await _all(client) == before


@pytest.mark.asyncio
async def test_concurrent_moves_keep_lanes_dense(client: httpx.AsyncClient) -> None:
    moves = [
        (3, {"priority": 1}),
        (1, {"status": "complete"}),
        (2, {"status": "in-progress", "priority": 1}),
        (4, {"status": "backlog"}),
        (5, {"priority": 1}),
        (3, {"status": "complete", "priority": 1}),
        (1, {"status": "backlog", "priority": 2}),
    ]

    responses = await asyncio.gather(
        *(client.put(f"/api/v1/clients/{cid}", json=body) for cid, body in moves)
    )
    assert all(r.status_code == 200 for r in responses)
    for r in responses:
        assert is_dense(_board(r.json()))

    final = await _all(client)
    assert len(final) == 5
    assert is_dense(_board(final))


@pytest.mark.asyncio
async def test_restart_keeps_moves_and_skips_seed(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    r = await client.put("/api/v1/clients/5", json={"status": "backlog", "priority": 1})
    assert r.status_code == 200
    expected = _positions(r.json())

    app = create_app(settings=settings)
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as other:
            assert _positions(await _all(other)) == expected


def test_load_seed_file_rejects_bad_status(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps([{"id": 1, "name": "n", "status": "done", "priority": 1}]), encoding="utf-8"
    )
    with pytest.raises(ValidationError):
        load_seed_file(path)


def test_load_seed_file_defaults_description(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(
        json.dumps([{"id": 7, "name": "n", "status": "in-progress", "priority": 1}]),
        encoding="utf-8",
    )
    assert load_seed_file(path) == [
        Client(id=7, name="n", description="", status=ClientStatus.in_progress, priority=1)
    ]
