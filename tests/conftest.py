"""
tests.conftest

Shared fixtures.

Responsibilities:
- Build domain boards for engine tests.
- Boot the app against a temporary, seeded SQLite database for API tests.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from shiptivity.api.app import create_app
from shiptivity.board.models import Client, ClientStatus
from shiptivity.settings import Settings

SEED_CLIENTS = [
    {"id": 1, "name": "Stark, White and Abbott", "description": "Cloned", "status": "backlog", "priority": 1},
    {"id": 2, "name": "Wiza LLC", "description": "Exclusive", "status": "backlog", "priority": 2},
    {"id": 3, "name": "Nolan LLC", "description": "Vision-oriented", "status": "backlog", "priority": 3},
    {"id": 4, "name": "Thompson PLC", "description": "Streamlined", "status": "in-progress", "priority": 1},
    {"id": 5, "name": "Walker-Williamson", "description": "Team-oriented", "status": "complete", "priority": 1},
]


def make_client(id: int, status: str, priority: int, name: str | None = None) -> Client:
    return Client(
        id=id,
        name=name or f"client-{id}",
        description="",
        status=ClientStatus(status),
        priority=priority,
    )


@pytest.fixture
def board() -> list[Client]:
    # backlog: 1,2,3 | in-progress: 4,6 | complete: 5
    return [
        make_client(1, "backlog", 1, "A"),
        make_client(2, "backlog", 2, "B"),
        make_client(3, "backlog", 3, "C"),
        make_client(4, "in-progress", 1, "X"),
        make_client(5, "complete", 1, "Z"),
        make_client(6, "in-progress", 2, "Y"),
    ]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    seed = tmp_path / "clients.json"
    seed.write_text(json.dumps(SEED_CLIENTS), encoding="utf-8")
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'clients.db'}",
        seed_file=str(seed),
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not manage lifespan automatically; do it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
