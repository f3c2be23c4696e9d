"""
shiptivity.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for DB sessions and services.
- Encapsulate app.state access patterns (sessionmaker, write lock).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from shiptivity.services.client_service import ClientService


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `shiptivity.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def client_service(
    request: Request,
    session: AsyncSession = Depends(db_session),
) -> ClientService:
    # One write lock per app instance serializes every reorder cycle.
    return ClientService(session=session, write_lock=request.app.state.write_lock)
