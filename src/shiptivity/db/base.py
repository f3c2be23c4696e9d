"""
shiptivity.db.base

SQLAlchemy declarative base.

Responsibilities:
- Provide the shared DeclarativeBase for the ORM models.
"""

from __future__ import annotations

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# --- Module Notes -----------------------------------------------------------
# Models must inherit from `Base` so Alembic and `init_db` see them in the metadata.
