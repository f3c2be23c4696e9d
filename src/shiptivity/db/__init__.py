"""
shiptivity.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM schema, engine/session setup, seeding, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The board engine never imports from here; records are converted to
# `shiptivity.board.models.Client` at the repository boundary.
