"""
shiptivity.services

Service layer package.

Responsibilities:
- Own transactions around board operations.
- Bridge the pure reordering engine and the persistence repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers call services; services call repositories and the board engine.
