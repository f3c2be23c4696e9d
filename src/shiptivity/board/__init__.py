"""
shiptivity.board

Board domain package.

Responsibilities:
- Client/lane domain types.
- The pure reordering engine that keeps lane priorities dense.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; persistence lives in `shiptivity.db`.
