"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int; ids are positive and assigned only by the store
    - BEARER_PREFIX is the single source for the Authorization scheme prefix

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

FIRST_USER_ID = UserId(1)


# ─── Wire Constants ──────────────────────────────────────────────

BEARER_PREFIX = "Bearer "           # case-sensitive, includes the space
USERS_PATH = "/users"


def user_location(user_id: int) -> str:
    """Location reference for a stored user."""
    return f"{USERS_PATH}/{user_id}"
