"""User Routes: five thin adapters between HTTP and the user store.

Invariants:
    - Success → 200; create → 201 with Location /users/{id}
    - UserNotFoundError → 404, UserValidationError → 400 (via error_handlers),
      message passed through verbatim
    - {user_id} must be an int; anything else does not match (404)

Design Decisions:
    - Handlers let store errors propagate to the global RosterError handler
      instead of catching them locally (ADR: uniform error shape)
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from roster.api.dependencies import get_user_store
from roster.core.domain_types import user_location
from roster.core.user_store import UserStore
from roster.schemas.user import UserPayload, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(store: UserStore = Depends(get_user_store)):
    """All users, in insertion order."""
    return [UserResponse.from_domain(u) for u in store.all_users()]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, store: UserStore = Depends(get_user_store)):
    return UserResponse.from_domain(store.get(user_id))


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserPayload,
    response: Response,
    store: UserStore = Depends(get_user_store),
):
    """Create a user. The store assigns the id; any body id is ignored."""
    user = store.create(body.to_domain())
    response.headers["Location"] = user_location(user.id)
    logger.info(f"User {user.id} created", extra={"user_id": user.id})
    return UserResponse.from_domain(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserPayload,
    store: UserStore = Depends(get_user_store),
):
    """Replace username and age. The body id must equal the path id."""
    user = store.update(user_id, body.to_domain())
    logger.info(f"User {user_id} updated", extra={"user_id": user_id})
    return UserResponse.from_domain(user)


@router.delete("/{user_id}")
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)):
    store.delete(user_id)
    logger.info(f"User {user_id} deleted", extra={"user_id": user_id})
    return "User deleted"
