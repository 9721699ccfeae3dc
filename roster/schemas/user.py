"""User Schemas: Pydantic models for the `/users` wire format.

Invariants:
    - Wire shape is {"id": int, "username": str, "userage": int}
    - Missing or null fields bind to empty values so the store's own messages apply
      (a body without "username" gets "Username cannot be empty or whitespace.")
    - Wrong JSON types fail here, before the store is touched

Design Decisions:
    - Strict 32-bit ints: "25" is not an age, true is not an id, 2**31 is out of range
    - Field-level rules (blank username, positive age) live in the store, not here,
      so create and update report their distinct messages
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from roster.core.user_store import User

# 32-bit signed range; larger numbers are not valid ids or ages on the wire
Int32 = Annotated[StrictInt, Field(ge=-2**31, le=2**31 - 1)]


class UserPayload(BaseModel):
    """Request body for POST/PUT. `id` is ignored on create."""
    model_config = ConfigDict(extra="ignore")

    id: Int32 = 0
    username: StrictStr | None = ""
    userage: Int32 = 0

    def to_domain(self) -> User:
        return User(id=self.id, username=self.username, age=self.userage)


class UserResponse(BaseModel):
    """Public-facing user data."""
    id: int
    username: str
    userage: int

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, username=user.username, userage=user.age)
