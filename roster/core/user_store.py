"""User Store: in-memory id map plus username uniqueness index.

Invariants:
    - At most one user per id; ids are max(existing) + 1, or 1 when empty
    - Ids are never reused: the high-water mark survives deletes
    - A username is checked against the index before an id is assigned
    - Every public operation runs inside one lock covering map AND index
    - Callers receive copies; stored records are never handed out

Design Decisions:
    - Stale index by default: a deleted or renamed username stays reserved and
      can never be created again. This mirrors the behavior the service has always
      had. reclaim_usernames=True keeps the index in lock-step with the map instead
      (release on delete, swap on rename, reject renames onto a taken name).
    - update() does not re-check uniqueness in the default mode, for the same reason
    - threading.Lock over asyncio.Lock: operations never await, and sync route
      handlers may run on the threadpool
"""

import threading
from dataclasses import dataclass, replace

from roster.core.domain_types import FIRST_USER_ID, UserId
from roster.core.errors import UserNotFoundError, UserValidationError


@dataclass
class User:
    """One person. `age` travels as `userage` on the wire."""
    id: int
    username: str
    age: int


EXAMPLE_USERS = (
    ("alice", 25),
    ("bob", 30),
    ("charlie", 35),
    ("diana", 28),
    ("edward", 40),
)


class UserStore:
    """Process-wide user collection. Pure: no IO, no logging."""

    def __init__(self, reclaim_usernames: bool = False):
        self.reclaim_usernames = reclaim_usernames
        self._users: dict[int, User] = {}
        self._usernames: set[str] = set()
        # Highest id ever assigned. Keeps ids monotonic after the max is deleted.
        self._high_water = 0
        self._lock = threading.Lock()

    def all_users(self) -> list[User]:
        """Every stored user, in insertion order."""
        with self._lock:
            return [replace(u) for u in self._users.values()]

    def get(self, user_id: int) -> User:
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return replace(user)

    def create(self, candidate: User) -> User:
        """Validate, assign the next id and store. candidate.id is ignored."""
        with self._lock:
            _check_username(candidate.username, "Username cannot be empty or whitespace.")
            _check_age(candidate.age)
            if candidate.username in self._usernames:
                raise UserValidationError("Username must be unique.", "username")

            user = User(
                id=self._next_id(),
                username=candidate.username,
                age=candidate.age,
            )
            self._usernames.add(user.username)
            self._users[user.id] = user
            self._high_water = user.id
            return replace(user)

    def update(self, user_id: int, candidate: User) -> User:
        """Overwrite the record at user_id. The body id must match the path id."""
        with self._lock:
            if candidate.id != user_id:
                raise UserValidationError(
                    "User Id in the body does not match the Id in the URL.", "id",
                )
            current = self._users.get(user_id)
            if current is None:
                raise UserNotFoundError(
                    user_id, f"User with Id {user_id} not found.",
                )
            _check_username(candidate.username, "Username cannot be empty.")
            _check_age(candidate.age)

            if self.reclaim_usernames and candidate.username != current.username:
                if candidate.username in self._usernames:
                    raise UserValidationError("Username must be unique.", "username")
                self._usernames.discard(current.username)
                self._usernames.add(candidate.username)

            user = User(id=user_id, username=candidate.username, age=candidate.age)
            self._users[user_id] = user
            return replace(user)

    def delete(self, user_id: int) -> None:
        with self._lock:
            user = self._users.pop(user_id, None)
            if user is None:
                raise UserNotFoundError(user_id)
            if self.reclaim_usernames:
                self._usernames.discard(user.username)

    def seed(self, examples=EXAMPLE_USERS) -> list[User]:
        """Load (username, age) pairs through the normal create path."""
        return [self.create(User(id=0, username=name, age=age)) for name, age in examples]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _next_id(self) -> UserId:
        # Caller holds the lock. Every stored id came through here, so the
        # high-water mark is always >= max(self._users).
        if not self._high_water:
            return FIRST_USER_ID
        return UserId(self._high_water + 1)


def _check_username(username: str | None, message: str) -> None:
    if username is None or not username.strip():
        raise UserValidationError(message, "username")


def _check_age(age: int) -> None:
    if age <= 0:
        raise UserValidationError("Userage must be greater than 0.", "userage")
