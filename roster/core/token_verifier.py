"""Token Verification: pluggable check for the bearer token carried by every request.

Invariants:
    - Verifiers receive the token with the "Bearer " prefix already removed
    - Verification is a pure yes/no; the token stage owns the 401 responses

Design Decisions:
    - Protocol over ABC: structural subtyping, any object with verify() plugs in
    - StaticTokenVerifier is a placeholder: exact string comparison against one
      configured value, no signature or expiry checks
"""

import hmac
from typing import Protocol


class TokenVerifier(Protocol):
    """Contract for credential verification used by the token stage."""
    def verify(self, token: str) -> bool: ...


class StaticTokenVerifier:
    """Accepts exactly one literal token."""

    def __init__(self, expected: str):
        if not expected:
            raise ValueError("expected token cannot be empty")
        self._expected = expected

    def verify(self, token: str) -> bool:
        return hmac.compare_digest(token.encode(), self._expected.encode())
