"""Route dependencies: hand the app-scoped store to handlers."""

from fastapi import Request

from roster.core.user_store import UserStore


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store
