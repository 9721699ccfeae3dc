"""Roster API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - One UserStore and one TokenVerifier per app, held on app.state
    - Pipeline installed last, in PIPELINE order (containment outermost)
    - Logging configured once on startup via the lifespan context manager

Design Decisions:
    - create_app() factory: tests build isolated apps with their own store and
      settings; `app` is the process-wide instance for ASGI servers
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from roster import __version__
from roster.api.error_handlers import register_error_handlers
from roster.api.middleware import install_pipeline
from roster.api.routes import users
from roster.config import Settings, get_settings
from roster.core.token_verifier import StaticTokenVerifier, TokenVerifier
from roster.core.user_store import UserStore
from roster.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Roster API started with {len(app.state.user_store)} user(s)")
    yield
    logger.info("Roster API shutting down")


def create_app(
    settings: Settings | None = None,
    store: UserStore | None = None,
    verifier: TokenVerifier | None = None,
) -> FastAPI:
    """Build a fully wired application."""
    settings = settings or get_settings()
    if store is None:
        store = UserStore(reclaim_usernames=settings.reclaim_usernames)
        if settings.seed_example_users:
            store.seed()

    app = FastAPI(title="Roster API", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.user_store = store
    app.state.token_verifier = verifier or StaticTokenVerifier(settings.api_token)

    app.include_router(users.router)

    register_error_handlers(app)
    install_pipeline(app)
    return app


app = create_app()
