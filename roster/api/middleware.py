"""Request Pipeline: the three ordered stages every request passes through.

    Request → [contain_exceptions] → [validate_token] → [log_requests] → route handler

Invariants:
    - PIPELINE is listed outermost first and is installed exactly in that order
    - contain_exceptions is the ONLY place that suppresses arbitrary exceptions;
      it never re-raises and always answers 500 with INTERNAL_ERROR_BODY
    - validate_token short-circuits with 401 before any route handler (or the store)
      runs; no path is exempt
    - log_requests never short-circuits and never alters the response

Design Decisions:
    - Stages are plain `async def stage(request, call_next)` functions: each takes
      "the rest of the chain" as call_next, no base class needed
    - The verifier is read from app.state so it can be swapped without touching
      the stage (ADR: pluggable credential check)
    - 401 bodies are plain text, the 500 body is JSON
"""

import logging
from typing import Awaitable, Callable, Sequence

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from roster.core.domain_types import BEARER_PREFIX
from roster.core.errors import INTERNAL_ERROR_BODY, InvalidTokenError
from roster.core.token_verifier import TokenVerifier

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]


async def contain_exceptions(request: Request, call_next: CallNext) -> Response:
    """Outermost stage: convert any downstream fault into a fixed 500."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {exc!r}",
            exc_info=True,
            extra={
                "method": request.method,
                "path": request.url.path,
                "error_code": "INTERNAL_ERROR",
            },
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )


async def validate_token(request: Request, call_next: CallNext) -> Response:
    """Require `Authorization: Bearer <token>` and a verifier-approved token."""
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        return _unauthorized(request, InvalidTokenError(InvalidTokenError.MISSING))

    token = header[len(BEARER_PREFIX):]
    verifier: TokenVerifier = request.app.state.token_verifier
    if not verifier.verify(token):
        return _unauthorized(request, InvalidTokenError(InvalidTokenError.REJECTED))

    return await call_next(request)


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Innermost stage: record method/path, then the resulting status."""
    logger.info(
        f"{request.method} {request.url.path}",
        extra={"method": request.method, "path": request.url.path},
    )
    response = await call_next(request)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
        },
    )
    return response


# Outermost first. Order is load-bearing: containment must see faults raised by
# the token and logging stages too, and the token check must precede handlers.
PIPELINE: tuple[Stage, ...] = (contain_exceptions, validate_token, log_requests)


def install_pipeline(app: FastAPI, stages: Sequence[Stage] = PIPELINE) -> None:
    """Register stages so that stages[0] is the outermost middleware."""
    # Starlette wraps the most recently added middleware around the others.
    for stage in reversed(stages):
        app.add_middleware(BaseHTTPMiddleware, dispatch=stage)


def _unauthorized(request: Request, exc: InvalidTokenError) -> Response:
    logger.warning(
        f"Rejected {request.method} {request.url.path}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_code": exc.code,
        },
    )
    return PlainTextResponse(exc.message, status_code=exc.http_status)
