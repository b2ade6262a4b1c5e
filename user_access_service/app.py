"""User registration FastAPI application.

The application exposes:

- ``POST /users``: register a user from a JSON body holding ``username``
  and ``password``; returns the identifier generated by the store as
  ``{"userId": ...}``.
- ``GET /health``: liveness probe.

The persistence capability is handed to :func:`create_app` and stored on
``app.state``; endpoints receive it through a dependency. Store failures
are not handled here and surface through FastAPI's default error path.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Sequence

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_access_service.database import UserDatabase
from user_access_service.schemas import UserCreate, UserCreated

logger = logging.getLogger(__name__)

ShutdownHook = Callable[[], Awaitable[None]]

ERROR_LOG_KEYS = ("loc", "type", "msg")


def get_database(request: Request) -> UserDatabase:
    """FastAPI dependency returning the database bound to the application."""
    return request.app.state.database


def describe_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Return the validation errors without the rejected input values."""
    return [
        {key: error[key] for key in ERROR_LOG_KEYS if key in error}
        for error in exc.errors()
    ]


def create_app(
    database: UserDatabase,
    *,
    root_path: str = "",
    on_shutdown: Sequence[ShutdownHook] = (),
) -> FastAPI:
    """Build the application around ``database``.

    ``on_shutdown`` coroutines are awaited, in order, when the application
    lifespan ends; the composition root uses it to dispose the pool.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        for hook in on_shutdown:
            await hook()

    app = FastAPI(
        title="User Access Service",
        root_path=root_path,
        lifespan=lifespan,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )
    app.state.database = database

    @app.exception_handler(RequestValidationError)
    async def bad_request_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Answer undecodable request bodies with ``400`` instead of ``422``."""
        logger.info("Rejected request to %s: %s", request.url.path, describe_errors(exc))
        return JSONResponse(status_code=400, content={"detail": "invalid request body"})

    @app.post("/users", response_model=UserCreated)
    async def register(
        user: UserCreate, database: UserDatabase = Depends(get_database)
    ) -> UserCreated:
        """Register a new user.

        Rejects the request with ``400`` when either field is missing or
        empty; the store is not contacted in that case.
        """
        if not user.username or not user.password:
            raise HTTPException(
                status_code=400, detail="username and password are required"
            )

        user_id = await database.create_user(user.username, user.password)
        return UserCreated(user_id=user_id)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        """Health check endpoint returning the service status."""
        return {"status": "ok"}

    return app
