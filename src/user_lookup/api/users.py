"""User lookup API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from user_lookup.containers import AppContainer

router = APIRouter(prefix="/api/get", tags=["users"])


@router.get("/users")
def get_user(
    request: Request, user_id: str | None = Query(default=None, alias="userId")
) -> JSONResponse:
    """Return a single user record by id."""
    container: AppContainer = request.app.state.container
    result = container.user_lookup_handler.handle(user_id)
    return JSONResponse(content=result.body, status_code=result.status_code)
