"""User endpoints for API v1.  Users are read-only here."""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends

from catalog_api.app.api.errors import no_rows, to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.schemas.user import UserRead
from catalog_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserRead], summary="List users")
async def list_users(conn: sqlite3.Connection = Depends(get_db)) -> List[UserRead]:
    """Return all users ordered by name."""
    try:
        users = await UserService.list_users(conn)
    except sqlite3.Error as e:
        raise to_http_exception(e)
    if not users:
        raise no_rows()
    return users
