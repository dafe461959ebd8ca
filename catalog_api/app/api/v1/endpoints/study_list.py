"""
Study-list endpoints for API v1.

The router is mounted under ``/users/{user_id}/study-list``; every
route therefore receives ``user_id`` from the path.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.errors import no_rows, to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.core.errors import CatalogError
from catalog_api.app.schemas.common import DeleteConfirmation
from catalog_api.app.schemas.study_list import (
    StudyListAdd,
    StudyListEntryRead,
    StudyListItem,
)
from catalog_api.app.services.study_list_service import StudyListService

router = APIRouter()


@router.post(
    "",
    response_model=StudyListEntryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Save a resource to a study list",
)
async def add_entry(
    user_id: int,
    data: StudyListAdd,
    conn: sqlite3.Connection = Depends(get_db),
) -> StudyListEntryRead:
    """Save a resource.  Saving it again returns the same entry."""
    try:
        return await StudyListService.add_entry(conn, user_id, data.resource_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.get("", response_model=List[StudyListItem], summary="List a study list")
async def list_entries(
    user_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> List[StudyListItem]:
    try:
        entries = await StudyListService.list_entries(conn, user_id)
    except sqlite3.Error as e:
        raise to_http_exception(e)
    if not entries:
        raise no_rows()
    return entries


@router.delete(
    "",
    response_model=DeleteConfirmation,
    summary="Remove a resource from a study list",
)
async def remove_entry(
    user_id: int,
    data: StudyListAdd,
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        await StudyListService.remove_entry(conn, user_id, data.resource_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(
        message=f"Deleted resource {data.resource_id} from your study-list"
    )
