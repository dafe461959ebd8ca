"""Tag endpoints for API v1.  Tags are addressed by name in the body."""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.errors import no_rows, to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.core.errors import CatalogError
from catalog_api.app.schemas.common import DeleteConfirmation
from catalog_api.app.schemas.tag import TagCreate, TagRead
from catalog_api.app.services.tag_service import TagService

router = APIRouter()


@router.post("", response_model=TagRead, status_code=status.HTTP_201_CREATED)
async def create_tag(
    data: TagCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> TagRead:
    """Create a tag.  Existing names answer 400 and are left unchanged."""
    try:
        return await TagService.create_tag(conn, data.tag_name)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.get("", response_model=List[TagRead])
async def list_tags(conn: sqlite3.Connection = Depends(get_db)) -> List[TagRead]:
    try:
        tags = await TagService.list_tags(conn)
    except sqlite3.Error as e:
        raise to_http_exception(e)
    if not tags:
        raise no_rows()
    return tags


@router.delete("", response_model=DeleteConfirmation)
async def delete_tag(
    data: TagCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        await TagService.delete_tag(conn, data.tag_name)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(message=f"Deleted the tag {data.tag_name}")
