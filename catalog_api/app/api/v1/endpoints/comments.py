"""Comment endpoints for API v1."""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.errors import no_rows, to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.core.errors import CatalogError
from catalog_api.app.schemas.comment import CommentCreate, CommentRead
from catalog_api.app.schemas.common import DeleteConfirmation
from catalog_api.app.services.comment_service import CommentService

router = APIRouter()


@router.post(
    "/{resource_id}/comments",
    response_model=CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a resource",
)
async def create_comment(
    resource_id: int,
    data: CommentCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> CommentRead:
    try:
        return await CommentService.create_comment(conn, resource_id, data)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.get(
    "/{resource_id}/comments",
    response_model=List[CommentRead],
    summary="List comments on a resource",
)
async def list_comments(
    resource_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> List[CommentRead]:
    try:
        comments = await CommentService.list_comments(conn, resource_id)
    except sqlite3.Error as e:
        raise to_http_exception(e)
    if not comments:
        raise no_rows()
    return comments


@router.delete(
    "/comments/{comment_id}",
    response_model=DeleteConfirmation,
    summary="Delete a comment",
)
async def delete_comment(
    comment_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        await CommentService.delete_comment(conn, comment_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(message=f"Deleted comment {comment_id}")
