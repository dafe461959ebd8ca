"""
Like/dislike endpoints for API v1.

``POST`` casts or changes the caller's vote.  Votes can be cleared for
a whole resource or for a single user; the client picks the variant.
"""

import sqlite3

from fastapi import APIRouter, Depends

from catalog_api.app.api.errors import to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.core.errors import CatalogError
from catalog_api.app.schemas.common import DeleteConfirmation
from catalog_api.app.schemas.like import LikeRead, VoteCreate, VoteTally
from catalog_api.app.services.like_service import LikeService

router = APIRouter()


@router.post(
    "/{resource_id}/likes",
    response_model=LikeRead,
    summary="Like or dislike a resource",
)
async def set_vote(
    resource_id: int,
    data: VoteCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> LikeRead:
    """Record the user's vote, replacing any earlier vote on the resource."""
    try:
        return await LikeService.set_vote(conn, data.user_id, resource_id, data.liked)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.get(
    "/{resource_id}/likes",
    response_model=VoteTally,
    summary="Count likes and dislikes",
)
async def count_votes(
    resource_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> VoteTally:
    try:
        return await LikeService.count_votes(conn, resource_id)
    except sqlite3.Error as e:
        raise to_http_exception(e)


@router.delete(
    "/{resource_id}/likes",
    response_model=DeleteConfirmation,
    summary="Delete every vote on a resource",
)
async def delete_votes_for_resource(
    resource_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        deleted = await LikeService.delete_votes_for_resource(conn, resource_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(
        message=f"Deleted {deleted} likes/dislikes from resource {resource_id}"
    )


@router.delete(
    "/{resource_id}/likes/{user_id}",
    response_model=DeleteConfirmation,
    summary="Delete one user's vote on a resource",
)
async def delete_vote(
    resource_id: int,
    user_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        await LikeService.delete_vote(conn, user_id, resource_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(message=f"Deleted your like/dislike from resource {resource_id}")
