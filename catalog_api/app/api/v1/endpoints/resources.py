"""
Resource endpoints for API v1.

Resources are listed newest first.  Deleting a resource that still has
comments, votes or study-list entries answers 409 unless
``cascade=true`` is passed.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, Depends, Query, status

from catalog_api.app.api.errors import no_rows, to_http_exception
from catalog_api.app.core.db import get_db
from catalog_api.app.core.errors import CatalogError
from catalog_api.app.schemas.common import DeleteConfirmation
from catalog_api.app.schemas.resource import ResourceCreate, ResourceRead
from catalog_api.app.services.resource_service import ResourceService

router = APIRouter()


@router.post(
    "",
    response_model=ResourceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a resource",
)
async def create_resource(
    data: ResourceCreate,
    conn: sqlite3.Connection = Depends(get_db),
) -> ResourceRead:
    """Create a resource owned by ``user_id``.

    Returns 400 with the store's message if the user does not exist.
    """
    try:
        return await ResourceService.create_resource(conn, data)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.get("", response_model=List[ResourceRead], summary="List resources")
async def list_resources(
    conn: sqlite3.Connection = Depends(get_db),
) -> List[ResourceRead]:
    """Return all resources ordered by submission time, newest first."""
    try:
        resources = await ResourceService.list_resources(conn)
    except sqlite3.Error as e:
        raise to_http_exception(e)
    if not resources:
        raise no_rows()
    return resources


@router.get("/{resource_id}", response_model=ResourceRead, summary="Get a resource")
async def get_resource(
    resource_id: int,
    conn: sqlite3.Connection = Depends(get_db),
) -> ResourceRead:
    try:
        return await ResourceService.get_resource(conn, resource_id)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)


@router.delete(
    "/{resource_id}",
    response_model=DeleteConfirmation,
    summary="Delete a resource",
)
async def delete_resource(
    resource_id: int,
    cascade: bool = Query(False, description="Also delete comments, votes and study-list entries"),
    conn: sqlite3.Connection = Depends(get_db),
) -> DeleteConfirmation:
    try:
        await ResourceService.delete_resource(conn, resource_id, cascade=cascade)
    except (CatalogError, sqlite3.Error) as e:
        raise to_http_exception(e)
    return DeleteConfirmation(message=f"Deleted resource {resource_id}")
