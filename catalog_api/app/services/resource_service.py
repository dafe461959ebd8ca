"""
Business logic for learning resources.

Resources are stored in the ``resources`` table.  Listing returns the
newest submissions first.  Deleting a resource that still has
comments, votes or study-list entries is refused unless the caller
asks for a cascade, in which case the dependents and the resource are
removed in a single transaction.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import transaction
from ..core.errors import (
    AmbiguousMatchError,
    ConflictError,
    ConstraintViolationError,
    NotFoundError,
)
from ..schemas.resource import ResourceCreate, ResourceRead

logger = logging.getLogger(__name__)

RESOURCE_COLUMNS = (
    "resource_id, resource_name, author_name, url, description, content_type, "
    "build_stage, opinion, opinion_reason, user_id, time_date"
)

# Tables whose rows point at a resource and block its deletion.
DEPENDENT_TABLES = ("comments", "likes", "study_list")


class ResourceService:
    """Service for submitting, reading and deleting resources."""

    @classmethod
    async def create_resource(
        cls, conn: sqlite3.Connection, data: ResourceCreate
    ) -> ResourceRead:
        """Insert a resource and return it with its id and timestamp.

        The owning user must exist; otherwise the store rejects the row
        and ``ConstraintViolationError`` is raised.
        """
        with transaction(conn, "create resource") as cursor:
            cursor.execute(
                """
                INSERT INTO resources (resource_name, author_name, url, description,
                    content_type, build_stage, opinion, opinion_reason, user_id)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data.resource_name,
                    data.author_name,
                    data.url,
                    data.description,
                    data.content_type,
                    data.build_stage,
                    data.opinion,
                    data.opinion_reason,
                    data.user_id,
                ),
            )
            resource_id = cursor.lastrowid
            row = cursor.execute(
                f"SELECT {RESOURCE_COLUMNS} FROM resources WHERE resource_id = ?",
                (resource_id,),
            ).fetchone()
        logger.info("User %s submitted resource %s", data.user_id, resource_id)
        return cls._row_to_resource(row)

    @classmethod
    async def list_resources(cls, conn: sqlite3.Connection) -> List[ResourceRead]:
        """Return every resource, newest first.

        Rows created within the same millisecond fall back to id order
        so the result is stable.
        """
        rows = conn.execute(
            f"SELECT {RESOURCE_COLUMNS} FROM resources "
            "ORDER BY time_date DESC, resource_id DESC"
        ).fetchall()
        return [cls._row_to_resource(row) for row in rows]

    @classmethod
    async def get_resource(
        cls, conn: sqlite3.Connection, resource_id: int
    ) -> ResourceRead:
        """Retrieve exactly one resource.

        All matching rows are fetched so that a broken primary key is
        reported as ``AmbiguousMatchError`` instead of silently
        returning the first hit.
        """
        rows = conn.execute(
            f"SELECT {RESOURCE_COLUMNS} FROM resources WHERE resource_id = ?",
            (resource_id,),
        ).fetchall()
        if not rows:
            raise NotFoundError(f"Resource {resource_id} not found")
        if len(rows) > 1:
            logger.error("Resource id %s matched %s rows", resource_id, len(rows))
            raise AmbiguousMatchError(
                f"Resource {resource_id} matched {len(rows)} rows"
            )
        return cls._row_to_resource(rows[0])

    @classmethod
    async def delete_resource(
        cls,
        conn: sqlite3.Connection,
        resource_id: int,
        cascade: bool = False,
    ) -> ResourceRead:
        """Delete a resource and return the removed row.

        Without ``cascade`` the foreign keys on comments, likes and
        study-list entries make the delete fail, which is reported as
        ``ConflictError``.  With ``cascade`` those rows are deleted
        first, inside the same transaction.
        """
        try:
            with transaction(conn, "delete resource") as cursor:
                removed = {}
                if cascade:
                    for table in DEPENDENT_TABLES:
                        cursor.execute(
                            f"DELETE FROM {table} WHERE resource_id = ?",
                            (resource_id,),
                        )
                        removed[table] = cursor.rowcount
                rows = cursor.execute(
                    f"DELETE FROM resources WHERE resource_id = ? RETURNING {RESOURCE_COLUMNS}",
                    (resource_id,),
                ).fetchall()
                if not rows:
                    raise NotFoundError(f"Resource {resource_id} not found")
        except ConstraintViolationError as e:
            raise ConflictError(
                f"Resource {resource_id} still has comments, likes or study-list "
                "entries; delete them first or pass cascade=true"
            ) from e
        if cascade:
            logger.info("Deleted resource %s with dependents %s", resource_id, removed)
        else:
            logger.info("Deleted resource %s", resource_id)
        return cls._row_to_resource(rows[0])

    @staticmethod
    def _row_to_resource(row: sqlite3.Row) -> ResourceRead:
        """Convert a database row to a ResourceRead schema instance."""
        return ResourceRead(**dict(row))
