"""
Business logic for study lists.

A study list is the set of resources a user saved for later.  Adding
the same resource twice is a no-op: the (user_id, resource_id) pair is
the table's primary key and the insert is ``ON CONFLICT DO NOTHING``.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import transaction
from ..core.errors import NotFoundError
from ..schemas.study_list import StudyListEntryRead, StudyListItem

logger = logging.getLogger(__name__)


class StudyListService:
    """Service for per-user study lists."""

    @classmethod
    async def add_entry(
        cls, conn: sqlite3.Connection, user_id: int, resource_id: int
    ) -> StudyListEntryRead:
        """Save a resource to a user's study list.

        Both ids must reference existing rows, otherwise
        ``ConstraintViolationError`` is raised.  Returns the entry
        whether it was just created or already present.
        """
        with transaction(conn, "add study-list entry") as cursor:
            cursor.execute(
                "INSERT INTO study_list (user_id, resource_id) VALUES (?, ?) "
                "ON CONFLICT(user_id, resource_id) DO NOTHING",
                (user_id, resource_id),
            )
            created = cursor.rowcount > 0
        if created:
            logger.info("User %s saved resource %s", user_id, resource_id)
        else:
            logger.info("Resource %s already on study list of user %s", resource_id, user_id)
        return StudyListEntryRead(user_id=user_id, resource_id=resource_id)

    @classmethod
    async def list_entries(
        cls, conn: sqlite3.Connection, user_id: int
    ) -> List[StudyListItem]:
        """Return the resources saved by ``user_id``, newest resource first."""
        rows = conn.execute(
            """
            SELECT r.resource_id, r.resource_name, r.author_name, r.url, r.description,
                   r.content_type, r.build_stage, r.opinion, r.opinion_reason,
                   r.user_id, r.time_date, s.user_id AS saved_by
            FROM study_list s
            JOIN resources r ON r.resource_id = s.resource_id
            WHERE s.user_id = ?
            ORDER BY r.time_date DESC, r.resource_id DESC
            """,
            (user_id,),
        ).fetchall()
        return [StudyListItem(**dict(row)) for row in rows]

    @classmethod
    async def remove_entry(
        cls, conn: sqlite3.Connection, user_id: int, resource_id: int
    ) -> StudyListEntryRead:
        with transaction(conn, "remove study-list entry") as cursor:
            cursor.execute(
                "DELETE FROM study_list WHERE user_id = ? AND resource_id = ?",
                (user_id, resource_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(
                    f"Resource {resource_id} is not on the study list of user {user_id}"
                )
        logger.info("User %s removed resource %s from study list", user_id, resource_id)
        return StudyListEntryRead(user_id=user_id, resource_id=resource_id)
