"""
Business logic for comments.

Comments belong to a resource and an author.  They are listed in the
order they were written and deleted one at a time by id.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import transaction
from ..core.errors import NotFoundError
from ..schemas.comment import CommentCreate, CommentRead

logger = logging.getLogger(__name__)


class CommentService:
    """Service for comments on resources."""

    @classmethod
    async def create_comment(
        cls,
        conn: sqlite3.Connection,
        resource_id: int,
        data: CommentCreate,
    ) -> CommentRead:
        """Insert a comment on ``resource_id`` and return the stored row."""
        with transaction(conn, "create comment") as cursor:
            cursor.execute(
                "INSERT INTO comments (comment_body, user_id, resource_id) VALUES (?, ?, ?)",
                (data.comment_body, data.user_id, resource_id),
            )
            comment_id = cursor.lastrowid
            row = cursor.execute(
                "SELECT comment_id, comment_body, user_id, resource_id FROM comments WHERE comment_id = ?",
                (comment_id,),
            ).fetchone()
        logger.info(
            "User %s commented on resource %s (comment %s)",
            data.user_id,
            resource_id,
            comment_id,
        )
        return CommentRead(**dict(row))

    @classmethod
    async def list_comments(
        cls, conn: sqlite3.Connection, resource_id: int
    ) -> List[CommentRead]:
        rows = conn.execute(
            "SELECT comment_id, comment_body, user_id, resource_id FROM comments "
            "WHERE resource_id = ? ORDER BY comment_id ASC",
            (resource_id,),
        ).fetchall()
        return [CommentRead(**dict(row)) for row in rows]

    @classmethod
    async def delete_comment(
        cls, conn: sqlite3.Connection, comment_id: int
    ) -> CommentRead:
        """Delete a single comment and return it.

        Raises ``NotFoundError`` when no comment has this id.
        """
        with transaction(conn, "delete comment") as cursor:
            rows = cursor.execute(
                "DELETE FROM comments WHERE comment_id = ? "
                "RETURNING comment_id, comment_body, user_id, resource_id",
                (comment_id,),
            ).fetchall()
            if not rows:
                raise NotFoundError(f"Comment {comment_id} not found")
        logger.info("Deleted comment %s", comment_id)
        return CommentRead(**dict(rows[0]))
