"""
Business logic for like/dislike votes.

A user holds at most one vote per resource.  The vote row moves
between three states: absent, liked and disliked.  ``set_vote`` is the
only transition and is executed as one ``INSERT ... ON CONFLICT DO
UPDATE`` statement keyed on (user_id, resource_id), so two concurrent
votes from the same user can never both insert.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Optional

from ..core.db import transaction
from ..core.errors import NotFoundError
from ..schemas.like import LikeRead, VoteTally

logger = logging.getLogger(__name__)


class LikeService:
    """Service for casting, reading and clearing votes."""

    @classmethod
    async def set_vote(
        cls,
        conn: sqlite3.Connection,
        user_id: int,
        resource_id: int,
        liked: bool,
    ) -> LikeRead:
        """Record ``liked`` as the user's vote on a resource.

        Inserts the vote if the user has not voted yet, otherwise
        overwrites the previous value.  Returns the resulting row.
        Unknown users or resources raise ``ConstraintViolationError``.
        """
        with transaction(conn, "set vote") as cursor:
            rows = cursor.execute(
                """
                INSERT INTO likes (user_id, resource_id, liked) VALUES (?, ?, ?)
                ON CONFLICT(user_id, resource_id) DO UPDATE SET liked = excluded.liked
                RETURNING user_id, resource_id, liked
                """,
                (user_id, resource_id, 1 if liked else 0),
            ).fetchall()
        logger.info(
            "User %s %s resource %s",
            user_id,
            "liked" if liked else "disliked",
            resource_id,
        )
        return cls._row_to_like(rows[0])

    @classmethod
    async def get_vote(
        cls, conn: sqlite3.Connection, user_id: int, resource_id: int
    ) -> Optional[LikeRead]:
        """Return the user's vote on a resource, or ``None`` if absent."""
        row = conn.execute(
            "SELECT user_id, resource_id, liked FROM likes WHERE user_id = ? AND resource_id = ?",
            (user_id, resource_id),
        ).fetchone()
        if row is None:
            return None
        return cls._row_to_like(row)

    @classmethod
    async def count_votes(cls, conn: sqlite3.Connection, resource_id: int) -> VoteTally:
        row = conn.execute(
            """
            SELECT COALESCE(SUM(liked), 0) AS likes,
                   COALESCE(SUM(1 - liked), 0) AS dislikes
            FROM likes WHERE resource_id = ?
            """,
            (resource_id,),
        ).fetchone()
        return VoteTally(resource_id=resource_id, likes=row["likes"], dislikes=row["dislikes"])

    @classmethod
    async def delete_votes_for_resource(
        cls, conn: sqlite3.Connection, resource_id: int
    ) -> int:
        """Remove every user's vote on a resource.

        Returns the number of rows removed; raises ``NotFoundError``
        if the resource had no votes.
        """
        with transaction(conn, "delete votes") as cursor:
            cursor.execute("DELETE FROM likes WHERE resource_id = ?", (resource_id,))
            affected = cursor.rowcount
            if affected == 0:
                raise NotFoundError(f"No likes or dislikes found for resource {resource_id}")
        logger.info("Deleted %s votes from resource %s", affected, resource_id)
        return affected

    @classmethod
    async def delete_vote(
        cls, conn: sqlite3.Connection, user_id: int, resource_id: int
    ) -> LikeRead:
        """Remove a single user's vote on a resource and return it."""
        with transaction(conn, "delete vote") as cursor:
            rows = cursor.execute(
                "DELETE FROM likes WHERE user_id = ? AND resource_id = ? "
                "RETURNING user_id, resource_id, liked",
                (user_id, resource_id),
            ).fetchall()
            if not rows:
                raise NotFoundError(
                    f"User {user_id} has no like or dislike on resource {resource_id}"
                )
        logger.info("Deleted vote of user %s from resource %s", user_id, resource_id)
        return cls._row_to_like(rows[0])

    @staticmethod
    def _row_to_like(row: sqlite3.Row) -> LikeRead:
        return LikeRead(
            user_id=row["user_id"],
            resource_id=row["resource_id"],
            liked=bool(row["liked"]),
        )
