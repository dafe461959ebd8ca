"""
Business logic for tags.

Tags are identified by their name alone.  Creating a name that
already exists is rejected by the primary key and leaves the existing
tag untouched.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from ..core.db import transaction
from ..core.errors import NotFoundError
from ..schemas.tag import TagRead

logger = logging.getLogger(__name__)


class TagService:
    """Service for the tag vocabulary."""

    @classmethod
    async def create_tag(cls, conn: sqlite3.Connection, tag_name: str) -> TagRead:
        with transaction(conn, "create tag") as cursor:
            cursor.execute("INSERT INTO tags (tag_name) VALUES (?)", (tag_name,))
        logger.info("Created tag %r", tag_name)
        return TagRead(tag_name=tag_name)

    @classmethod
    async def list_tags(cls, conn: sqlite3.Connection) -> List[TagRead]:
        rows = conn.execute("SELECT tag_name FROM tags ORDER BY tag_name ASC").fetchall()
        return [TagRead(tag_name=row["tag_name"]) for row in rows]

    @classmethod
    async def delete_tag(cls, conn: sqlite3.Connection, tag_name: str) -> TagRead:
        """Delete a tag by name; raises ``NotFoundError`` if unknown."""
        with transaction(conn, "delete tag") as cursor:
            cursor.execute("DELETE FROM tags WHERE tag_name = ?", (tag_name,))
            if cursor.rowcount == 0:
                raise NotFoundError(f"Tag {tag_name!r} not found")
        logger.info("Deleted tag %r", tag_name)
        return TagRead(tag_name=tag_name)
