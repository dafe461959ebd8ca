"""
Read access to users.

Users are created and removed by an external system; the catalog only
lists them so clients can resolve author and commenter names.
"""

import sqlite3
from typing import List

from ..schemas.user import UserRead


class UserService:
    """Service for reading users."""

    @classmethod
    async def list_users(cls, conn: sqlite3.Connection) -> List[UserRead]:
        """Return all users ordered by name."""
        rows = conn.execute("SELECT user_id, name FROM users ORDER BY name ASC").fetchall()
        return [UserRead(user_id=row["user_id"], name=row["name"]) for row in rows]
