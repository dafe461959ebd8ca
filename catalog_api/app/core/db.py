"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), creating the catalog schema on application start
(``init_db``) and a per-request dependency for FastAPI routes
(``get_db``).  Services never open connections themselves; the
connection is always passed in by the caller, so tests can point the
whole application at an isolated database by overriding ``get_db``.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings
from .errors import ConstraintViolationError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    user_id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS resources (
    resource_id INTEGER PRIMARY KEY AUTOINCREMENT,
    resource_name TEXT NOT NULL,
    author_name TEXT,
    url TEXT,
    description TEXT,
    content_type TEXT,
    build_stage TEXT,
    opinion TEXT,
    opinion_reason TEXT,
    user_id INTEGER NOT NULL,
    time_date TIMESTAMP NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f', 'now')),
    FOREIGN KEY(user_id) REFERENCES users(user_id)
);

CREATE TABLE IF NOT EXISTS comments (
    comment_id INTEGER PRIMARY KEY AUTOINCREMENT,
    comment_body TEXT NOT NULL,
    user_id INTEGER NOT NULL,
    resource_id INTEGER NOT NULL,
    FOREIGN KEY(user_id) REFERENCES users(user_id),
    FOREIGN KEY(resource_id) REFERENCES resources(resource_id)
);

-- One vote per (user, resource); SetVote relies on this key for its upsert.
CREATE TABLE IF NOT EXISTS likes (
    user_id INTEGER NOT NULL,
    resource_id INTEGER NOT NULL,
    liked INTEGER NOT NULL CHECK (liked IN (0, 1)),
    PRIMARY KEY(user_id, resource_id),
    FOREIGN KEY(user_id) REFERENCES users(user_id),
    FOREIGN KEY(resource_id) REFERENCES resources(resource_id)
);

CREATE TABLE IF NOT EXISTS tags (
    tag_name TEXT PRIMARY KEY
);

CREATE TABLE IF NOT EXISTS study_list (
    user_id INTEGER NOT NULL,
    resource_id INTEGER NOT NULL,
    PRIMARY KEY(user_id, resource_id),
    FOREIGN KEY(user_id) REFERENCES users(user_id),
    FOREIGN KEY(resource_id) REFERENCES resources(resource_id)
);

CREATE INDEX IF NOT EXISTS idx_resources_time_date ON resources(time_date);
CREATE INDEX IF NOT EXISTS idx_comments_resource_id ON comments(resource_id);
CREATE INDEX IF NOT EXISTS idx_likes_resource_id ON likes(resource_id);
CREATE INDEX IF NOT EXISTS idx_study_list_resource_id ON study_list(resource_id);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute (or the special ``:memory:``
    name) it is used directly.  Otherwise it is resolved relative to
    the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Foreign key enforcement is switched on for the lifetime of
    the connection; SQLite leaves it off by default.
    """
    conn = sqlite3.connect(
        get_database_path(database_url),
        timeout=10.0,
        # A connection serves a single request but FastAPI may hand it
        # between threadpool workers.
        check_same_thread=False,
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_db() -> Iterator[sqlite3.Connection]:
    """FastAPI dependency yielding one connection per request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


def init_db(conn: sqlite3.Connection) -> None:
    """Create the catalog tables if they do not exist yet."""
    conn.executescript(SCHEMA)
    conn.commit()
    logger.info("Catalog schema is ready")


@contextmanager
def transaction(conn: sqlite3.Connection, action: str) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor and commit on success, rolling back on any error.

    ``action`` describes the write for log messages ("create comment").
    Integrity failures reported by SQLite (foreign keys, uniqueness,
    NOT NULL, CHECK) are re-raised as ``ConstraintViolationError`` with
    the store's message attached.
    """
    cursor = conn.cursor()
    try:
        yield cursor
        conn.commit()
    except sqlite3.IntegrityError as e:
        conn.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise ConstraintViolationError(str(e)) from e
    except sqlite3.Error as e:
        conn.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise
    except Exception:
        conn.rollback()
        raise
