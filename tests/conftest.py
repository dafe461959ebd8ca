import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog_api.app.core.db import get_connection, get_db, init_db
from catalog_api.app.main import app

USERS = [(1, "Zoe"), (2, "Ann"), (3, "Mike")]


@pytest.fixture
def db_path(tmp_path):
    """A fresh catalog database with three users and no content."""
    path = str(tmp_path / "catalog.db")
    conn = get_connection(path)
    try:
        init_db(conn)
        conn.executemany("INSERT INTO users (user_id, name) VALUES (?, ?)", USERS)
        conn.commit()
    finally:
        conn.close()
    return path


@pytest.fixture
def conn(db_path):
    connection = get_connection(db_path)
    yield connection
    connection.close()


@pytest_asyncio.fixture
async def client(db_path):
    def override_get_db():
        connection = get_connection(db_path)
        try:
            yield connection
        finally:
            connection.close()

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_db, None)
