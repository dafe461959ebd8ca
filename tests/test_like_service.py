import asyncio
import threading

import pytest

from catalog_api.app.core.db import get_connection
from catalog_api.app.core.errors import ConstraintViolationError, NotFoundError
from catalog_api.app.services.like_service import LikeService
from catalog_api.app.services.resource_service import ResourceService
from tests.helpers import count_rows, make_resource


@pytest.fixture
def resource_id(conn):
    cursor = conn.execute(
        "INSERT INTO resources (resource_name, user_id) VALUES (?, ?)", ("Rust book", 1)
    )
    conn.commit()
    return cursor.lastrowid


@pytest.mark.asyncio
async def test_first_vote_inserts_row(conn, resource_id):
    vote = await LikeService.set_vote(conn, 2, resource_id, True)

    assert vote.liked is True
    assert count_rows(conn, "likes") == 1


@pytest.mark.asyncio
async def test_second_vote_overwrites_instead_of_accumulating(conn, resource_id):
    await LikeService.set_vote(conn, 2, resource_id, True)
    vote = await LikeService.set_vote(conn, 2, resource_id, False)

    assert vote.liked is False
    assert count_rows(conn, "likes") == 1
    stored = await LikeService.get_vote(conn, 2, resource_id)
    assert stored is not None and stored.liked is False


@pytest.mark.asyncio
async def test_same_vote_twice_is_idempotent(conn, resource_id):
    await LikeService.set_vote(conn, 2, resource_id, False)
    await LikeService.set_vote(conn, 2, resource_id, False)

    assert count_rows(conn, "likes") == 1
    assert (await LikeService.get_vote(conn, 2, resource_id)).liked is False


@pytest.mark.asyncio
async def test_vote_on_missing_resource_is_rejected(conn):
    with pytest.raises(ConstraintViolationError):
        await LikeService.set_vote(conn, 2, 404, True)
    assert count_rows(conn, "likes") == 0


@pytest.mark.asyncio
async def test_get_vote_absent(conn, resource_id):
    assert await LikeService.get_vote(conn, 3, resource_id) is None


@pytest.mark.asyncio
async def test_count_votes(conn, resource_id):
    await LikeService.set_vote(conn, 1, resource_id, True)
    await LikeService.set_vote(conn, 2, resource_id, True)
    await LikeService.set_vote(conn, 3, resource_id, False)

    tally = await LikeService.count_votes(conn, resource_id)

    assert (tally.likes, tally.dislikes) == (2, 1)


@pytest.mark.asyncio
async def test_count_votes_without_votes(conn, resource_id):
    tally = await LikeService.count_votes(conn, resource_id)
    assert (tally.likes, tally.dislikes) == (0, 0)


@pytest.mark.asyncio
async def test_bulk_delete_removes_every_vote_on_resource(conn, resource_id):
    other = await ResourceService.create_resource(conn, make_resource(resource_name="other"))
    await LikeService.set_vote(conn, 1, resource_id, True)
    await LikeService.set_vote(conn, 2, resource_id, False)
    await LikeService.set_vote(conn, 2, other.resource_id, True)

    deleted = await LikeService.delete_votes_for_resource(conn, resource_id)

    assert deleted == 2
    assert count_rows(conn, "likes") == 1
    assert await LikeService.get_vote(conn, 2, other.resource_id) is not None


@pytest.mark.asyncio
async def test_bulk_delete_without_votes_reports_not_found(conn, resource_id):
    with pytest.raises(NotFoundError):
        await LikeService.delete_votes_for_resource(conn, resource_id)


@pytest.mark.asyncio
async def test_scoped_delete_keeps_other_users_votes(conn, resource_id):
    await LikeService.set_vote(conn, 1, resource_id, True)
    await LikeService.set_vote(conn, 2, resource_id, False)

    removed = await LikeService.delete_vote(conn, 2, resource_id)

    assert removed.user_id == 2 and removed.liked is False
    assert await LikeService.get_vote(conn, 2, resource_id) is None
    assert (await LikeService.get_vote(conn, 1, resource_id)).liked is True


@pytest.mark.asyncio
async def test_scoped_delete_of_missing_vote(conn, resource_id):
    with pytest.raises(NotFoundError):
        await LikeService.delete_vote(conn, 3, resource_id)


def test_concurrent_first_votes_leave_single_row(db_path, conn, resource_id):
    barrier = threading.Barrier(2)
    errors = []

    def vote(liked):
        connection = get_connection(db_path)
        try:
            barrier.wait()
            asyncio.run(LikeService.set_vote(connection, 2, resource_id, liked))
        except Exception as e:  # collected and asserted below
            errors.append(e)
        finally:
            connection.close()

    threads = [threading.Thread(target=vote, args=(liked,)) for liked in (True, False)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    rows = conn.execute(
        "SELECT liked FROM likes WHERE user_id = ? AND resource_id = ?", (2, resource_id)
    ).fetchall()
    assert len(rows) == 1
    assert rows[0]["liked"] in (0, 1)
