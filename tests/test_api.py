import pytest

from tests.helpers import make_resource

API = "/api/v1"


async def submit(client, **overrides):
    response = await client.post(f"{API}/resources", json=make_resource(**overrides).dict())
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_walkthrough(client):
    resource = await submit(client, resource_name="X", author_name="A", user_id=1)
    assert resource["resource_id"] == 1

    response = await client.post(
        f"{API}/resources/1/comments", json={"comment_body": "nice", "user_id": 2}
    )
    assert response.status_code == 201
    comment = response.json()
    assert (comment["comment_id"], comment["resource_id"]) == (1, 1)

    response = await client.post(
        f"{API}/resources/1/likes", json={"user_id": 2, "like_or_dislike": "like"}
    )
    assert response.status_code == 200
    assert response.json() == {"user_id": 2, "resource_id": 1, "liked": True}

    response = await client.post(
        f"{API}/resources/1/likes", json={"user_id": 2, "like_or_dislike": "dislike"}
    )
    assert response.status_code == 200
    assert response.json()["liked"] is False

    tally = (await client.get(f"{API}/resources/1/likes")).json()
    assert (tally["likes"], tally["dislikes"]) == (0, 1)

    response = await client.delete(f"{API}/resources/1", params={"cascade": "true"})
    assert response.status_code == 200
    assert response.json() == {"status": "success", "message": "Deleted resource 1"}

    response = await client.get(f"{API}/resources/1")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_resource_for_unknown_user_is_400(client):
    response = await client.post(f"{API}/resources", json=make_resource(user_id=50).dict())
    assert response.status_code == 400
    assert "FOREIGN KEY" in response.json()["detail"]


@pytest.mark.asyncio
async def test_malformed_resource_body_is_rejected(client):
    response = await client.post(f"{API}/resources", json={"resource_name": "no owner"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_empty_lists_answer_404(client):
    for path in ("/resources", "/resources/1/comments", "/tags", "/users/1/study-list"):
        response = await client.get(f"{API}{path}")
        assert response.status_code == 404, path
        assert response.json()["detail"] == "Could not find any rows"


@pytest.mark.asyncio
async def test_list_resources_newest_first(client):
    await submit(client, resource_name="first")
    await submit(client, resource_name="second")

    response = await client.get(f"{API}/resources")

    assert response.status_code == 200
    assert [r["resource_name"] for r in response.json()] == ["second", "first"]


@pytest.mark.asyncio
async def test_delete_resource_with_comments_conflicts(client):
    await submit(client)
    await client.post(f"{API}/resources/1/comments", json={"comment_body": "hm", "user_id": 3})

    response = await client.delete(f"{API}/resources/1")

    assert response.status_code == 409
    assert (await client.get(f"{API}/resources/1")).status_code == 200


@pytest.mark.asyncio
async def test_delete_missing_resource_is_404(client):
    response = await client.delete(f"{API}/resources/9")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_comment(client):
    await submit(client)
    for body in ("a", "b"):
        await client.post(f"{API}/resources/1/comments", json={"comment_body": body, "user_id": 1})

    response = await client.delete(f"{API}/resources/comments/1")
    assert response.status_code == 200
    assert response.json()["message"] == "Deleted comment 1"

    remaining = (await client.get(f"{API}/resources/1/comments")).json()
    assert [c["comment_body"] for c in remaining] == ["b"]
    assert (await client.delete(f"{API}/resources/comments/1")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_vote_value_is_rejected(client):
    await submit(client)
    response = await client.post(
        f"{API}/resources/1/likes", json={"user_id": 2, "like_or_dislike": "meh"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_vote_on_missing_resource_is_400(client):
    response = await client.post(
        f"{API}/resources/3/likes", json={"user_id": 2, "like_or_dislike": "like"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_delete_votes_bulk_and_scoped(client):
    await submit(client)
    for user_id in (1, 2, 3):
        await client.post(
            f"{API}/resources/1/likes", json={"user_id": user_id, "like_or_dislike": "like"}
        )

    response = await client.delete(f"{API}/resources/1/likes/2")
    assert response.status_code == 200
    assert (await client.delete(f"{API}/resources/1/likes/2")).status_code == 404
    assert (await client.get(f"{API}/resources/1/likes")).json()["likes"] == 2

    response = await client.delete(f"{API}/resources/1/likes")
    assert response.status_code == 200
    assert response.json()["message"] == "Deleted 2 likes/dislikes from resource 1"
    assert (await client.delete(f"{API}/resources/1/likes")).status_code == 404


@pytest.mark.asyncio
async def test_tags_endpoints(client):
    response = await client.post(f"{API}/tags", json={"tag_name": "python"})
    assert response.status_code == 201
    assert response.json() == {"tag_name": "python"}

    duplicate = await client.post(f"{API}/tags", json={"tag_name": "python"})
    assert duplicate.status_code == 400

    assert (await client.get(f"{API}/tags")).json() == [{"tag_name": "python"}]

    response = await client.request("DELETE", f"{API}/tags", json={"tag_name": "python"})
    assert response.status_code == 200
    assert response.json()["message"] == "Deleted the tag python"

    response = await client.request("DELETE", f"{API}/tags", json={"tag_name": "python"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_users_endpoint_orders_by_name(client):
    response = await client.get(f"{API}/users")
    assert response.status_code == 200
    assert [u["name"] for u in response.json()] == ["Ann", "Mike", "Zoe"]


@pytest.mark.asyncio
async def test_study_list_endpoints(client):
    await submit(client, resource_name="saved")

    response = await client.post(f"{API}/users/2/study_list", json={"resource_id": 1})
    assert response.status_code == 201
    assert response.json() == {"user_id": 2, "resource_id": 1}
    again = await client.post(f"{API}/users/2/study-list", json={"resource_id": 1})
    assert again.status_code == 201

    listed = (await client.get(f"{API}/users/2/study-list")).json()
    assert [(i["resource_name"], i["saved_by"]) for i in listed] == [("saved", 2)]

    response = await client.request(
        "DELETE", f"{API}/users/2/study-list", json={"resource_id": 1}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Deleted resource 1 from your study-list"

    response = await client.request(
        "DELETE", f"{API}/users/2/study-list", json={"resource_id": 1}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_study_list_unknown_resource_is_400(client):
    response = await client.post(f"{API}/users/2/study-list", json={"resource_id": 8})
    assert response.status_code == 400
