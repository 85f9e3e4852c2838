"""
Member API tests - search endpoints over the seeded roster, creation and lookups.
"""

import pytest
from httpx import AsyncClient


def usernames(rows: list[dict]) -> list[str]:
    return [r["username"] for r in rows]


@pytest.mark.asyncio
async def test_search_endpoint(client: AsyncClient, roster):
    response = await client.get(
        "/api/v1/members/search", params={"team_name": "team2", "age_goe": 35, "age_loe": 40}
    )
    assert response.status_code == 200
    data = response.json()
    assert usernames(data) == ["member4"]
    assert set(data[0]) == {"member_id", "username", "age", "team_id", "team_name"}


@pytest.mark.asyncio
async def test_search_endpoint_blank_username(client: AsyncClient, roster):
    response = await client.get("/api/v1/members/search", params={"username": ""})
    assert response.status_code == 200
    assert len(response.json()) == 4


@pytest.mark.asyncio
@pytest.mark.parametrize("mode", ["simple", "complex"])
async def test_paged_search_endpoints(client: AsyncClient, roster, mode):
    response = await client.get(f"/api/v1/members/search/{mode}", params={"page": 1, "size": 2})
    assert response.status_code == 200
    data = response.json()
    assert usernames(data["content"]) == ["member3", "member4"]
    assert data["total"] == 4
    assert data["total_pages"] == 2
    assert data["number"] == 1


@pytest.mark.asyncio
async def test_paged_search_sorted(client: AsyncClient, roster):
    response = await client.get(
        "/api/v1/members/search/simple", params={"size": 3, "sort": "age,desc"}
    )
    assert response.status_code == 200
    assert usernames(response.json()["content"]) == ["member4", "member3", "member2"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [{"size": 0}, {"page": -1}, {"size": 1000}, {"sort": "password,asc"}, {"sort": "age,up"}],
)
async def test_paged_search_rejects_bad_paging(client: AsyncClient, roster, params):
    response = await client.get("/api/v1/members/search/complex", params=params)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_team_and_member(client: AsyncClient):
    team = await client.post("/api/v1/teams", json={"name": "team9"})
    assert team.status_code == 201
    team_id = team.json()["id"]

    member = await client.post(
        "/api/v1/members", json={"username": "newbie", "age": 22, "team_id": team_id}
    )
    assert member.status_code == 201
    body = member.json()
    assert body["team_id"] == team_id

    fetched = await client.get(f"/api/v1/members/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["username"] == "newbie"

    rows = (await client.get("/api/v1/members/search", params={"team_name": "team9"})).json()
    assert usernames(rows) == ["newbie"]


@pytest.mark.asyncio
async def test_create_member_without_team(client: AsyncClient):
    response = await client.post("/api/v1/members", json={"username": "solo", "age": 5})
    assert response.status_code == 201
    rows = (await client.get("/api/v1/members/search", params={"username": "solo"})).json()
    assert rows == [
        {"member_id": response.json()["id"], "username": "solo", "age": 5, "team_id": None, "team_name": None}
    ]


@pytest.mark.asyncio
async def test_create_member_unknown_team(client: AsyncClient):
    response = await client.post("/api/v1/members", json={"username": "lost", "team_id": 999})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_member_negative_age(client: AsyncClient):
    response = await client.post("/api/v1/members", json={"username": "baby", "age": -1})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_member_not_found(client: AsyncClient):
    response = await client.get("/api/v1/members/12345")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_teams(client: AsyncClient, roster):
    response = await client.get("/api/v1/teams")
    assert response.status_code == 200
    assert [t["name"] for t in response.json()] == ["team1", "team2"]
