"""API tests for favorite tours and cars."""

from uuid import uuid4

import pytest
from sqlalchemy import delete

from tourism_api.models.user import User

API = "/en/api/v1"


@pytest.mark.asyncio
async def test_favorite_tour_flow(test_client, auth_headers, created_tour):
    """Test adding, listing and removing a favorite tour."""
    url = f"{API}/users/favorites/tours/{created_tour['id']}"

    added = await test_client.post(url, headers=auth_headers)
    assert added.status_code == 201
    assert added.json()["message"] == "Tour added to favorites"
    assert added.json()["favorite"]["tourId"] == created_tour["id"]

    duplicate = await test_client.post(url, headers=auth_headers)
    assert duplicate.status_code == 409

    listing = await test_client.get(f"{API}/users/favorites/tours", headers=auth_headers)
    body = listing.json()
    assert body["count"] == 1
    favorite = body["tours"][0]
    assert favorite["id"] == created_tour["id"]
    assert favorite["avgRating"] == 0
    assert favorite["favoriteId"] == added.json()["favorite"]["id"]
    assert favorite["addedAt"]

    detail = (await test_client.get(f"{API}/tours/{created_tour['id']}")).json()["tour"]
    assert detail["favoritesCount"] == 1

    removed = await test_client.delete(url, headers=auth_headers)
    assert removed.status_code == 200

    again = await test_client.delete(url, headers=auth_headers)
    assert again.status_code == 404
    assert again.json()["message"] == "Tour is not in favorites"


@pytest.mark.asyncio
async def test_favorite_car_flow(test_client, auth_headers, created_car):
    """Test adding, listing and removing a favorite car."""
    url = f"{API}/users/favorites/cars/{created_car['id']}"

    assert (await test_client.post(url, headers=auth_headers)).status_code == 201

    listing = await test_client.get(f"{API}/users/favorites/cars", headers=auth_headers)
    assert listing.json()["count"] == 1
    assert listing.json()["cars"][0]["brand"] == created_car["brand"]

    profile = (await test_client.get(f"{API}/auth/me", headers=auth_headers)).json()["user"]
    assert profile["favoriteCarsCount"] == 1

    assert (await test_client.delete(url, headers=auth_headers)).status_code == 200
    listing = await test_client.get(f"{API}/users/favorites/cars", headers=auth_headers)
    assert listing.json()["count"] == 0


@pytest.mark.asyncio
async def test_favorite_unknown_resource(test_client, auth_headers):
    """Test that bookmarking a missing tour or car is a 404."""
    tour = await test_client.post(f"{API}/users/favorites/tours/{uuid4()}", headers=auth_headers)
    car = await test_client.post(f"{API}/users/favorites/cars/{uuid4()}", headers=auth_headers)

    assert tour.status_code == 404
    assert car.status_code == 404


@pytest.mark.asyncio
async def test_favorites_are_per_user(test_client, auth_headers, other_auth_headers, created_tour):
    """Test that one user's favorites are not visible to another."""
    await test_client.post(f"{API}/users/favorites/tours/{created_tour['id']}", headers=auth_headers)

    listing = await test_client.get(f"{API}/users/favorites/tours", headers=other_auth_headers)

    assert listing.json()["count"] == 0


@pytest.mark.asyncio
async def test_favorites_require_auth(test_client):
    """Test that favorites need a token."""
    response = await test_client.get(f"{API}/users/favorites/tours")

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_favorite_by_deleted_account_is_rejected_without_blaming_tour(
    test_client, test_session, auth_headers, created_tour, sample_user_data
):
    """Test that a still-valid token of a removed account gets a neutral 400."""
    await test_session.execute(delete(User).where(User.email == sample_user_data["email"]))
    await test_session.commit()

    response = await test_client.post(
        f"{API}/users/favorites/tours/{created_tour['id']}",
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "A referenced resource does not exist"


@pytest.mark.asyncio
async def test_missing_favorite_tour_message_in_kyrgyz(test_client, auth_headers):
    """Test that Kyrgyz clients get Kyrgyz error text."""
    response = await test_client.post(f"/ky/api/v1/users/favorites/tours/{uuid4()}", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["message"] == "Тур табылган жок"
