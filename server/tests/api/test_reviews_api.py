"""API tests for tour, car and site reviews."""

from uuid import uuid4

import pytest
from sqlalchemy import delete, func, select

from tourism_api.models.review import TourReview
from tourism_api.models.user import User

API = "/en/api/v1"


@pytest.mark.asyncio
async def test_second_review_of_same_tour_conflicts(test_client, test_session, auth_headers, created_tour):
    """Test that a user reviews a tour at most once."""
    url = f"{API}/reviews/tour/{created_tour['id']}"
    first = await test_client.post(url, json={"rating": 5, "comment": "Loved it"}, headers=auth_headers)
    assert first.status_code == 201

    second = await test_client.post(url, json={"rating": 1, "comment": "Changed my mind"}, headers=auth_headers)

    assert second.status_code == 409
    assert second.json()["message"] == "You have already left a review"
    count = await test_session.execute(select(func.count()).select_from(TourReview))
    assert count.scalar_one() == 1


@pytest.mark.asyncio
async def test_different_users_may_review_same_tour(test_client, auth_headers, other_auth_headers, created_tour):
    """Test that the uniqueness is per user."""
    url = f"{API}/reviews/tour/{created_tour['id']}"
    await test_client.post(url, json={"rating": 5, "comment": "Great"}, headers=auth_headers)
    await test_client.post(url, json={"rating": 2, "comment": "Meh"}, headers=other_auth_headers)

    response = await test_client.get(f"{API}/tours/{created_tour['id']}")

    tour = response.json()["tour"]
    assert tour["avgRating"] == 3.5
    # Newest first
    assert [review["comment"] for review in tour["reviews"]] == ["Meh", "Great"]


@pytest.mark.asyncio
async def test_review_of_unknown_tour(test_client, auth_headers):
    """Test that reviewing a missing tour is a 404."""
    response = await test_client.post(
        f"{API}/reviews/tour/{uuid4()}",
        json={"rating": 5, "comment": "?"},
        headers=auth_headers,
    )

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"rating": 6, "comment": "too good"},
    {"rating": 0, "comment": "too bad"},
    {"comment": "no rating"},
    {"rating": 3},
])
async def test_invalid_review_payload(test_client, auth_headers, created_tour, payload):
    """Test review validation."""
    response = await test_client.post(
        f"{API}/reviews/tour/{created_tour['id']}",
        json=payload,
        headers=auth_headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_only_author_deletes_review(test_client, auth_headers, other_auth_headers, created_tour):
    """Test that deleting someone else's review is forbidden and keeps it."""
    created = await test_client.post(
        f"{API}/reviews/tour/{created_tour['id']}",
        json={"rating": 4, "comment": "Nice"},
        headers=auth_headers,
    )
    review_id = created.json()["review"]["id"]

    response = await test_client.delete(f"{API}/reviews/tour/{review_id}", headers=other_auth_headers)
    assert response.status_code == 403

    tour = (await test_client.get(f"{API}/tours/{created_tour['id']}")).json()["tour"]
    assert tour["reviewsCount"] == 1

    response = await test_client.delete(f"{API}/reviews/tour/{review_id}", headers=auth_headers)
    assert response.status_code == 200

    response = await test_client.delete(f"{API}/reviews/tour/{review_id}", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_car_review_flow(test_client, auth_headers, created_car):
    """Test reviewing a car, the duplicate check and the rating."""
    url = f"{API}/reviews/car/{created_car['id']}"
    created = await test_client.post(url, json={"rating": 3, "comment": "Fine", "images": "a.jpg"}, headers=auth_headers)
    assert created.status_code == 201
    assert created.json()["review"]["images"] == ["a.jpg"]
    assert created.json()["review"]["carId"] == created_car["id"]

    duplicate = await test_client.post(url, json={"rating": 5, "comment": "Again"}, headers=auth_headers)
    assert duplicate.status_code == 409

    car = (await test_client.get(f"{API}/cars/{created_car['id']}")).json()["car"]
    assert car["avgRating"] == 3.0


@pytest.mark.asyncio
async def test_site_reviews(test_client, auth_headers, other_auth_headers):
    """Test leaving, listing, filtering and deleting site reviews."""
    first = await test_client.post(
        f"{API}/reviews/site",
        json={"rating": 5, "comment": "Fast support", "category": "support"},
        headers=auth_headers,
    )
    assert first.status_code == 201
    second = await test_client.post(
        f"{API}/reviews/site",
        json={"rating": 4, "comment": "Nice site", "category": "website"},
        headers=auth_headers,
    )
    assert second.status_code == 201

    response = await test_client.get(f"{API}/reviews/site")
    body = response.json()
    assert body["count"] == 2
    assert [review["comment"] for review in body["reviews"]] == ["Nice site", "Fast support"]

    response = await test_client.get(f"{API}/reviews/site", params={"category": "support"})
    assert [review["category"] for review in response.json()["reviews"]] == ["support"]

    review_id = first.json()["review"]["id"]
    forbidden = await test_client.delete(f"{API}/reviews/site/{review_id}", headers=other_auth_headers)
    assert forbidden.status_code == 403

    deleted = await test_client.delete(f"{API}/reviews/site/{review_id}", headers=auth_headers)
    assert deleted.status_code == 200


@pytest.mark.asyncio
async def test_site_review_unknown_category(test_client, auth_headers):
    """Test that a category outside the enum is a 400."""
    response = await test_client.post(
        f"{API}/reviews/site",
        json={"rating": 5, "comment": "Tasty", "category": "food"},
        headers=auth_headers,
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_review_counters_on_profile(test_client, auth_headers, created_tour, created_car):
    """Test that the profile counts the caller's reviews."""
    await test_client.post(f"{API}/reviews/tour/{created_tour['id']}", json={"rating": 5, "comment": "a"}, headers=auth_headers)
    await test_client.post(f"{API}/reviews/car/{created_car['id']}", json={"rating": 5, "comment": "b"}, headers=auth_headers)

    user = (await test_client.get(f"{API}/auth/me", headers=auth_headers)).json()["user"]

    assert user["tourReviewsCount"] == 1
    assert user["carReviewsCount"] == 1


@pytest.mark.asyncio
async def test_review_by_deleted_account_is_rejected_without_blaming_tour(
    test_client, test_session, auth_headers, created_tour, sample_user_data
):
    """Test that a still-valid token of a removed account gets a neutral 400."""
    await test_session.execute(delete(User).where(User.email == sample_user_data["email"]))
    await test_session.commit()

    response = await test_client.post(
        f"{API}/reviews/tour/{created_tour['id']}",
        json={"rating": 4, "comment": "Nice"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "A referenced resource does not exist"
