"""API tests for the tour catalog."""

from uuid import uuid4

import pytest

API = "/en/api/v1"


@pytest.mark.asyncio
async def test_tour_lifecycle_with_rating(test_client, auth_headers, sample_tour_data):
    """Test create, read, rate and read again."""
    response = await test_client.post(f"{API}/tours", json=sample_tour_data, headers=auth_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Tour created"
    tour = body["tour"]
    assert tour["id"]
    assert tour["name"] == sample_tour_data["name"]
    assert tour["maxPeople"] == sample_tour_data["maxPeople"]
    assert tour["images"] == [sample_tour_data["images"]]
    assert tour["avgRating"] == 0

    response = await test_client.get(f"{API}/tours/{tour['id']}")
    assert response.status_code == 200
    assert response.json()["tour"]["avgRating"] == 0
    assert response.json()["tour"]["reviews"] == []

    review = await test_client.post(
        f"{API}/reviews/tour/{tour['id']}",
        json={"rating": 4, "comment": "Great views"},
        headers=auth_headers,
    )
    assert review.status_code == 201

    response = await test_client.get(f"{API}/tours/{tour['id']}")
    detail = response.json()["tour"]
    assert detail["avgRating"] == 4.0
    assert detail["reviewsCount"] == 1
    assert detail["reviews"][0]["comment"] == "Great views"
    assert detail["reviews"][0]["user"]["username"] == "aidana"


@pytest.mark.asyncio
async def test_create_tour_requires_auth(test_client, sample_tour_data):
    """Test that creating a tour needs a token."""
    response = await test_client.post(f"{API}/tours", json=sample_tour_data)

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_tour_missing_field(test_client, auth_headers, sample_tour_data):
    """Test that a missing mandatory field is a 400."""
    data = dict(sample_tour_data)
    del data["city"]

    response = await test_client.post(f"{API}/tours", json=data, headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Please fill in all required fields correctly"


@pytest.mark.asyncio
async def test_get_unknown_tour(test_client):
    """Test that an unknown id is a 404."""
    response = await test_client.get(f"{API}/tours/{uuid4()}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Tour not found"}


@pytest.mark.asyncio
async def test_malformed_tour_id_is_bad_request(test_client):
    """Test that an id that is not a UUID is a 400."""
    response = await test_client.get(f"{API}/tours/not-a-uuid")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_tours_filters_and_sorts(test_client, auth_headers, sample_tour_data):
    """Test listing with filters, price bounds and ordering."""
    for name, city, price in [("A", "Karakol", 500), ("B", "Karakol", 100), ("C", "Osh", 300)]:
        response = await test_client.post(
            f"{API}/tours",
            json={**sample_tour_data, "name": name, "city": city, "price": price},
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = await test_client.get(f"{API}/tours", params={"city": "Karakol", "sort": "price_asc"})
    body = response.json()
    assert body["count"] == 2
    assert [tour["name"] for tour in body["tours"]] == ["B", "A"]

    response = await test_client.get(f"{API}/tours", params={"minPrice": "200", "maxPrice": "abc", "sort": "price_desc"})
    assert [tour["name"] for tour in response.json()["tours"]] == ["A", "C"]

    response = await test_client.get(f"{API}/tours")
    assert response.json()["count"] == 3


@pytest.mark.asyncio
async def test_update_tour_allow_list(test_client, auth_headers, created_tour):
    """Test that updates apply allow-listed fields and ignore the rest."""
    response = await test_client.put(
        f"{API}/tours/{created_tour['id']}",
        json={"price": "420", "city": "Bishkek", "id": str(uuid4()), "avgRating": 5},
        headers=auth_headers,
    )

    assert response.status_code == 200
    tour = response.json()["tour"]
    assert tour["id"] == created_tour["id"]
    assert tour["price"] == 420
    assert tour["city"] == "Bishkek"
    assert tour["name"] == created_tour["name"]
    assert tour["avgRating"] == 0


@pytest.mark.asyncio
async def test_update_unknown_tour(test_client, auth_headers):
    """Test that updating a missing tour is a 404."""
    response = await test_client.put(f"{API}/tours/{uuid4()}", json={"price": 1}, headers=auth_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_tour(test_client, auth_headers, created_tour):
    """Test deleting a tour."""
    response = await test_client.delete(f"{API}/tours/{created_tour['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Tour deleted"}

    response = await test_client.get(f"{API}/tours/{created_tour['id']}")
    assert response.status_code == 404

    response = await test_client.delete(f"{API}/tours/{created_tour['id']}", headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_tour_detail_lists_cars_with_ratings(test_client, auth_headers, created_tour, sample_car_data):
    """Test that cars attached to a tour show up with their own rating."""
    car = await test_client.post(
        f"{API}/cars",
        json={**sample_car_data, "tourId": created_tour["id"]},
        headers=auth_headers,
    )
    car_id = car.json()["car"]["id"]
    await test_client.post(f"{API}/reviews/car/{car_id}", json={"rating": 5, "comment": "Smooth"}, headers=auth_headers)

    response = await test_client.get(f"{API}/tours/{created_tour['id']}")

    cars = response.json()["tour"]["cars"]
    assert len(cars) == 1
    assert cars[0]["id"] == car_id
    assert cars[0]["avgRating"] == 5.0
