"""API tests for the car catalog."""

from uuid import uuid4

import pytest

API = "/en/api/v1"


@pytest.mark.asyncio
async def test_create_and_get_car(test_client, created_car, sample_car_data):
    """Test creating and reading a car."""
    assert created_car["brand"] == sample_car_data["brand"]
    assert created_car["fuelType"] == sample_car_data["fuelType"]
    assert created_car["tourId"] is None
    assert created_car["tour"] is None

    response = await test_client.get(f"{API}/cars/{created_car['id']}")

    assert response.status_code == 200
    car = response.json()["car"]
    assert car["avgRating"] == 0
    assert car["reviews"] == []


@pytest.mark.asyncio
async def test_create_car_with_unknown_tour(test_client, auth_headers, sample_car_data):
    """Test that a tourId referencing nothing is a 400."""
    response = await test_client.post(
        f"{API}/cars",
        json={**sample_car_data, "tourId": str(uuid4())},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["message"] == "The specified tour does not exist"


@pytest.mark.asyncio
async def test_car_shows_tour_summary(test_client, auth_headers, created_tour, sample_car_data):
    """Test that a car attached to a tour includes its id, name and city."""
    response = await test_client.post(
        f"{API}/cars",
        json={**sample_car_data, "tourId": created_tour["id"]},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["car"]["tour"] == {
        "id": created_tour["id"],
        "name": created_tour["name"],
        "city": created_tour["city"],
    }


@pytest.mark.asyncio
async def test_update_car_attach_and_detach(test_client, auth_headers, created_car, created_tour):
    """Test attaching a car to a tour and detaching it with null."""
    response = await test_client.put(
        f"{API}/cars/{created_car['id']}",
        json={"tourId": created_tour["id"], "price": "99"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["car"]["tourId"] == created_tour["id"]
    assert response.json()["car"]["price"] == 99

    response = await test_client.put(
        f"{API}/cars/{created_car['id']}",
        json={"tourId": None},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["car"]["tourId"] is None
    assert response.json()["car"]["tour"] is None


@pytest.mark.asyncio
async def test_list_cars_filters(test_client, auth_headers, sample_car_data):
    """Test listing cars with exact filters and the year filter."""
    for brand, year, transmission in [("Toyota", 2020, "automatic"), ("Lada", 2015, "manual"), ("Toyota", 2015, "manual")]:
        response = await test_client.post(
            f"{API}/cars",
            json={**sample_car_data, "brand": brand, "year": year, "transmission": transmission},
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = await test_client.get(f"{API}/cars", params={"brand": "Toyota"})
    assert response.json()["count"] == 2

    response = await test_client.get(f"{API}/cars", params={"year": "2015", "transmission": "manual"})
    assert {car["brand"] for car in response.json()["cars"]} == {"Lada", "Toyota"}

    response = await test_client.get(f"{API}/cars", params={"year": "old"})
    assert response.json()["count"] == 3


@pytest.mark.asyncio
async def test_deleting_tour_keeps_its_cars(test_client, auth_headers, created_tour, sample_car_data):
    """Test that deleting a tour detaches its cars instead of removing them."""
    car = await test_client.post(
        f"{API}/cars",
        json={**sample_car_data, "tourId": created_tour["id"]},
        headers=auth_headers,
    )
    car_id = car.json()["car"]["id"]

    await test_client.delete(f"{API}/tours/{created_tour['id']}", headers=auth_headers)

    response = await test_client.get(f"{API}/cars/{car_id}")
    assert response.status_code == 200
    assert response.json()["car"]["tourId"] is None


@pytest.mark.asyncio
async def test_delete_car(test_client, auth_headers, created_car):
    """Test deleting a car."""
    response = await test_client.delete(f"{API}/cars/{created_car['id']}", headers=auth_headers)
    assert response.status_code == 200

    response = await test_client.get(f"{API}/cars/{created_car['id']}")
    assert response.status_code == 404
