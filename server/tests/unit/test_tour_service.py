"""Unit tests for tour and car services."""

from uuid import uuid4

import pytest

from tourism_api.core.exceptions import NotFoundError, ValidationError
from tourism_api.schemas.car import CreateCarRequest, UpdateCarRequest
from tourism_api.schemas.tour import CreateTourRequest, UpdateTourRequest
from tourism_api.services.car_service import CarService
from tourism_api.services.tour_service import TourService


@pytest.mark.asyncio
async def test_create_tour(test_session, sample_tour_data):
    """Test creating a tour."""
    service = TourService(test_session)

    tour = await service.create_tour(CreateTourRequest.model_validate(sample_tour_data))

    assert tour.id is not None
    assert tour.name == sample_tour_data["name"]
    assert tour.max_people == 12
    assert tour.images == [sample_tour_data["images"]]
    assert tour.reviews == []
    assert tour.cars == []


@pytest.mark.asyncio
async def test_get_tour_not_found(test_session):
    """Test getting a non-existent tour raises NotFoundError."""
    service = TourService(test_session)

    with pytest.raises(NotFoundError):
        await service.get_tour(uuid4())


@pytest.mark.asyncio
async def test_update_tour_changes_only_sent_fields(test_session, sample_tour_data):
    """Test a partial update."""
    service = TourService(test_session)
    tour = await service.create_tour(CreateTourRequest.model_validate(sample_tour_data))

    updated = await service.update_tour(tour.id, UpdateTourRequest.model_validate({"price": 400}))

    assert updated.price == 400
    assert updated.name == sample_tour_data["name"]


@pytest.mark.asyncio
async def test_list_tours_filters_and_sorts(test_session, sample_tour_data):
    """Test listing with a city filter and price ordering."""
    service = TourService(test_session)
    for city, price in [("Naryn", 300), ("Naryn", 100), ("Osh", 50)]:
        await service.create_tour(
            CreateTourRequest.model_validate({**sample_tour_data, "city": city, "price": price})
        )

    tours = await service.list_tours({"city": "Naryn", "sort": "price_asc"})

    assert [tour.price for tour in tours] == [100, 300]


@pytest.mark.asyncio
async def test_delete_tour_detaches_cars(test_session, sample_tour_data, sample_car_data):
    """Test that deleting a tour keeps its cars without a tour."""
    tour_service = TourService(test_session)
    car_service = CarService(test_session)
    tour = await tour_service.create_tour(CreateTourRequest.model_validate(sample_tour_data))
    car = await car_service.create_car(
        CreateCarRequest.model_validate({**sample_car_data, "tourId": str(tour.id)})
    )

    await tour_service.delete_tour(tour.id)

    reloaded = await car_service.get_car(car.id)
    assert reloaded.tour_id is None
    assert reloaded.tour is None


@pytest.mark.asyncio
async def test_create_car_with_unknown_tour_fails(test_session, sample_car_data):
    """Test that a dangling tour reference is a validation error."""
    service = CarService(test_session)

    with pytest.raises(ValidationError) as exc_info:
        await service.create_car(CreateCarRequest.model_validate({**sample_car_data, "tourId": str(uuid4())}))

    assert exc_info.value.message_key == "car.invalid_tour"


@pytest.mark.asyncio
async def test_update_car_detach_from_tour(test_session, sample_tour_data, sample_car_data):
    """Test that an explicit null tour id detaches the car."""
    tour = await TourService(test_session).create_tour(CreateTourRequest.model_validate(sample_tour_data))
    service = CarService(test_session)
    car = await service.create_car(CreateCarRequest.model_validate({**sample_car_data, "tourId": str(tour.id)}))
    assert car.tour is not None

    updated = await service.update_car(car.id, UpdateCarRequest.model_validate({"tourId": None}))

    assert updated.tour_id is None
    assert updated.tour is None
