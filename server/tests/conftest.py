"""Test configuration and fixtures."""

from typing import Any, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from afriride.core.data_service import DataService, _check_collection, get_data_service
from afriride.core.exceptions import DataServiceError
from afriride.models import Hotel, Tour, TransferRoute


class FakeDataService(DataService):
    """
    In-memory stand-in for the Supabase gateway.

    Applies the same collection rules as the real gateway, records every
    successful insert, and can be told to fail selects or inserts the way a
    network outage would.
    """

    def __init__(self, tables: Optional[dict[str, list[dict[str, Any]]]] = None):
        self.tables: dict[str, list[dict[str, Any]]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self.inserts: list[tuple[str, dict[str, Any]]] = []
        self.insert_attempts = 0
        self.select_calls: list[dict[str, Any]] = []
        self.fail_inserts = False
        self.fail_selects = False

    async def select(self, collection, *, order_by=None, descending=False, filters=None):
        _check_collection(collection)
        self.select_calls.append({
            "collection": collection,
            "order_by": order_by,
            "descending": descending,
            "filters": dict(filters or {}),
        })
        if self.fail_selects:
            raise DataServiceError(
                operation="select",
                collection=collection,
                cause=ConnectionError("network unreachable"),
            )

        rows = [
            dict(row) for row in self.tables.get(collection, [])
            if all(row.get(field) == value for field, value in (filters or {}).items())
        ]
        if order_by:
            rows.sort(key=lambda row: row.get(order_by), reverse=descending)
        return rows

    async def insert(self, collection, record):
        _check_collection(collection, write=True)
        self.insert_attempts += 1
        if self.fail_inserts:
            raise DataServiceError(
                operation="insert",
                collection=collection,
                cause=ConnectionError("network unreachable"),
            )
        self.inserts.append((collection, dict(record)))
        self.tables.setdefault(collection, []).append(dict(record))

    def inserted(self, collection: str) -> list[dict[str, Any]]:
        return [record for name, record in self.inserts if name == collection]


@pytest.fixture
def hotel_rows():
    return [
        {
            "id": "hotel-tirana-1",
            "name": "Hotel Tirana International",
            "description": "Landmark hotel on Skanderbeg Square",
            "location": "Tirana",
            "address": "Sheshi Skënderbej 8",
            "price_per_night": 100.0,
            "rating": 4.6,
            "amenities": ["WiFi", "Breakfast", "Parking", "Gym", "Spa"],
            "image_url": "https://images.example.com/tirana.jpg",
            "available_rooms": 5,
            "created_at": "2024-01-10T08:00:00+00:00",
        },
        {
            "id": "hotel-saranda-1",
            "name": "Saranda Bay Resort",
            "description": "Sea-view rooms on the Albanian Riviera",
            "location": "Saranda",
            "address": "Rruga Jonianët",
            "price_per_night": 85.5,
            "rating": 4.8,
            "amenities": ["WiFi", "Pool"],
            "image_url": "https://images.example.com/saranda.jpg",
            "available_rooms": 12,
            "created_at": "2024-01-11T08:00:00+00:00",
        },
    ]


@pytest.fixture
def tour_rows():
    return [
        {
            "id": "tour-berat-1",
            "title": "Berat Old Town Walk",
            "description": "The city of a thousand windows",
            "duration": "Full day",
            "price": 50.0,
            "category": "Cultural",
            "location": "Berat",
            "includes": ["Guide", "Lunch"],
            "image_url": "https://images.example.com/berat.jpg",
            "max_participants": 8,
            "created_at": "2024-02-01T08:00:00+00:00",
        },
        {
            "id": "tour-theth-1",
            "title": "Theth Valley Hike",
            "description": "Hike to the Blue Eye of Theth",
            "duration": "2 days",
            "price": 120.0,
            "category": "Adventure",
            "location": "Theth",
            "includes": ["Guide", "Transport", "Guesthouse"],
            "image_url": "https://images.example.com/theth.jpg",
            "max_participants": 6,
            "created_at": "2024-02-02T08:00:00+00:00",
        },
        {
            "id": "tour-butrint-1",
            "title": "Butrint Ruins",
            "description": "UNESCO archaeological park",
            "duration": "Half day",
            "price": 35.0,
            "category": "Cultural",
            "location": "Butrint",
            "includes": ["Entrance"],
            "image_url": "https://images.example.com/butrint.jpg",
            "max_participants": 15,
            "created_at": "2024-02-03T08:00:00+00:00",
        },
    ]


@pytest.fixture
def route_rows():
    return [
        {
            "id": "route-tia-durres",
            "from_location": "Tirana Airport",
            "to_location": "Durrës",
            "distance_km": 38,
            "price": 30.0,
            "vehicle_type": "Sedan",
            "capacity": 3,
            "duration_minutes": 40,
            "created_at": "2024-03-01T08:00:00+00:00",
        },
        {
            "id": "route-tia-tirana",
            "from_location": "Tirana Airport",
            "to_location": "Tirana Center",
            "distance_km": 17,
            "price": 20.0,
            "vehicle_type": "Minivan",
            "capacity": 7,
            "duration_minutes": 25,
            "created_at": "2024-03-01T09:00:00+00:00",
        },
        {
            "id": "route-durres-vlore",
            "from_location": "Durrës",
            "to_location": "Vlorë",
            "distance_km": 110,
            "price": 70.0,
            "vehicle_type": "Sedan",
            "capacity": 3,
            "duration_minutes": 95,
            "created_at": "2024-03-02T08:00:00+00:00",
        },
    ]


@pytest.fixture
def booking_rows():
    return [
        {
            "id": "b7a1c2d3-0000-4000-8000-000000000001",
            "booking_type": "tour",
            "customer_name": "Ana Hoxha",
            "customer_email": "ana@example.com",
            "customer_phone": "+355 69 000 0001",
            "booking_date": "2024-07-10",
            "service_id": "tour-berat-1",
            "number_of_people": 2,
            "special_requests": None,
            "total_price": 100.0,
            "status": "confirmed",
            "created_at": "2024-06-01T10:00:00+00:00",
        },
        {
            "id": "c8b2d3e4-0000-4000-8000-000000000002",
            "booking_type": "hotel",
            "customer_name": "Ana Hoxha",
            "customer_email": "ana@example.com",
            "customer_phone": "+355 69 000 0001",
            "booking_date": "2024-07-08",
            "service_id": "hotel-tirana-1",
            "number_of_people": 2,
            "special_requests": "Check-out: 2024-07-10. ",
            "total_price": 200.0,
            "status": None,
            "created_at": "2024-06-03T10:00:00+00:00",
        },
        {
            "id": "d9c3e4f5-0000-4000-8000-000000000003",
            "booking_type": "transfer",
            "customer_name": "Other Person",
            "customer_email": "other@example.com",
            "customer_phone": "+355 69 000 0002",
            "booking_date": "2024-07-08",
            "service_id": "route-tia-tirana",
            "number_of_people": 1,
            "total_price": 20.0,
            "status": "pending",
            "created_at": "2024-06-02T10:00:00+00:00",
        },
    ]


@pytest.fixture
def data_service(hotel_rows, tour_rows, route_rows, booking_rows):
    """Fake data service seeded with a small catalog and a few bookings."""
    return FakeDataService({
        "hotels": hotel_rows,
        "tours": tour_rows,
        "transfer_routes": route_rows,
        "bookings": booking_rows,
        "contact_inquiries": [],
    })


@pytest.fixture
def sample_hotel(hotel_rows):
    return Hotel.model_validate(hotel_rows[0])


@pytest.fixture
def sample_tour(tour_rows):
    return Tour.model_validate(tour_rows[0])


@pytest.fixture
def sample_route(route_rows):
    return TransferRoute.model_validate(route_rows[1])


@pytest.fixture
def sample_booking_data():
    """Booking form contents for the Berat tour."""
    return {
        "booking_type": "tour",
        "service_id": "tour-berat-1",
        "customer_name": "Erion Leka",
        "customer_email": "Erion.Leka@Example.com",
        "customer_phone": "+355 68 123 4567",
        "booking_date": "2024-08-15",
        "number_of_people": 4,
        "special_requests": "Vegetarian lunch",
    }


@pytest.fixture
def sample_hotel_booking_data():
    """Booking form contents for three nights in Tirana."""
    return {
        "booking_type": "hotel",
        "service_id": "hotel-tirana-1",
        "customer_name": "Erion Leka",
        "customer_email": "erion@example.com",
        "customer_phone": "+355 68 123 4567",
        "booking_date": "2024-06-01",
        "check_out_date": "2024-06-04",
        "number_of_people": 2,
        "special_requests": "Quiet room",
    }


@pytest.fixture
def sample_inquiry_data():
    return {
        "name": "Mira Shehu",
        "email": "mira@example.com",
        "phone": "+355 67 765 4321",
        "subject": "Group transfer",
        "message": "Can you pick up twelve people from the airport?",
    }


@pytest_asyncio.fixture(scope="function")
async def test_app(data_service):
    """Create a test FastAPI application backed by the fake data service."""
    from fastapi import FastAPI

    from afriride.core.middleware import setup_middleware
    from afriride.main import register_routes

    # No lifespan, so nothing tries to reach Supabase
    app = FastAPI(
        title="AfriRide Albania Booking API (Test)",
        version="1.0.0-test",
    )
    setup_middleware(app)
    register_routes(app)

    async def override_get_data_service():
        return data_service

    app.dependency_overrides[get_data_service] = override_get_data_service

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
