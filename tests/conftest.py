import pytest
from fastapi.testclient import TestClient

from connectvi.config import Settings
from connectvi.main import create_app
from connectvi.timetable import Timetable, get_timetable

NAVSARI_STOPS = [
    {"id": "n-1", "name": "Navsari", "lat": 20.9528, "lng": 77.7483, "routes": ["nav"]},
    {"id": "n-2", "name": "Panchawati", "lat": 20.9451, "lng": 77.7512, "routes": ["nav"]},
    {"id": "n-3", "name": "Irwin Sq.", "lat": 20.9389, "lng": 77.7547, "routes": ["nav"]},
    {"id": "n-4", "name": "Rajkamal", "lat": 20.9321, "lng": 77.7523, "routes": ["nav"]},
    {"id": "n-5", "name": "Sai Nagar", "lat": 20.9023, "lng": 77.7781, "routes": ["nav"]},
    {"id": "n-6", "name": "Old Town Badnera", "lat": 20.8845, "lng": 77.7984, "routes": ["nav"]},
]

NAVSARI_ROUTE = {
    "id": "nav",
    "name": "Navsari - Old Town Badnera",
    "color": "#f59e0b",
    "start_point": "Navsari",
    "end_point": "Old Town Badnera",
    "intermediate_stops": ["Panchawati", "Irwin Sq.", "Rajkamal", "Sai Nagar"],
    "operating_hours": "06:30 AM - 06:25 PM",
    "frequency": "Varies",
    "timings": [
        {"origin": "Navsari", "destination": "Old Town, Badnera", "departure": "06:30 AM", "arrival": "07:05 AM"},
        {"origin": "Navsari", "destination": "Old Town, Badnera", "departure": "06:55 AM", "arrival": "07:30 AM"},
        {"origin": "Navsari", "destination": "Old Town, Badnera", "departure": "09:45 AM", "arrival": "10:20 AM"},
        {"origin": "Navsari", "destination": "Old Town, Badnera", "departure": "10:00 AM", "arrival": "10:35 AM"},
        {"origin": "Old Town, Badnera", "destination": "Navsari", "departure": "02:05 PM", "arrival": "02:40 PM"},
        {"origin": "Old Town, Badnera", "destination": "Navsari", "departure": "02:15 PM", "arrival": "02:50 PM"},
        {"origin": "Old Town, Badnera", "destination": "Navsari", "departure": "05:35 PM", "arrival": "06:10 PM"},
        {"origin": "Old Town, Badnera", "destination": "Navsari", "departure": "05:50 PM", "arrival": "06:25 PM"},
    ],
}

@pytest.fixture
def timetable() -> Timetable:
    return get_timetable()

@pytest.fixture
def navsari_timetable() -> Timetable:
    """Single route whose stop list is defined in travel order"""
    return Timetable.from_records(NAVSARI_STOPS, [NAVSARI_ROUTE])

@pytest.fixture
def client():
    app = create_app(Settings(SIMULATION_ENABLED=False))
    with TestClient(app) as test_client:
        yield test_client
