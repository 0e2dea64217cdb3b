"""
Timetable Store

Static reference data for the bus network: stops, routes and their scheduled
timings. The store is built once per process and is read-only afterwards, so
every other module can share it without locking.

Key Components:
- schemas.py: Immutable pydantic records (Stop, Route, Timing, Vehicle)
- store.py: Timetable with normalized lookup tables and the get_timetable dependency
- seed_data.py: Bundled network data
"""

from .schemas import Stop, Route, Timing, Vehicle
from .store import Timetable, TimetableError, get_timetable

__all__ = [
    "Stop",
    "Route",
    "Timing",
    "Vehicle",
    "Timetable",
    "TimetableError",
    "get_timetable"
]
