"""
Routes Module

Route lookup, the route-finder filter for origin/destination pairs, and the
segment projector that turns a route into map coordinates.

Key Components:
- service.py: SegmentProjector and RouteService
- router.py: FastAPI endpoints for routes, served stops and drawable paths
- schemas.py: Pydantic models for route responses
"""

from .router import router
from .service import RouteService, SegmentProjector
from .schemas import (
    RouteSummary, RouteDetail, RoutePath, RouteFinderResult, Coordinate, TimingInfo
)

__all__ = [
    "router",
    "RouteService",
    "SegmentProjector",
    "RouteSummary",
    "RouteDetail",
    "RoutePath",
    "RouteFinderResult",
    "Coordinate",
    "TimingInfo"
]
