from pydantic import BaseModel
from typing import List, Optional

class TimingInfo(BaseModel):
    origin: str
    destination: str
    departure: str
    arrival: str
    
    class Config:
        from_attributes = True

class RouteSummary(BaseModel):
    """Route header information for lists"""
    id: str
    name: str
    color: str
    start_point: str
    end_point: str
    operating_hours: str
    frequency: str
    
    class Config:
        from_attributes = True

class RouteDetail(RouteSummary):
    intermediate_stops: List[str] = []
    stop_sequence: List[str] = []
    timings: List[TimingInfo] = []

class Coordinate(BaseModel):
    stop_id: str
    name: str
    lat: float
    lng: float

class RoutePath(BaseModel):
    """Ordered coordinates to draw for a route, optionally trimmed to an origin stop"""
    route_id: str
    origin: Optional[str] = None
    points: List[Coordinate]

class RouteFinderResult(BaseModel):
    from_stop: str
    to_stop: str
    routes: List[RouteSummary]
    total: int
