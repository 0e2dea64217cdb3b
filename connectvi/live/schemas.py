from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

class VehiclePosition(BaseModel):
    """Vehicle snapshot enriched with display names"""
    id: str
    route_id: str
    route_name: Optional[str] = None
    lat: float
    lng: float
    heading: float
    speed: float
    last_update: datetime
    next_stop: Optional[str] = None
    next_stop_name: Optional[str] = None

class VehicleList(BaseModel):
    vehicles: List[VehiclePosition]
    total: int
    route_id: Optional[str] = None
    timestamp: datetime

class LiveStats(BaseModel):
    """Headline numbers for the live map"""
    active_vehicles: int
    total_routes: int
    update_interval_seconds: float
    ticks_applied: int
    last_tick_at: Optional[datetime] = None
