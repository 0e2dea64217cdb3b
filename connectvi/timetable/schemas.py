from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Tuple
from datetime import datetime
import re

# "06:50 AM", "2:05 pm"
CLOCK_PATTERN = re.compile(r"^(0?[1-9]|1[0-2]):([0-5][0-9])\s*([AaPp][Mm])$")

class Stop(BaseModel):
    """Named boarding point with coordinates"""
    id: str
    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    routes: Tuple[str, ...] = ()
    
    class Config:
        frozen = True

class Timing(BaseModel):
    """One scheduled departure/arrival pair in a single direction"""
    origin: str
    destination: str
    departure: str
    arrival: str
    
    @field_validator("departure", "arrival")
    @classmethod
    def validate_clock_time(cls, v):
        if not CLOCK_PATTERN.match(v.strip()):
            raise ValueError(f"'{v}' is not a 12-hour clock time like '06:50 AM'")
        return v
    
    @property
    def departure_hour(self) -> int:
        """Departure hour on a 24-hour clock; 12 is kept as-is for both AM and PM"""
        hour = int(self.departure.split(":")[0])
        is_am = "am" in self.departure.lower()
        return hour if is_am or hour == 12 else hour + 12
    
    class Config:
        frozen = True

class Route(BaseModel):
    """Directional bus route with its timetable"""
    id: str
    name: str
    color: str
    start_point: str
    end_point: str
    intermediate_stops: Tuple[str, ...] = ()
    operating_hours: str
    frequency: str
    timings: Tuple[Timing, ...] = ()
    
    @property
    def stop_sequence(self) -> List[str]:
        """Ordered stop names from start to end"""
        return [self.start_point, *self.intermediate_stops, self.end_point]
    
    class Config:
        frozen = True

class Vehicle(BaseModel):
    """Snapshot of a simulated bus"""
    id: str
    route_id: str
    lat: float
    lng: float
    heading: float
    speed: float
    last_update: datetime
    next_stop: Optional[str] = None  # Stop id
    
    class Config:
        frozen = True
