from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from enum import Enum

class ReplyStatus(str, Enum):
    """Outcome of interpreting a message"""
    OK = "ok"
    UNRESOLVED_LOCATIONS = "unresolved_locations"
    NO_DEPARTURES = "no_departures"

class ParsedQuery(BaseModel):
    """Locations and hour window extracted from free text"""
    start_location: Optional[str] = None
    end_location: Optional[str] = None
    start_hour: int = Field(0, ge=0, le=24)
    end_hour: int = Field(24, ge=0, le=24)

class DepartureMatch(BaseModel):
    """A timing that satisfies the query"""
    route_id: str
    route_name: str
    origin: str
    destination: str
    departure: str
    arrival: str
    departure_hour: int

class AssistantReply(BaseModel):
    status: ReplyStatus
    query: ParsedQuery
    matches: List[DepartureMatch] = []
    message: str

class ChatMessage(BaseModel):
    text: str = Field(..., max_length=500)
    
    @field_validator("text")
    @classmethod
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError("Message text must not be blank")
        return v

class Greeting(BaseModel):
    sender: Literal["bot"] = "bot"
    text: str
