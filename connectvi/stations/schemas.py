from pydantic import BaseModel
from typing import List, Optional

class StopBase(BaseModel):
    id: str
    name: str
    lat: float
    lng: float

class StopDetail(StopBase):
    routes: List[str] = []
    
    class Config:
        from_attributes = True

class Suggestion(BaseModel):
    """Search-as-you-type candidate: a whole route or a board-here-to-terminus entry"""
    id: str
    label: str

class SuggestionResult(BaseModel):
    query: str
    suggestions: List[Suggestion]
    total: int

class StopList(BaseModel):
    stops: List[StopDetail]
    total: int
    route_id: Optional[str] = None
