"""
Stops & Search Module

Stop listing and the search-as-you-type matcher used by the navigation and
route-finder widgets.

Key Components:
- service.py: Substring matcher over route names, endpoints and intermediate stops
- router.py: FastAPI endpoints for stop lookup and autocomplete
- schemas.py: Pydantic models for stops and suggestions
"""

from .router import router
from .service import StationService
from .schemas import StopDetail, StopList, Suggestion, SuggestionResult

__all__ = [
    "router",
    "StationService",
    "StopDetail",
    "StopList",
    "Suggestion",
    "SuggestionResult"
]
