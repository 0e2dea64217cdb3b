"""
Trip Assistant Module

Free-text trip requests ("from navsari to sai nagar between 6am and 10am")
resolved against the timetable. Locations are found by scanning stop names
in stop-list order, times by an hour+am/pm pattern, and only routes that
visit the start before the end are considered.

Key Components:
- service.py: QueryInterpreter (parse, find_departures, respond, interpret)
- router.py: FastAPI endpoints for the chat assistant
- schemas.py: Pydantic models for parsed queries and replies
"""

from .router import router
from .service import QueryInterpreter, GREETING, UNRESOLVED_LOCATIONS_MESSAGE
from .schemas import AssistantReply, ParsedQuery, DepartureMatch, ReplyStatus, ChatMessage

__all__ = [
    "router",
    "QueryInterpreter",
    "GREETING",
    "UNRESOLVED_LOCATIONS_MESSAGE",
    "AssistantReply",
    "ParsedQuery",
    "DepartureMatch",
    "ReplyStatus",
    "ChatMessage"
]
