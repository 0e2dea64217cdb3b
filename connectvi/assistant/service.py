from typing import List, Tuple
import logging
import re

from connectvi.timetable import Timetable
from connectvi.assistant.schemas import (
    AssistantReply, DepartureMatch, ParsedQuery, ReplyStatus
)

logger = logging.getLogger(__name__)

GREETING = "Hi! I'm NOVA. Tell me where you're starting from, where you want to go, and your travel times."
UNRESOLVED_LOCATIONS_MESSAGE = (
    "I'm sorry, I couldn't understand the start and end locations. "
    "Please mention at least two valid bus stops."
)

TIME_PATTERN = re.compile(r"(\d{1,2})\s*([ap]m)", re.IGNORECASE)

def to_24_hour(hour: int, period: str) -> int:
    """Convert a spoken hour to 24-hour form; 12 stays 12 for both am and pm"""
    if period.lower() == "pm" and hour != 12:
        return hour + 12
    return hour

class QueryInterpreter:
    """Turns a free-text trip request into matching departures"""
    
    def __init__(self, timetable: Timetable):
        self.timetable = timetable
    
    def extract_locations(self, text: str) -> List[str]:
        """Stop names mentioned in the text, in stop-list order (not text order)"""
        lowered = text.lower()
        return [name for name in self.timetable.normalized_stop_names if name in lowered]
    
    def extract_hour_window(self, text: str) -> Tuple[int, int]:
        """First two time mentions as an inclusive hour window, else the whole day"""
        times = TIME_PATTERN.findall(text)
        if len(times) < 2:
            return 0, 24
        (start, start_period), (end, end_period) = times[0], times[1]
        return to_24_hour(int(start), start_period), to_24_hour(int(end), end_period)
    
    def parse(self, text: str) -> ParsedQuery:
        """Extract the start/end stops and hour window from a message"""
        mentioned = self.extract_locations(text)
        start_hour, end_hour = self.extract_hour_window(text)
        
        # Spoken hours like "13pm" are kept out of the 0-24 window
        start_hour = min(start_hour, 24)
        end_hour = min(end_hour, 24)
        
        return ParsedQuery(
            start_location=mentioned[0] if len(mentioned) >= 1 else None,
            end_location=mentioned[1] if len(mentioned) >= 2 else None,
            start_hour=start_hour,
            end_hour=end_hour
        )
    
    def find_departures(self, query: ParsedQuery) -> List[DepartureMatch]:
        """Timings of routes running start -> end whose departure hour is in the window"""
        matches = []
        for route in self.timetable.routes:
            sequence = self.timetable.normalized_sequence(route)
            if query.start_location not in sequence or query.end_location not in sequence:
                continue
            # Reverse traversal is not served by a route
            if sequence.index(query.start_location) >= sequence.index(query.end_location):
                continue
            
            for timing in route.timings:
                hour = timing.departure_hour
                if query.start_hour <= hour <= query.end_hour:
                    matches.append(DepartureMatch(
                        route_id=route.id,
                        route_name=route.name,
                        origin=timing.origin,
                        destination=timing.destination,
                        departure=timing.departure,
                        arrival=timing.arrival,
                        departure_hour=hour
                    ))
        return matches
    
    def respond(self, text: str) -> AssistantReply:
        """Interpret a message and build a structured reply"""
        query = self.parse(text)
        
        if not query.start_location or not query.end_location:
            return AssistantReply(
                status=ReplyStatus.UNRESOLVED_LOCATIONS,
                query=query,
                message=UNRESOLVED_LOCATIONS_MESSAGE
            )
        
        matches = self.find_departures(query)
        logger.debug(
            "Query %s -> %s [%d, %d] matched %d departures",
            query.start_location, query.end_location, query.start_hour, query.end_hour, len(matches)
        )
        
        if not matches:
            return AssistantReply(
                status=ReplyStatus.NO_DEPARTURES,
                query=query,
                message=(
                    f"I couldn't find any buses going from {query.start_location} to {query.end_location} "
                    "within your specified time. Please try a different time or location."
                )
            )
        
        lines = [format_departure(match) for match in matches]
        header = f"Here are the buses I found from {query.start_location} to {query.end_location}:"
        return AssistantReply(
            status=ReplyStatus.OK,
            query=query,
            matches=matches,
            message="\n".join([header, *lines])
        )
    
    def interpret(self, text: str) -> str:
        """Reply text for a message"""
        return self.respond(text).message

def format_departure(match: DepartureMatch) -> str:
    return (
        f'- Route "{match.route_name}": Departs {match.origin} at {match.departure}, '
        f"arrives at {match.destination} by {match.arrival}."
    )
