from typing import Dict, List, Optional

from connectvi.timetable import Timetable, Stop
from connectvi.stations.schemas import Suggestion

class StationService:
    @staticmethod
    def search(timetable: Timetable, query: str, limit: Optional[int] = None) -> List[Suggestion]:
        """Substring search over route names, endpoints and intermediate stops
        
        Route-level hits are keyed by route id and labelled with the route name.
        Intermediate-stop hits are keyed "<route id>-<stop>" and labelled
        "<stop> - <route end>". Results keep insertion order; an empty query
        yields nothing.
        """
        needle = (query or "").strip().lower()
        if not needle:
            return []
        
        suggestions: Dict[str, Suggestion] = {}
        
        for route in timetable.routes:
            if (
                needle in route.name.lower()
                or needle in route.start_point.lower()
                or needle in route.end_point.lower()
            ):
                suggestions[route.id] = Suggestion(id=route.id, label=route.name)
            
            for stop_name in route.intermediate_stops:
                if needle in stop_name.lower():
                    key = f"{route.id}-{stop_name}"
                    suggestions[key] = Suggestion(id=key, label=f"{stop_name} - {route.end_point}")
        
        results = list(suggestions.values())
        if limit is not None:
            results = results[:limit]
        return results
    
    @staticmethod
    def get_stops(timetable: Timetable, query: Optional[str] = None) -> List[Stop]:
        """Get stops, optionally filtered by a name substring"""
        if not query:
            return list(timetable.stops)
        needle = query.lower()
        return [stop for stop in timetable.stops if needle in stop.name.lower()]
    
    @staticmethod
    def get_stop_by_id(timetable: Timetable, stop_id: str) -> Optional[Stop]:
        """Get stop by ID"""
        return timetable.get_stop(stop_id)
    
    @staticmethod
    def get_stops_by_route(timetable: Timetable, route_id: str) -> Optional[List[Stop]]:
        """Get the stops served by a route, or None for an unknown route"""
        route = timetable.get_route(route_id)
        if not route:
            return None
        return timetable.stops_for_route(route)
