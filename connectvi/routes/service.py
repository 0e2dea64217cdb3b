from typing import List, Optional

from connectvi.timetable import Timetable, Route
from connectvi.routes.schemas import Coordinate

class SegmentProjector:
    """Resolves a route's stop sequence to coordinates"""
    
    def __init__(self, timetable: Timetable):
        self.timetable = timetable
    
    def project(self, route: Route, origin: Optional[str] = None) -> List[Coordinate]:
        """Ordered stop coordinates of a route, starting at origin when it is on the route
        
        Names that do not resolve to a stop are dropped, so a route that
        references an unknown stop yields a shorter path instead of failing.
        """
        names = route.stop_sequence
        
        if origin:
            normalized = self.timetable.normalized_sequence(route)
            key = origin.strip().lower()
            if key in normalized:
                names = names[normalized.index(key):]
        
        points = []
        for name in names:
            stop = self.timetable.find_stop_by_name(name)
            if stop:
                points.append(Coordinate(stop_id=stop.id, name=stop.name, lat=stop.lat, lng=stop.lng))
        return points


class RouteService:
    """Route lookup and origin/destination filtering"""
    
    def __init__(self, timetable: Timetable):
        self.timetable = timetable
        self.projector = SegmentProjector(timetable)
    
    def get_routes(self) -> List[Route]:
        """Get all routes in definition order"""
        return list(self.timetable.routes)
    
    def get_route(self, route_id: str) -> Optional[Route]:
        """Get route by ID"""
        return self.timetable.get_route(route_id)
    
    def get_route_path(self, route_id: str, origin: Optional[str] = None) -> Optional[List[Coordinate]]:
        """Project a route by ID; None when the route does not exist"""
        route = self.get_route(route_id)
        if not route:
            return None
        return self.projector.project(route, origin)
    
    def find_routes(self, from_stop: str, to_stop: str) -> List[Route]:
        """Routes that pass from_stop before to_stop"""
        start = from_stop.strip().lower()
        end = to_stop.strip().lower()
        
        matches = []
        for route in self.timetable.routes:
            sequence = self.timetable.normalized_sequence(route)
            if start in sequence and end in sequence and sequence.index(start) < sequence.index(end):
                matches.append(route)
        return matches
