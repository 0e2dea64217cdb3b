from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from pydantic import ValidationError

from connectvi.timetable.schemas import Stop, Route
from connectvi.timetable import seed_data

logger = logging.getLogger(__name__)

class TimetableError(ValueError):
    """Raised when reference data cannot be loaded into the store"""

class Timetable:
    """Read-only store of stops and routes with case-insensitive lookup tables"""
    
    def __init__(self, stops: Iterable[Stop], routes: Iterable[Route]):
        self.stops: Tuple[Stop, ...] = tuple(stops)
        self.routes: Tuple[Route, ...] = tuple(routes)
        
        self._stops_by_id: Dict[str, Stop] = {}
        self._stops_by_name: Dict[str, Stop] = {}  # lower-cased name -> stop
        self._routes_by_id: Dict[str, Route] = {}
        
        for stop in self.stops:
            if stop.id in self._stops_by_id:
                raise TimetableError(f"Duplicate stop id '{stop.id}'")
            key = stop.name.lower()
            if key in self._stops_by_name:
                raise TimetableError(f"Duplicate stop name '{stop.name}'")
            self._stops_by_id[stop.id] = stop
            self._stops_by_name[key] = stop
        
        for route in self.routes:
            if route.id in self._routes_by_id:
                raise TimetableError(f"Duplicate route id '{route.id}'")
            self._routes_by_id[route.id] = route
        
        # Definition order is kept; the query interpreter scans in this order
        self.normalized_stop_names: Tuple[str, ...] = tuple(stop.name.lower() for stop in self.stops)
        self._normalized_sequences: Dict[str, Tuple[str, ...]] = {
            route.id: tuple(name.lower() for name in route.stop_sequence)
            for route in self.routes
        }
        
        unresolved = [
            (route.id, name) for route in self.routes
            for name in route.stop_sequence
            if name.lower() not in self._stops_by_name
        ]
        for route_id, name in unresolved:
            logger.debug("Route %s references unknown stop '%s'", route_id, name)
    
    @classmethod
    def from_records(cls, stops: Iterable[dict], routes: Iterable[dict]) -> "Timetable":
        """Build a store from plain dict records"""
        try:
            parsed_stops = [Stop(**record) for record in stops]
            parsed_routes = [Route(**record) for record in routes]
        except ValidationError as e:
            raise TimetableError(f"Invalid timetable data: {e}") from e
        return cls(parsed_stops, parsed_routes)
    
    def get_stop(self, stop_id: str) -> Optional[Stop]:
        """Get stop by ID"""
        return self._stops_by_id.get(stop_id)
    
    def find_stop_by_name(self, name: str) -> Optional[Stop]:
        """Exact, case-insensitive name lookup"""
        return self._stops_by_name.get(name.strip().lower())
    
    def get_route(self, route_id: str) -> Optional[Route]:
        """Get route by ID"""
        return self._routes_by_id.get(route_id)
    
    def normalized_sequence(self, route: Route) -> Tuple[str, ...]:
        """Lower-cased stop sequence of a route"""
        sequence = self._normalized_sequences.get(route.id)
        if sequence is None:
            sequence = tuple(name.lower() for name in route.stop_sequence)
        return sequence
    
    def stops_for_route(self, route: Route) -> List[Stop]:
        """Stops whose name exactly equals one of the route's endpoints or intermediates"""
        names = set(route.stop_sequence)
        return [stop for stop in self.stops if stop.name in names]

@lru_cache()
def get_timetable() -> Timetable:
    """Shared store built from the bundled seed data"""
    timetable = Timetable.from_records(seed_data.STOPS, seed_data.ROUTES)
    logger.info("Loaded timetable with %d stops and %d routes", len(timetable.stops), len(timetable.routes))
    return timetable
