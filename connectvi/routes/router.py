from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional

from connectvi.timetable import Timetable, get_timetable
from connectvi.stations.schemas import StopList, StopDetail
from connectvi.routes.schemas import RouteSummary, RouteDetail, RoutePath, RouteFinderResult
from connectvi.routes.service import RouteService

router = APIRouter()

def get_route_service(timetable: Timetable = Depends(get_timetable)) -> RouteService:
    return RouteService(timetable)

def _route_not_found(route_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Route with ID {route_id} not found"
    )

@router.get("/", response_model=List[RouteSummary])
def list_routes(route_service: RouteService = Depends(get_route_service)):
    """Get all bus routes"""
    return [RouteSummary.model_validate(route) for route in route_service.get_routes()]

@router.get("/find", response_model=RouteFinderResult)
def find_routes(
    from_stop: str = Query(..., alias="from", min_length=1, description="Origin stop name"),
    to_stop: str = Query(..., alias="to", min_length=1, description="Destination stop name"),
    route_service: RouteService = Depends(get_route_service)
):
    """Find routes travelling from one stop to another"""
    routes = route_service.find_routes(from_stop, to_stop)
    return RouteFinderResult(
        from_stop=from_stop,
        to_stop=to_stop,
        routes=[RouteSummary.model_validate(route) for route in routes],
        total=len(routes)
    )

@router.get("/{route_id}", response_model=RouteDetail)
def get_route(route_id: str, route_service: RouteService = Depends(get_route_service)):
    """Get route details with its timetable"""
    route = route_service.get_route(route_id)
    if not route:
        raise _route_not_found(route_id)
    return RouteDetail.model_validate(route)

@router.get("/{route_id}/stops", response_model=StopList)
def get_route_stops(route_id: str, route_service: RouteService = Depends(get_route_service)):
    """Get the stops served by a route"""
    route = route_service.get_route(route_id)
    if not route:
        raise _route_not_found(route_id)
    
    stops = route_service.timetable.stops_for_route(route)
    return StopList(
        stops=[StopDetail.model_validate(stop) for stop in stops],
        total=len(stops),
        route_id=route_id
    )

@router.get("/{route_id}/path", response_model=RoutePath)
def get_route_path(
    route_id: str,
    origin: Optional[str] = Query(None, description="Start drawing from this stop"),
    route_service: RouteService = Depends(get_route_service)
):
    """Get the ordered coordinates to draw for a route"""
    points = route_service.get_route_path(route_id, origin)
    if points is None:
        raise _route_not_found(route_id)
    return RoutePath(route_id=route_id, origin=origin, points=points)
