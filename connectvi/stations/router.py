from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import Optional

from connectvi.config import settings
from connectvi.timetable import Timetable, get_timetable
from connectvi.stations.schemas import StopDetail, StopList, SuggestionResult
from connectvi.stations.service import StationService

router = APIRouter()

@router.get("/", response_model=StopList)
def get_stops(
    query: Optional[str] = Query(None, description="Filter by stop name"),
    route_id: Optional[str] = Query(None, description="Only stops served by this route"),
    timetable: Timetable = Depends(get_timetable)
):
    """Get stops with optional name and route filters"""
    if route_id:
        stops = StationService.get_stops_by_route(timetable, route_id)
        if stops is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Route with ID {route_id} not found"
            )
        if query:
            stops = [stop for stop in stops if query.lower() in stop.name.lower()]
    else:
        stops = StationService.get_stops(timetable, query=query)
    
    return StopList(
        stops=[StopDetail.model_validate(stop) for stop in stops],
        total=len(stops),
        route_id=route_id
    )

@router.get("/search", response_model=SuggestionResult)
def search_stops(
    q: str = Query("", description="Search query"),
    limit: int = Query(settings.SEARCH_RESULT_LIMIT, ge=1, le=50, description="Maximum number of results"),
    timetable: Timetable = Depends(get_timetable)
):
    """Search routes and stops by name for autocomplete"""
    suggestions = StationService.search(timetable, q, limit=limit)
    return SuggestionResult(query=q, suggestions=suggestions, total=len(suggestions))

@router.get("/{stop_id}", response_model=StopDetail)
def get_stop(stop_id: str, timetable: Timetable = Depends(get_timetable)):
    """Get stop details by ID"""
    stop = StationService.get_stop_by_id(timetable, stop_id)
    if not stop:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stop not found"
        )
    return StopDetail.model_validate(stop)
