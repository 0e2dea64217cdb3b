from fastapi import APIRouter, Depends, HTTPException, status, Query, Request, WebSocket
from typing import Optional
from datetime import datetime

from connectvi.timetable import Timetable, Vehicle, get_timetable
from connectvi.live.schemas import VehicleList, VehiclePosition, LiveStats
from connectvi.live.realtime_service import LivePositionSimulator
from connectvi.live.websocket import websocket_endpoint

router = APIRouter()

def get_simulator(request: Request) -> LivePositionSimulator:
    """Simulator owned by the application lifespan"""
    return request.app.state.simulator

def to_position(vehicle: Vehicle, timetable: Timetable) -> VehiclePosition:
    route = timetable.get_route(vehicle.route_id)
    next_stop = timetable.get_stop(vehicle.next_stop) if vehicle.next_stop else None
    return VehiclePosition(
        **vehicle.model_dump(),
        route_name=route.name if route else None,
        next_stop_name=next_stop.name if next_stop else None
    )

@router.get("/vehicles", response_model=VehicleList)
def get_vehicles(
    route: Optional[str] = Query(None, description="Only vehicles on this route"),
    simulator: LivePositionSimulator = Depends(get_simulator),
    timetable: Timetable = Depends(get_timetable)
):
    """Latest simulated vehicle positions"""
    vehicles = simulator.snapshot(route_id=route)
    return VehicleList(
        vehicles=[to_position(v, timetable) for v in vehicles],
        total=len(vehicles),
        route_id=route,
        timestamp=datetime.now()
    )

@router.get("/vehicles/{vehicle_id}", response_model=VehiclePosition)
def get_vehicle(
    vehicle_id: str,
    simulator: LivePositionSimulator = Depends(get_simulator),
    timetable: Timetable = Depends(get_timetable)
):
    """Latest position of one vehicle"""
    vehicle = simulator.get_vehicle(vehicle_id)
    if not vehicle:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Vehicle with ID {vehicle_id} not found"
        )
    return to_position(vehicle, timetable)

@router.get("/stats", response_model=LiveStats)
def get_live_stats(simulator: LivePositionSimulator = Depends(get_simulator)):
    """Fleet size, route count and update cadence"""
    return simulator.stats()

@router.websocket("/ws")
async def live_positions_socket(websocket: WebSocket):
    """WebSocket endpoint for live vehicle positions"""
    await websocket_endpoint(websocket, websocket.app.state.ws_manager, websocket.app.state.simulator)
