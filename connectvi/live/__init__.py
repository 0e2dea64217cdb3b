"""
Live Positions Module

Synthetic vehicle positions for the live map. The fleet is a random walk:
every tick nudges each bus's coordinates and speed within fixed bounds and
stamps the update time. Nothing here follows the road network.

Key Components:
- realtime_service.py: tick(), LivePositionSimulator and the SimulationTask that drives it
- websocket.py: WebSocketManager pushing each snapshot to connected clients
- router.py: FastAPI endpoints for vehicle snapshots and stats
- schemas.py: Pydantic models for live responses
"""

from .router import router
from .realtime_service import LivePositionSimulator, SimulationTask, seed_vehicles, tick
from .websocket import WebSocketManager
from .schemas import VehiclePosition, VehicleList, LiveStats

__all__ = [
    "router",
    "LivePositionSimulator",
    "SimulationTask",
    "seed_vehicles",
    "tick",
    "WebSocketManager",
    "VehiclePosition",
    "VehicleList",
    "LiveStats"
]
