from fastapi import WebSocket, WebSocketDisconnect
from typing import Dict, List, Optional, Sequence, Set
import json
import logging
from datetime import datetime

from connectvi.timetable import Vehicle

logger = logging.getLogger(__name__)

class WebSocketManager:
    """Manager for WebSocket connections and live position pushes"""
    
    def __init__(self):
        self.active_connections: List[WebSocket] = []
        self.route_subscriptions: Dict[str, Set[WebSocket]] = {}
    
    async def connect(self, websocket: WebSocket):
        """Accept new WebSocket connection"""
        await websocket.accept()
        self.active_connections.append(websocket)
    
    def disconnect(self, websocket: WebSocket):
        """Remove WebSocket connection"""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        self._clear_subscription(websocket)
    
    def _clear_subscription(self, websocket: WebSocket):
        """Drop the connection's route filter; routes left without subscribers are removed"""
        for route_id in list(self.route_subscriptions):
            subscribers = self.route_subscriptions[route_id]
            subscribers.discard(websocket)
            if not subscribers:
                del self.route_subscriptions[route_id]
    
    def subscribed_route(self, websocket: WebSocket) -> Optional[str]:
        for route_id, subscribers in self.route_subscriptions.items():
            if websocket in subscribers:
                return route_id
        return None
    
    async def subscribe_to_route(self, websocket: WebSocket, route_id: str):
        """Only push vehicles of one route to this connection"""
        self._clear_subscription(websocket)
        self.route_subscriptions.setdefault(route_id, set()).add(websocket)
        
        await self.send_personal_message(websocket, {
            "type": "subscription_confirmed",
            "route_id": route_id,
            "timestamp": datetime.now().isoformat()
        })
    
    async def unsubscribe(self, websocket: WebSocket):
        """Go back to receiving the whole fleet"""
        self._clear_subscription(websocket)
        
        await self.send_personal_message(websocket, {
            "type": "unsubscribed",
            "timestamp": datetime.now().isoformat()
        })
    
    async def send_personal_message(self, websocket: WebSocket, message: dict):
        """Send message to specific WebSocket"""
        try:
            await websocket.send_text(json.dumps(message))
        except Exception:
            logger.debug("Dropping closed WebSocket connection")
            self.disconnect(websocket)
    
    async def send_error(self, websocket: WebSocket, detail: str):
        await self.send_personal_message(websocket, {
            "type": "error",
            "detail": detail
        })
    
    def positions_message(self, vehicles: Sequence[Vehicle], route_id: Optional[str] = None) -> dict:
        if route_id:
            vehicles = [v for v in vehicles if v.route_id == route_id]
        return {
            "type": "vehicle_positions",
            "route_id": route_id,
            "vehicles": [v.model_dump(mode="json") for v in vehicles],
            "timestamp": datetime.now().isoformat()
        }
    
    async def broadcast_positions(self, vehicles: Sequence[Vehicle]):
        """Push a snapshot to every client, filtered by its route subscription"""
        if not self.active_connections:
            return
        
        for connection in list(self.active_connections):
            message = self.positions_message(vehicles, self.subscribed_route(connection))
            await self.send_personal_message(connection, message)


async def websocket_endpoint(websocket: WebSocket, manager: WebSocketManager, simulator):
    """Main WebSocket endpoint for live vehicle positions"""
    await manager.connect(websocket)
    
    try:
        await manager.send_personal_message(websocket, manager.positions_message(simulator.snapshot()))
        
        while True:
            data = await websocket.receive_text()
            
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                await manager.send_error(websocket, "Invalid JSON")
                continue
            
            if not isinstance(message, dict):
                await manager.send_error(websocket, "Message must be a JSON object")
                continue
            
            if message.get("type") == "subscribe_route":
                route_id = message.get("route_id")
                if not isinstance(route_id, str) or simulator.timetable.get_route(route_id) is None:
                    await manager.send_error(websocket, f"Unknown route {route_id}")
                    continue
                await manager.subscribe_to_route(websocket, route_id)
                await manager.send_personal_message(
                    websocket, manager.positions_message(simulator.snapshot(), route_id)
                )
            
            elif message.get("type") == "unsubscribe":
                await manager.unsubscribe(websocket)
            
            elif message.get("type") == "ping":
                await manager.send_personal_message(websocket, {
                    "type": "pong",
                    "timestamp": datetime.now().isoformat()
                })
    
    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
    finally:
        manager.disconnect(websocket)
