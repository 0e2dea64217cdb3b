from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from datetime import datetime
import asyncio
import inspect
import logging
import random

from connectvi.config import Settings, settings
from connectvi.timetable import Timetable, Vehicle
from connectvi.timetable import seed_data
from connectvi.live.schemas import LiveStats

logger = logging.getLogger(__name__)

def seed_vehicles(records: Iterable[dict] = seed_data.VEHICLES, now: Optional[datetime] = None) -> Tuple[Vehicle, ...]:
    """Build the initial fleet, stamped with the creation time"""
    now = now or datetime.now()
    return tuple(Vehicle(last_update=now, **record) for record in records)

def tick(
    vehicles: Sequence[Vehicle],
    rng: random.Random,
    now: Optional[datetime] = None,
    position_jitter: float = settings.POSITION_JITTER_DEGREES,
    speed_jitter: float = settings.SPEED_JITTER,
    min_speed: float = settings.MIN_SPEED,
    max_speed: float = settings.MAX_SPEED
) -> Tuple[Vehicle, ...]:
    """Apply one random-walk step to every vehicle
    
    Latitude and longitude move by independent uniform draws in
    +/- position_jitter / 2, speed by +/- speed_jitter / 2 and is then clamped
    to [min_speed, max_speed]. Heading and next stop are left as they are.
    """
    now = now or datetime.now()
    updated = []
    for vehicle in vehicles:
        lat = vehicle.lat + (rng.random() - 0.5) * position_jitter
        lng = vehicle.lng + (rng.random() - 0.5) * position_jitter
        speed = vehicle.speed + (rng.random() - 0.5) * speed_jitter
        speed = max(min_speed, min(max_speed, speed))
        updated.append(vehicle.model_copy(update={
            "lat": lat,
            "lng": lng,
            "speed": speed,
            "last_update": now
        }))
    return tuple(updated)


class LivePositionSimulator:
    """Owns the simulated fleet and advances it one tick at a time"""
    
    def __init__(
        self,
        timetable: Timetable,
        vehicles: Optional[Iterable[Vehicle]] = None,
        rng: Optional[random.Random] = None,
        tick_seconds: float = settings.SIMULATION_TICK_SECONDS,
        position_jitter: float = settings.POSITION_JITTER_DEGREES,
        speed_jitter: float = settings.SPEED_JITTER,
        min_speed: float = settings.MIN_SPEED,
        max_speed: float = settings.MAX_SPEED,
        seed: Optional[int] = settings.SIMULATION_SEED
    ):
        self.timetable = timetable
        self.tick_seconds = tick_seconds
        self.position_jitter = position_jitter
        self.speed_jitter = speed_jitter
        self.min_speed = min_speed
        self.max_speed = max_speed
        self.ticks_applied = 0
        self.last_tick_at: Optional[datetime] = None
        self._vehicles: Tuple[Vehicle, ...] = tuple(vehicles) if vehicles is not None else seed_vehicles()
        self._rng = rng or random.Random(seed)
        self._update_callbacks: List[Callable] = []
    
    @classmethod
    def from_settings(cls, timetable: Timetable, app_settings: Settings, **kwargs) -> "LivePositionSimulator":
        """Simulator configured from an application Settings object"""
        return cls(
            timetable,
            tick_seconds=app_settings.SIMULATION_TICK_SECONDS,
            position_jitter=app_settings.POSITION_JITTER_DEGREES,
            speed_jitter=app_settings.SPEED_JITTER,
            min_speed=app_settings.MIN_SPEED,
            max_speed=app_settings.MAX_SPEED,
            seed=app_settings.SIMULATION_SEED,
            **kwargs
        )
    
    def step(self, now: Optional[datetime] = None) -> Tuple[Vehicle, ...]:
        """Advance the fleet by one tick and return the new snapshot"""
        now = now or datetime.now()
        self._vehicles = tick(
            self._vehicles,
            self._rng,
            now,
            position_jitter=self.position_jitter,
            speed_jitter=self.speed_jitter,
            min_speed=self.min_speed,
            max_speed=self.max_speed
        )
        self.ticks_applied += 1
        self.last_tick_at = now
        return self._vehicles
    
    def snapshot(self, route_id: Optional[str] = None) -> List[Vehicle]:
        """Latest vehicle states, optionally filtered by route"""
        vehicles = list(self._vehicles)
        if route_id:
            vehicles = [v for v in vehicles if v.route_id == route_id]
        return vehicles
    
    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        """Get the latest state of one vehicle"""
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None
    
    def stats(self) -> LiveStats:
        return LiveStats(
            active_vehicles=len(self._vehicles),
            total_routes=len(self.timetable.routes),
            update_interval_seconds=self.tick_seconds,
            ticks_applied=self.ticks_applied,
            last_tick_at=self.last_tick_at
        )
    
    def add_update_callback(self, callback: Callable):
        """Add callback invoked with each new snapshot"""
        self._update_callbacks.append(callback)
    
    async def _broadcast_update(self, snapshot: Tuple[Vehicle, ...]):
        """Hand a snapshot to all registered callbacks"""
        for callback in self._update_callbacks:
            try:
                if inspect.iscoroutinefunction(callback):
                    await callback(snapshot)
                else:
                    callback(snapshot)
            except Exception:
                logger.exception("Error broadcasting vehicle positions")
    
    async def run(self, cancel_event: asyncio.Event):
        """Tick every tick_seconds until cancel_event is set
        
        The only suspension point is the wait between ticks; each tick and its
        broadcast run to completion before the next wait starts.
        """
        logger.info("Live position simulation started (%d vehicles, every %.1fs)", len(self._vehicles), self.tick_seconds)
        try:
            while not cancel_event.is_set():
                try:
                    await asyncio.wait_for(cancel_event.wait(), timeout=self.tick_seconds)
                except asyncio.TimeoutError:
                    snapshot = self.step()
                    await self._broadcast_update(snapshot)
        finally:
            logger.info("Live position simulation stopped after %d ticks", self.ticks_applied)


class SimulationTask:
    """Background task running a simulator, cancelled when its owner exits"""
    
    def __init__(self, simulator: LivePositionSimulator):
        self.simulator = simulator
        self._cancel_event: Optional[asyncio.Event] = None
        self._task: Optional[asyncio.Task] = None
    
    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()
    
    def start(self):
        """Schedule the simulation loop on the running event loop"""
        if self.running:
            return
        self._cancel_event = asyncio.Event()
        self._task = asyncio.create_task(self.simulator.run(self._cancel_event))
    
    async def stop(self):
        """Signal the loop to stop and wait for it to finish"""
        if self._task is None:
            return
        self._cancel_event.set()
        task, self._task = self._task, None
        await task
    
    async def __aenter__(self) -> "SimulationTask":
        self.start()
        return self
    
    async def __aexit__(self, exc_type, exc, tb):
        await self.stop()
