from datetime import datetime
import asyncio
import json
import random

import pytest

from connectvi.live import LivePositionSimulator, SimulationTask, WebSocketManager, seed_vehicles, tick

NOW = datetime(2024, 5, 1, 8, 30)

class FixedRandom:
    """random.Random stand-in returning a constant draw"""
    
    def __init__(self, value):
        self.value = value
    
    def random(self):
        return self.value

def test_seed_fleet():
    vehicles = seed_vehicles(now=NOW)
    assert [v.id for v in vehicles] == ["bus-1", "bus-2", "bus-3", "bus-4"]
    assert all(v.last_update == NOW for v in vehicles)

def test_tick_applies_bounded_random_walk():
    vehicles = seed_vehicles(now=NOW)
    later = datetime(2024, 5, 1, 8, 31)
    
    updated = tick(vehicles, FixedRandom(0.75), later)
    
    for before, after in zip(vehicles, updated):
        assert after.lat == pytest.approx(before.lat + 0.00025)
        assert after.lng == pytest.approx(before.lng + 0.00025)
        assert after.speed == pytest.approx(before.speed + 2.5)
        assert after.heading == before.heading
        assert after.next_stop == before.next_stop
        assert after.last_update == later
    # Snapshots are new objects; the previous one is untouched
    assert vehicles[0].last_update == NOW

def test_tick_clamps_speed():
    vehicles = seed_vehicles(now=NOW)
    slow = tick([vehicles[1].model_copy(update={"speed": 5})], FixedRandom(0.0), NOW)
    fast = tick([vehicles[1].model_copy(update={"speed": 34})], FixedRandom(0.999), NOW)
    assert slow[0].speed == 5
    assert fast[0].speed == 35

def test_speed_stays_in_band_over_many_ticks():
    vehicles = tuple(v.model_copy(update={"speed": 5}) for v in seed_vehicles(now=NOW))
    rng = random.Random(42)
    for _ in range(10000):
        vehicles = tick(vehicles, rng, NOW)
        assert all(5 <= v.speed <= 35 for v in vehicles)

def test_simulator_step_and_snapshot(timetable):
    simulator = LivePositionSimulator(timetable, seed_vehicles(now=NOW), rng=random.Random(1))
    first = simulator.snapshot()
    
    snapshot = simulator.step(now=datetime(2024, 5, 1, 8, 35))
    
    assert simulator.ticks_applied == 1
    assert list(snapshot) == simulator.snapshot()
    assert all(abs(a.lat - b.lat) <= 0.0005 for a, b in zip(first, snapshot))
    assert [v.id for v in simulator.snapshot(route_id="route-3")] == ["bus-3"]
    assert simulator.get_vehicle("bus-4").route_id == "route-4"
    assert simulator.get_vehicle("bus-9") is None

def test_simulator_stats(timetable):
    simulator = LivePositionSimulator(timetable, seed_vehicles(now=NOW), tick_seconds=5.0)
    stats = simulator.stats()
    assert stats.active_vehicles == 4
    assert stats.total_routes == 4
    assert stats.update_interval_seconds == 5.0
    assert stats.ticks_applied == 0
    assert stats.last_tick_at is None

def test_simulation_task_ticks_in_order_and_stops(timetable):
    simulator = LivePositionSimulator(timetable, seed_vehicles(now=NOW), tick_seconds=0.01)
    seen = []
    simulator.add_update_callback(lambda snapshot: seen.append(simulator.ticks_applied))
    
    async def scenario():
        async with SimulationTask(simulator) as task:
            await asyncio.sleep(0.2)
            assert task.running
        assert not task.running
        stopped_at = simulator.ticks_applied
        await asyncio.sleep(0.05)
        return stopped_at
    
    stopped_at = asyncio.run(scenario())
    
    assert stopped_at >= 1
    assert simulator.ticks_applied == stopped_at
    assert seen == list(range(1, stopped_at + 1))

def test_simulation_task_released_on_error(timetable):
    simulator = LivePositionSimulator(timetable, seed_vehicles(now=NOW), tick_seconds=0.01)
    task = SimulationTask(simulator)
    
    async def scenario():
        async with task:
            await asyncio.sleep(0.03)
            raise RuntimeError("view torn down")
    
    with pytest.raises(RuntimeError):
        asyncio.run(scenario())
    assert not task.running

def test_failing_callback_does_not_stop_simulation(timetable):
    simulator = LivePositionSimulator(timetable, seed_vehicles(now=NOW), tick_seconds=0.01)
    received = []
    
    def broken(snapshot):
        raise ValueError("subscriber failed")
    
    async def collect(snapshot):
        received.append(snapshot)
    
    simulator.add_update_callback(broken)
    simulator.add_update_callback(collect)
    
    async def scenario():
        async with SimulationTask(simulator):
            await asyncio.sleep(0.1)
    
    asyncio.run(scenario())
    assert len(received) == simulator.ticks_applied >= 1

class FakeWebSocket:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []
    
    async def accept(self):
        pass
    
    async def send_text(self, text):
        if self.fail:
            raise RuntimeError("closed")
        self.sent.append(text)

def test_broadcast_respects_route_subscription():
    manager = WebSocketManager()
    everyone, route_only, closed = FakeWebSocket(), FakeWebSocket(), FakeWebSocket(fail=True)
    vehicles = seed_vehicles(now=NOW)
    
    async def scenario():
        for ws in (everyone, route_only, closed):
            await manager.connect(ws)
        await manager.subscribe_to_route(route_only, "route-2")
        await manager.broadcast_positions(vehicles)
    
    asyncio.run(scenario())
    
    assert len(json.loads(everyone.sent[-1])["vehicles"]) == 4
    filtered = json.loads(route_only.sent[-1])
    assert filtered["route_id"] == "route-2"
    assert [v["id"] for v in filtered["vehicles"]] == ["bus-2"]
    assert closed not in manager.active_connections

def test_subscriptions_drop_empty_routes():
    manager = WebSocketManager()
    first, second = FakeWebSocket(), FakeWebSocket()
    
    async def scenario():
        await manager.connect(first)
        await manager.connect(second)
        await manager.subscribe_to_route(first, "route-1")
        await manager.subscribe_to_route(second, "route-1")
        await manager.subscribe_to_route(first, "route-2")
        assert manager.route_subscriptions == {"route-1": {second}, "route-2": {first}}
        
        await manager.unsubscribe(second)
        assert manager.route_subscriptions == {"route-2": {first}}
        assert manager.subscribed_route(second) is None
    
    asyncio.run(scenario())
    
    manager.disconnect(first)
    assert manager.route_subscriptions == {}
    assert manager.active_connections == [second]
