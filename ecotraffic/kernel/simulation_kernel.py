import logging
import random
from typing import Callable, List, Optional

from ecotraffic.domain.models import (
    Alert, CommandResult, DashboardSnapshot, EnvironmentalData, EnvironmentReport, ImpactSummary,
    Intersection, NetworkMap, SignalState, SystemStats, TrafficLight
)
from ecotraffic.domain.state import SimulationState
from ecotraffic.domain.graph import RoadNetwork
from ecotraffic.domain import config, seed as seed_data
from ecotraffic.application.commands import (
    Command, ManualPhaseCommand, SetAutoModeCommand, SetEcoModeCommand, SetOptimizedCommand
)
from ecotraffic.kernel.command_queue import CommandQueue
from ecotraffic.kernel.snapshot_builder import SnapshotBuilder
from ecotraffic.systems.signal_system import SignalSystem
from ecotraffic.systems.traffic_system import TrafficSystem
from ecotraffic.systems.stats_system import StatsSystem
from ecotraffic.systems.environment_system import (
    build_alerts, calculate_daily_impact, calculate_environmental_impact, classify_air_quality
)

logger = logging.getLogger(__name__)

Observer = Callable[[DashboardSnapshot], None]

class SimulationKernel:
    def __init__(self, rng=None):
        # Anything exposing randint(a, b) and seed(n) will do; tests pass a scripted source
        self.rng = rng if rng is not None else random.Random()
        self.state = SimulationState()
        self.dt = config.TICK_SECONDS
        self.command_queue = CommandQueue()
        self.initialized = False

        self.signal_system = SignalSystem()
        self.traffic_system = TrafficSystem(self.rng)
        self.stats_system = StatsSystem(self.rng)
        self.snapshot_builder = SnapshotBuilder()
        self._observers: List[Observer] = []

    def initialize(self, seed: int = config.DEFAULT_SEED):
        self.state = SimulationState()
        self.rng.seed(seed)
        self.command_queue.clear()
        self._initialize_network()
        self.state.environment = EnvironmentalData(**seed_data.SEED_ENVIRONMENT)
        self.state.stats = SystemStats(**seed_data.SEED_STATS)
        self.initialized = True
        logger.info("Simulation Kernel Initialized with Seed %s", seed)

    def _initialize_network(self):
        self.state.intersections = {}
        self.state.lights = {}
        network = RoadNetwork()

        for record in seed_data.SEED_INTERSECTIONS:
            intersection = Intersection(**record)
            self.state.intersections[intersection.intersection] = intersection
            network.add_intersection(intersection.intersection,
                                     (intersection.coordinates.x, intersection.coordinates.y))

        for record in seed_data.SEED_LIGHTS:
            light = TrafficLight(**record)
            self.state.lights[light.id] = light

        for u, v in seed_data.ROAD_LINKS:
            network.add_street(u, v)
        self.state.road_network = network

    def _ensure_initialized(self):
        if not self.initialized:
            self.initialize()

    # Commands

    def queue_command(self, command: Command):
        """Defers a command to the start of the next tick."""
        self.command_queue.add(command)

    def execute_command(self, command: Command) -> CommandResult:
        self._ensure_initialized()
        return command.execute(self)

    def set_auto_mode(self, light_id: str, enabled: bool) -> CommandResult:
        return self.execute_command(SetAutoModeCommand(light_id, enabled))

    def set_eco_mode(self, light_id: str, enabled: bool) -> CommandResult:
        return self.execute_command(SetEcoModeCommand(light_id, enabled))

    def set_optimized(self, light_id: str, enabled: bool) -> CommandResult:
        return self.execute_command(SetOptimizedCommand(light_id, enabled))

    def manual_set_phase(self, light_id: str, phase: SignalState) -> CommandResult:
        return self.execute_command(ManualPhaseCommand(light_id, phase))

    # Tick

    def run_tick(self) -> DashboardSnapshot:
        self._ensure_initialized()

        # 1. Consume Commands
        commands = self.command_queue.pop_all()
        while commands:
            commands.popleft().execute(self)

        # 2. Signals
        self.signal_system.update(self.state.lights.values(), self.dt)

        # 3. Traffic, driven by each light's new phase
        for name, intersection in self.state.intersections.items():
            light = self.state.light_for(name)
            self.traffic_system.update(intersection, light.status if light else None)

        # 4. Network-wide aggregation
        intersections = list(self.state.intersections.values())
        self.state.environment = calculate_environmental_impact(intersections)
        self.stats_system.update(self.state.stats, intersections, self.state.environment)

        # 5. Advance Time
        self.state.time += self.dt
        self.state.tick_id += 1
        logger.debug("Tick %d complete", self.state.tick_id)

        snapshot = self.snapshot_builder.build(self.state)
        self._publish_snapshot(snapshot)
        return snapshot

    # Observers

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)
        return unsubscribe

    def _publish_snapshot(self, snapshot: DashboardSnapshot):
        for observer in list(self._observers):
            try:
                # Independent copy per observer
                observer(snapshot.model_copy(deep=True))
            except Exception:
                logger.exception("Snapshot observer %r failed", observer)

    # Reads

    def get_snapshot(self) -> DashboardSnapshot:
        self._ensure_initialized()
        return self.snapshot_builder.build(self.state)

    def get_intersections(self) -> List[Intersection]:
        return self.get_snapshot().intersections

    def get_intersection(self, name: str) -> Optional[Intersection]:
        self._ensure_initialized()
        intersection = self.state.intersections.get(name)
        return intersection.model_copy(deep=True) if intersection else None

    def get_lights(self) -> List[TrafficLight]:
        return self.get_snapshot().lights

    def get_light(self, light_id: str) -> Optional[TrafficLight]:
        self._ensure_initialized()
        light = self.state.lights.get(light_id)
        return light.model_copy(deep=True) if light else None

    def get_environment(self) -> EnvironmentReport:
        self._ensure_initialized()
        environment = self.state.environment.model_copy()
        return EnvironmentReport(data=environment, airQualityLabel=classify_air_quality(environment.airQualityIndex))

    def get_stats(self) -> SystemStats:
        self._ensure_initialized()
        return self.state.stats.model_copy()

    def get_impact(self) -> ImpactSummary:
        self._ensure_initialized()
        return calculate_daily_impact(self.state.stats)

    def get_alerts(self) -> List[Alert]:
        self._ensure_initialized()
        return build_alerts(self.state.intersections.values(), self.state.lights.values(),
                            self.state.environment)

    def get_network_map(self) -> NetworkMap:
        self._ensure_initialized()
        return self.snapshot_builder.build_map(self.state)
