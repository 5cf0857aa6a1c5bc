import math
from typing import Optional
from ecotraffic.domain.models import Intersection, SignalState, CongestionLevel
from ecotraffic.domain import config


def round_half_up(value: float, digits: int = 0):
    """Rounds .5 away from zero for positive values, matching the dashboard display."""
    scale = 10 ** digits
    rounded = math.floor(value * scale + 0.5) / scale
    return int(rounded) if digits == 0 else rounded


def congestion_for(queue_length: int) -> CongestionLevel:
    if queue_length > config.HIGH_CONGESTION_QUEUE:
        return CongestionLevel.HIGH
    if queue_length > config.MEDIUM_CONGESTION_QUEUE:
        return CongestionLevel.MEDIUM
    return CongestionLevel.LOW


def efficiency_for(avg_wait_time: int, queue_length: int) -> int:
    raw = 100 - avg_wait_time * config.EFFICIENCY_WAIT_WEIGHT - queue_length * config.EFFICIENCY_QUEUE_WEIGHT
    return round_half_up(max(config.MIN_EFFICIENCY, min(config.MAX_EFFICIENCY, raw)))


def co2_for(idle_time: int, queue_length: int) -> float:
    return round_half_up(idle_time * config.CO2_PER_IDLE_SECOND + queue_length * config.CO2_PER_QUEUED_VEHICLE, 1)


def fuel_for(co2_emissions: float) -> float:
    return round_half_up(co2_emissions * config.FUEL_PER_KG_CO2, 1)


class TrafficSystem:
    """Moves vehicles through one intersection per tick according to its light."""

    def __init__(self, rng):
        self.rng = rng

    def update(self, intersection: Intersection, phase: Optional[SignalState]):
        if phase == SignalState.RED:
            self._accumulate(intersection)
        elif phase == SignalState.GREEN:
            self._discharge(intersection)
        # Yellow holds the previous tick's counts

        if phase is not None:
            intersection.lightStatus = phase
        self.recompute_derived(intersection)

    def _draw(self, bounds) -> int:
        low, high = bounds
        return self.rng.randint(low, high)

    def _accumulate(self, intersection: Intersection):
        # Cars pile up at red, every queued car idles for the whole tick
        intersection.vehicleCount = min(config.MAX_VEHICLE_COUNT,
                                        intersection.vehicleCount + self._draw(config.RED_VEHICLE_ARRIVALS))
        intersection.queueLength = min(config.MAX_QUEUE_LENGTH,
                                       intersection.queueLength + self._draw(config.RED_QUEUE_GROWTH))
        intersection.avgWaitTime = min(config.MAX_WAIT_TIME,
                                       intersection.avgWaitTime + self._draw(config.RED_WAIT_GROWTH))
        intersection.idleTime += intersection.queueLength

    def _discharge(self, intersection: Intersection):
        intersection.vehicleCount = max(0, intersection.vehicleCount - self._draw(config.GREEN_VEHICLE_DEPARTURES))
        intersection.queueLength = max(0, intersection.queueLength - self._draw(config.GREEN_QUEUE_DISCHARGE))
        intersection.avgWaitTime = max(config.MIN_WAIT_TIME,
                                       intersection.avgWaitTime - self._draw(config.GREEN_WAIT_RELIEF))
        intersection.idleTime = max(0, intersection.idleTime - config.IDLE_RELIEF_ON_GREEN)

    @staticmethod
    def recompute_derived(intersection: Intersection):
        intersection.congestionLevel = congestion_for(intersection.queueLength)
        intersection.efficiency = efficiency_for(intersection.avgWaitTime, intersection.queueLength)
        intersection.co2Emissions = co2_for(intersection.idleTime, intersection.queueLength)
        intersection.fuelConsumption = fuel_for(intersection.co2Emissions)
