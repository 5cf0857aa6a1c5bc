from typing import List
from ecotraffic.domain.models import EnvironmentalData, Intersection, SystemStats
from ecotraffic.domain import config
from ecotraffic.systems.traffic_system import round_half_up
from ecotraffic.systems.environment_system import high_emission_intersections

class StatsSystem:
    def __init__(self, rng):
        self.rng = rng

    def update(self, stats: SystemStats, intersections: List[Intersection], environment: EnvironmentalData):
        if intersections:
            count = len(intersections)
            stats.avgWaitTime = round_half_up(sum(i.avgWaitTime for i in intersections) / count)
            stats.trafficFlow = round_half_up(sum(i.efficiency for i in intersections) / count)
        stats.totalIntersections = len(intersections)
        stats.activeAlerts = len(high_emission_intersections(intersections))

        low, high = config.VEHICLES_PROCESSED_PER_TICK
        stats.vehiclesProcessed += self.rng.randint(low, high)

        # Hourly rates credited one simulated minute at a time
        stats.totalCO2Saved += max(0, round_half_up(environment.co2Reduced / config.MINUTES_PER_HOUR))
        stats.totalFuelSaved += max(0, round_half_up(environment.fuelSaved / config.MINUTES_PER_HOUR))
