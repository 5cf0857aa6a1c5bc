"""
Network-wide environmental impact derived from the current intersection set.

The emissions model is illustrative: an unoptimized network is assumed to emit
a fixed percentage more than what the simulated network currently reports.
"""
from typing import Iterable, List
from ecotraffic.domain.models import (
    Alert, AlertKind, EnvironmentalData, ImpactSummary, Intersection, SystemStats, TrafficLight
)
from ecotraffic.domain import config
from ecotraffic.systems.traffic_system import round_half_up


def calculate_environmental_impact(intersections: Iterable[Intersection]) -> EnvironmentalData:
    intersections = list(intersections)
    total_idle_time = sum(i.idleTime for i in intersections)
    total_co2 = sum(i.co2Emissions for i in intersections)
    total_fuel = sum(i.fuelConsumption for i in intersections)

    baseline_co2 = total_co2 * config.BASELINE_CO2_FACTOR
    baseline_fuel = total_fuel * config.BASELINE_FUEL_FACTOR

    # No traffic means no baseline to compare against
    particle_reduction = 0.0
    if baseline_co2 > 0:
        particle_reduction = min(config.MAX_PARTICLE_REDUCTION,
                                 (baseline_co2 - total_co2) / baseline_co2 * 100)

    return EnvironmentalData(
        co2Reduced=baseline_co2 - total_co2,
        fuelSaved=baseline_fuel - total_fuel,
        airQualityIndex=max(config.AQI_FLOOR, config.AQI_BASE - total_idle_time / config.AQI_IDLE_DIVISOR),
        noiseReduction=min(config.MAX_NOISE_REDUCTION, total_idle_time / config.NOISE_IDLE_DIVISOR),
        particleReduction=particle_reduction,
    )


def classify_air_quality(aqi: float) -> str:
    if aqi <= config.GOOD_AIR_QUALITY:
        return "Good"
    if aqi <= config.MODERATE_AIR_QUALITY:
        return "Moderate"
    if aqi <= config.SENSITIVE_AIR_QUALITY:
        return "Unhealthy for Sensitive"
    return "Unhealthy"


def calculate_daily_impact(stats: SystemStats) -> ImpactSummary:
    """Translates cumulative savings into everyday equivalents."""
    return ImpactSummary(
        totalCO2Saved=stats.totalCO2Saved,
        totalFuelSaved=stats.totalFuelSaved,
        co2SavedTonnes=round_half_up(stats.totalCO2Saved / 1000),
        treesEquivalent=round_half_up(stats.totalCO2Saved / config.KG_CO2_PER_TREE),
        carsOffRoad=round_half_up(stats.totalCO2Saved / config.KG_CO2_PER_CAR_DAY),
        energySavedKwh=round_half_up(stats.totalFuelSaved * config.KWH_PER_LITER_FUEL),
    )


def high_emission_intersections(intersections: Iterable[Intersection]) -> List[Intersection]:
    return [i for i in intersections if i.co2Emissions > config.HIGH_EMISSION_THRESHOLD]


def build_alerts(intersections: Iterable[Intersection], lights: Iterable[TrafficLight],
                 environment: EnvironmentalData) -> List[Alert]:
    alerts = []
    for intersection in high_emission_intersections(intersections):
        alerts.append(Alert(
            kind=AlertKind.HIGH_EMISSIONS,
            title="High Emissions Detected",
            subject=intersection.intersection,
            message=f"{intersection.co2Emissions:.1f} kg CO₂/h • {intersection.idleTime}s idle time",
        ))

    for light in lights:
        if light.ecoMode:
            alerts.append(Alert(
                kind=AlertKind.ECO_MODE,
                title="Eco Mode Active",
                subject=light.intersection,
                message="Optimizing for minimal emissions",
            ))

    if environment.airQualityIndex <= config.GOOD_AIR_QUALITY:
        alerts.append(Alert(
            kind=AlertKind.AIR_QUALITY,
            title="Excellent Air Quality",
            subject=f"AQI: {round_half_up(environment.airQualityIndex)}",
            message="Traffic optimization working effectively",
        ))
    return alerts
