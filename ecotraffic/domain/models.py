from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

class SignalState(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

class CongestionLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class Coordinates(BaseModel):
    x: float
    y: float

class Intersection(BaseModel):
    intersection: str  # e.g., "Main St & 1st Ave"
    vehicleCount: int
    avgWaitTime: int  # seconds
    congestionLevel: CongestionLevel
    lightStatus: SignalState
    mlRecommendation: str
    coordinates: Coordinates
    efficiency: int  # 0-100
    queueLength: int
    idleTime: int  # seconds cars spend idling
    co2Emissions: float  # kg per hour
    fuelConsumption: float  # liters per hour

class TrafficLight(BaseModel):
    id: str  # e.g., "TL001"
    status: SignalState
    timeRemaining: int
    autoMode: bool
    intersection: str
    cycleOptimized: bool
    ecoMode: bool

class EnvironmentalData(BaseModel):
    co2Reduced: float  # kg per hour
    fuelSaved: float  # liters per hour
    airQualityIndex: float  # 0-500 scale
    noiseReduction: float  # decibels reduced
    particleReduction: float  # PM2.5 reduction percentage

class SystemStats(BaseModel):
    totalIntersections: int
    avgWaitTime: int
    trafficFlow: int
    mlAccuracy: int
    activeAlerts: int
    energySaved: int
    vehiclesProcessed: int
    totalCO2Saved: int  # kg today
    totalFuelSaved: int  # liters today

class AlertKind(str, Enum):
    HIGH_EMISSIONS = "high_emissions"
    ECO_MODE = "eco_mode"
    AIR_QUALITY = "air_quality"

class Alert(BaseModel):
    kind: AlertKind
    title: str
    subject: str
    message: str

class ImpactSummary(BaseModel):
    totalCO2Saved: int
    totalFuelSaved: int
    co2SavedTonnes: int
    treesEquivalent: int
    carsOffRoad: int
    energySavedKwh: int

class EnvironmentReport(BaseModel):
    data: EnvironmentalData
    airQualityLabel: str

class DashboardSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    tick: int
    time: float
    intersections: List[Intersection]
    lights: List[TrafficLight]
    environment: EnvironmentalData
    stats: SystemStats
    vehiclesDetected: int

# API/Response Models

class ModeToggle(BaseModel):
    enabled: bool

class PhaseUpdate(BaseModel):
    phase: SignalState

class CommandResult(BaseModel):
    applied: bool
    lightId: str
    detail: str
    light: Optional[TrafficLight] = None

class MapNode(BaseModel):
    intersection: str
    coordinates: Coordinates
    lightStatus: SignalState
    congestionLevel: CongestionLevel

class MapEdge(BaseModel):
    source: str
    target: str
    length: float

class NetworkMap(BaseModel):
    nodes: List[MapNode]
    edges: List[MapEdge]
