from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict
from ecotraffic.domain.models import Intersection, TrafficLight, EnvironmentalData, SystemStats
from ecotraffic.domain.graph import RoadNetwork

class SimulationState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    tick_id: int = 0
    time: float = 0.0
    intersections: Dict[str, Intersection] = {}  # keyed by intersection name
    lights: Dict[str, TrafficLight] = {}  # keyed by light id
    environment: Optional[EnvironmentalData] = None
    stats: Optional[SystemStats] = None

    # Map layout
    road_network: Optional[RoadNetwork] = None

    def light_for(self, intersection_name: str) -> Optional[TrafficLight]:
        for light in self.lights.values():
            if light.intersection == intersection_name:
                return light
        return None
