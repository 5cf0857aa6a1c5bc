from ecotraffic.domain.models import DashboardSnapshot, NetworkMap, MapNode, MapEdge
from ecotraffic.domain.state import SimulationState

class SnapshotBuilder:
    """Copies engine state out so readers never hold references into it."""

    def build(self, state: SimulationState) -> DashboardSnapshot:
        intersections = [i.model_copy(deep=True) for i in state.intersections.values()]
        return DashboardSnapshot(
            tick=state.tick_id,
            time=state.time,
            intersections=intersections,
            lights=[light.model_copy(deep=True) for light in state.lights.values()],
            environment=state.environment.model_copy(),
            stats=state.stats.model_copy(),
            vehiclesDetected=sum(i.vehicleCount for i in intersections),
        )

    def build_map(self, state: SimulationState) -> NetworkMap:
        network = state.road_network
        nodes = []
        for name in network.intersections():
            intersection = state.intersections[name]
            nodes.append(MapNode(
                intersection=name,
                coordinates=intersection.coordinates.model_copy(),
                lightStatus=intersection.lightStatus,
                congestionLevel=intersection.congestionLevel,
            ))
        edges = [MapEdge(source=u, target=v, length=length) for u, v, length in network.roads()]
        return NetworkMap(nodes=nodes, edges=edges)
