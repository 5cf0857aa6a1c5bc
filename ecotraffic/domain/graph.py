import math
import networkx as nx
from typing import List, Optional, Tuple

class RoadNetwork:
    def __init__(self):
        self.graph = nx.DiGraph()

    def add_intersection(self, intersection_id: str, pos: Tuple[float, float]):
        self.graph.add_node(intersection_id, pos=pos, type="intersection")

    def add_road(self, u: str, v: str, length: Optional[float] = None):
        if length is None:
            (x1, y1), (x2, y2) = self.get_node_pos(u), self.get_node_pos(v)
            length = round(math.hypot(x2 - x1, y2 - y1), 1)
        self.graph.add_edge(u, v, length=length)

    def add_street(self, u: str, v: str):
        """Two-way street: one directed edge per direction."""
        self.add_road(u, v)
        self.add_road(v, u)

    def get_node_pos(self, u: str) -> Tuple[float, float]:
        return self.graph.nodes[u].get('pos', (0.0, 0.0))

    def intersections(self) -> List[str]:
        return list(self.graph.nodes)

    def roads(self) -> List[Tuple[str, str, float]]:
        return [(u, v, data["length"]) for u, v, data in self.graph.edges(data=True)]
