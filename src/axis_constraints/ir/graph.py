"""Link graph: accepted scale links as an undirected networkx Graph.

Each accepted ``scalewith`` request becomes one edge between the requesting
axis and its target. Because the constraint core rejects links inside an
existing group, the graph stays a forest and its connected components match
the constraint groups one to one.
"""

from __future__ import annotations

import networkx as nx

from axis_constraints.types import AxisId


class LinkGraph:
    """Accepted links between axes, for diagnostics and consistency checks."""

    def __init__(self, graph: nx.Graph | None = None) -> None:
        self.graph: nx.Graph = graph if graph is not None else nx.Graph()

    def add_link(self, source: AxisId, target: AxisId, ratio: float) -> None:
        self.graph.add_edge(source, target, ratio=ratio, source=source)

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def has_link(self, a: AxisId, b: AxisId) -> bool:
        return self.graph.has_edge(a, b)

    def ratio(self, a: AxisId, b: AxisId) -> float | None:
        if not self.graph.has_edge(a, b):
            return None
        return self.graph.edges[a, b]["ratio"]

    def is_forest(self) -> bool:
        if self.graph.number_of_nodes() == 0:
            return True
        return nx.is_forest(self.graph)

    def components(self) -> list[list[AxisId]]:
        """Connected components as sorted axis-id lists, sorted by first member."""
        result = [sorted(c) for c in nx.connected_components(self.graph)]
        result.sort(key=lambda c: c[0])
        return result

    def links(self) -> list[tuple[AxisId, AxisId, float]]:
        """Links as (source, target, ratio) in insertion order."""
        result: list[tuple[AxisId, AxisId, float]] = []
        for a, b, data in self.graph.edges(data=True):
            source = data["source"]
            target = b if source == a else a
            result.append((source, target, data["ratio"]))
        return result
