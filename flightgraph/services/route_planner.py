"""Route planner service - code-level queries over a loaded network.

Callers talk in short airport codes ("A", "B", ...). The planner
resolves them through the label table and runs the query on the
time-weighted or cost-weighted graph.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from ..domain.models import Airport, Route, TreeEdge
from ..graph import WeightedGraph
from ..parsing import AirportNetwork


class Metric(Enum):
    """Which weighting of the network a query uses."""

    TIME = "time"
    COST = "cost"


@dataclass
class RoutePlanner:
    """Answer route and spanning-tree questions for a loaded network.

    Attributes:
        network: Label table plus time and cost graphs
    """

    network: AirportNetwork
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def graph(self, metric: Union[Metric, str]) -> WeightedGraph[Airport, float]:
        metric = Metric(metric)
        return self.network.graph_for(metric is Metric.TIME)

    def route(self, origin: str, destination: str, metric: Union[Metric, str] = Metric.TIME) -> Route:
        """Cheapest route between two airport codes.

        Raises:
            UndeclaredVertexError: If a code has no label.
            UnknownVertexError: If the airport is not in the chosen graph.
            NoPathError: If the destination is unreachable.
        """
        graph = self.graph(metric)
        source = self.network.airport(origin)
        target = self.network.airport(destination)

        path = graph.shortest_path(source, target)
        cost = graph.get_path_cost(source, target)

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "metric": Metric(metric).value,
                "stops": len(path),
                "cost": cost,
            },
        )
        return Route(path=tuple(path), cost=cost)

    def fastest_route(self, origin: str, destination: str) -> Route:
        return self.route(origin, destination, Metric.TIME)

    def cheapest_route(self, origin: str, destination: str) -> Route:
        return self.route(origin, destination, Metric.COST)

    def spanning_tree(self, root: str, metric: Union[Metric, str] = Metric.TIME) -> List[TreeEdge[Airport]]:
        """Minimum spanning tree edges grown from ``root``."""
        return self.graph(metric).get_min_spanning_tree_edges(self.network.airport(root))

    def spanning_tree_cost(self, root: str, metric: Union[Metric, str] = Metric.TIME) -> float:
        return self.graph(metric).get_min_spanning_tree_cost(self.network.airport(root))

    def codes(self) -> List[str]:
        return sorted(self.network.labels)
