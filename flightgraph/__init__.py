"""Top-level package for the flightgraph engine.

flightgraph loads a pair of simplified directed-graph descriptions of
an airport network (one weighted by travel time, one by cost) and
answers shortest-route and minimum spanning tree questions on them.
"""

from .domain import (
    Airport,
    FlightGraphError,
    NoPathError,
    ParseError,
    Route,
    SourceNotFoundError,
    TreeEdge,
    UndeclaredVertexError,
    UnknownVertexError,
)
from .graph import WeightedGraph
from .loader import AirportLoader
from .parsing import AirportNetwork, DescriptionParser
from .services import Metric, RoutePlanner

__all__ = [
    "Airport",
    "AirportLoader",
    "AirportNetwork",
    "DescriptionParser",
    "FlightGraphError",
    "Metric",
    "NoPathError",
    "ParseError",
    "Route",
    "RoutePlanner",
    "SourceNotFoundError",
    "TreeEdge",
    "UndeclaredVertexError",
    "UnknownVertexError",
    "WeightedGraph",
]
