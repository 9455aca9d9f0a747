"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    FlightGraphError,
    GraphError,
    InvalidEndpointError,
    NoPathError,
    ParseError,
    SourceNotFoundError,
    UndeclaredVertexError,
    UnknownVertexError,
)
from .models import Airport, Route, TreeEdge

__all__ = [
    # Models
    "Airport",
    "Route",
    "TreeEdge",
    # Errors
    "FlightGraphError",
    "GraphError",
    "InvalidEndpointError",
    "UnknownVertexError",
    "NoPathError",
    "ParseError",
    "UndeclaredVertexError",
    "SourceNotFoundError",
    "ConfigurationError",
]
