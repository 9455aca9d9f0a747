"""Immutable domain models for the flight graph engine.

All models are frozen dataclasses with slots. They have no external
dependencies and can be used as graph vertices or returned from
queries without risk of later mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Tuple, TypeVar

V = TypeVar("V")


@dataclass(frozen=True, slots=True)
class Airport:
    """An airport identified by its display name.

    Two airports with the same name are the same airport, whatever short
    code a description used for them.

    Attributes:
        name: Human-readable airport name (e.g., 'Dallas Fort/Worth')
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Airport name must be a non-empty string, got {self.name!r}")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class TreeEdge(Generic[V]):
    """One edge chosen by a minimum spanning tree traversal."""

    source: V
    target: V
    weight: Any


@dataclass(frozen=True, slots=True)
class Route:
    """A cheapest route between two airports.

    Attributes:
        path: Ordered airports from origin to destination (inclusive)
        cost: Total weight of the route in the queried metric
    """

    path: Tuple[Airport, ...]
    cost: Any

    @property
    def origin(self) -> Airport:
        return self.path[0]

    @property
    def destination(self) -> Airport:
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of airports on the route."""
        return len(self.path)
