"""Services layer - Queries over a loaded airport network."""

from .route_planner import Metric, RoutePlanner

__all__ = ["Metric", "RoutePlanner"]
