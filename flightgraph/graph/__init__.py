"""Graph engine for the airport network.

This subpackage holds the generic weighted graph used for both the
time-weighted and the cost-weighted views of the network, together with
its shortest-path and minimum spanning tree queries.
"""

from .weighted_graph import WeightedGraph

__all__ = ["WeightedGraph"]
