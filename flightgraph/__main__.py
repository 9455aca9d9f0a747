"""Command-line front end for the airport network.

Usage:
    python -m flightgraph airports
    python -m flightgraph route A F --metric cost
    python -m flightgraph mst A
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import get_config
from .domain.errors import FlightGraphError
from .loader import AirportLoader
from .monitoring import configure_logging
from .services import Metric, RoutePlanner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flightgraph",
        description="Query the time and cost graphs of an airport network",
    )
    parser.add_argument("--time", dest="time_source", help="time-weighted description (.gv)")
    parser.add_argument("--cost", dest="cost_source", help="cost-weighted description (.gv)")
    parser.add_argument("--log-level", default=None, help="logging level (default from FG_LOG_LEVEL)")

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("airports", help="list airport codes and names")

    route = commands.add_parser("route", help="cheapest route between two airports")
    route.add_argument("origin")
    route.add_argument("destination")
    route.add_argument("--metric", choices=[m.value for m in Metric], default=Metric.TIME.value)

    mst = commands.add_parser("mst", help="minimum spanning tree from an airport")
    mst.add_argument("root")
    mst.add_argument("--metric", choices=[m.value for m in Metric], default=Metric.TIME.value)

    return parser


def run(args: argparse.Namespace) -> List[str]:
    """Execute a parsed command and return the output lines."""
    config = get_config()
    loader = AirportLoader(config.graph)
    network = loader.load_airports(
        args.time_source or config.graph.time_path,
        args.cost_source or config.graph.cost_path,
    )
    planner = RoutePlanner(network)

    if args.command == "airports":
        return [f"{code}: {network.labels[code]}" for code in planner.codes()]

    if args.command == "route":
        result = planner.route(args.origin, args.destination, args.metric)
        return [
            "Route: " + " -> ".join(str(airport) for airport in result.path),
            f"Total {args.metric}: {result.cost}",
        ]

    edges = planner.spanning_tree(args.root, args.metric)
    lines = [f"{edge.source} -> {edge.target} ({edge.weight})" for edge in edges]
    lines.append(f"Total {args.metric}: {planner.spanning_tree_cost(args.root, args.metric)}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(level=args.log_level)
        for line in run(args):
            print(line)
    except FlightGraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
