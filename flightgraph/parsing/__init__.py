"""Parsing of simplified directed-graph descriptions."""

from .description_parser import (
    AirportNetwork,
    DescriptionParser,
    LineKind,
    is_graph_opener,
    parse_label,
    parse_weight,
)

__all__ = [
    "AirportNetwork",
    "DescriptionParser",
    "LineKind",
    "is_graph_opener",
    "parse_label",
    "parse_weight",
]
