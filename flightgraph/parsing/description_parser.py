"""Line parser for simplified directed-graph descriptions.

A description is a small subset of the DOT language, one statement per
line::

    digraph {
      A [label="Denver International Airport"]
      B [label="Dallas Fort/Worth"]
      A->B [weight=12.5]
    }

Label lines map a short code to an airport and register it as a vertex.
Edge lines connect two previously declared codes. Anything else is
ignored.

The same description format is used for the time-weighted and the
cost-weighted view of the network. Both views share one label table and
the parser is told per line which view it is filling.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Union

from ..domain.errors import ParseError, UndeclaredVertexError
from ..domain.models import Airport
from ..graph import WeightedGraph

Weight = Union[int, float]

_CODE = r"[A-Za-z_][A-Za-z0-9_]*"

LABEL_PATTERN = re.compile(
    rf"^\s*(?P<code>{_CODE})\s*\[\s*label\s*=\s*(?P<value>.*?)\s*\]\s*;?\s*$"
)
EDGE_PATTERN = re.compile(
    rf"^\s*(?P<source>{_CODE})\s*->\s*(?P<target>{_CODE})"
    r"\s*\[\s*weight\s*=\s*(?P<weight>.*?)\s*\]\s*;?\s*$"
)
GRAPH_OPENER_PATTERN = re.compile(r"^\s*(?:strict\s+)?(?:di)?graph\b[^\[\]]*$", re.IGNORECASE)

_QUOTED = re.compile(r'^"(?P<text>(?:[^"\\]|\\.)*)"$')
_NUMBER = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")


class LineKind(Enum):
    """What a description line turned out to be."""

    IGNORED = "ignored"
    LABEL = "label"
    EDGE = "edge"


def is_graph_opener(line: str) -> bool:
    """True for the ``digraph {`` style line that starts a description."""
    return bool(GRAPH_OPENER_PATTERN.match(line))


def parse_weight(raw: str, line: str = "", line_number: Optional[int] = None) -> Weight:
    """Convert a weight literal to ``int`` or ``float``.

    Integer literals stay integers. A value wrapped in double quotes is
    accepted. Negative or non-numeric values raise ParseError.
    """
    text = raw.strip()
    if len(text) >= 2 and text[0] == text[-1] == '"':
        text = text[1:-1].strip()

    if not _NUMBER.match(text):
        raise ParseError(
            f"Invalid weight {raw!r}",
            line=line,
            line_number=line_number,
        )
    if "." in text:
        return float(text)
    return int(text)


def parse_label(raw: str, line: str = "", line_number: Optional[int] = None) -> str:
    """Extract the display name from a quoted label value."""
    match = _QUOTED.match(raw.strip())
    if match is None:
        raise ParseError(
            f"Label must be a double-quoted string, got {raw!r}",
            line=line,
            line_number=line_number,
        )
    name = match.group("text").replace('\\"', '"').strip()
    if not name:
        raise ParseError("Label must not be empty", line=line, line_number=line_number)
    return name


@dataclass
class AirportNetwork:
    """Shared state built while loading a pair of descriptions.

    Attributes:
        labels: Short code -> airport, shared by both graphs
        time_graph: Graph weighted by travel time
        cost_graph: Graph weighted by monetary cost
    """

    labels: Dict[str, Airport] = field(default_factory=dict)
    time_graph: WeightedGraph[Airport, Weight] = field(default_factory=WeightedGraph)
    cost_graph: WeightedGraph[Airport, Weight] = field(default_factory=WeightedGraph)

    def graph_for(self, is_time_graph: bool) -> WeightedGraph[Airport, Weight]:
        return self.time_graph if is_time_graph else self.cost_graph

    def airport(self, code: str, line: Optional[str] = None) -> Airport:
        """Resolve a short code to its airport.

        Raises:
            UndeclaredVertexError: If no label line declared the code.
        """
        try:
            return self.labels[code]
        except KeyError:
            raise UndeclaredVertexError(
                f"Airport code {code!r} used before its label declaration",
                code=code,
                line=line,
            ) from None

    def is_empty(self) -> bool:
        return not self.labels and self.time_graph.is_empty() and self.cost_graph.is_empty()


@dataclass
class DescriptionParser:
    """Apply description lines to an AirportNetwork.

    ``is_time_graph=True`` sends a line to the time graph and
    ``False`` sends it to the cost graph. The label table is updated
    either way.
    """

    network: AirportNetwork = field(default_factory=AirportNetwork)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def parse_line(
        self,
        line: str,
        is_time_graph: bool,
        line_number: Optional[int] = None,
    ) -> LineKind:
        """Process one description line.

        Args:
            line: Raw line, with or without its trailing newline.
            is_time_graph: Selects the graph the line applies to.
            line_number: Position of the line, used in error reports.

        Returns:
            The kind of line that was recognised.

        Raises:
            ParseError: If a label or edge line carries a malformed value.
            UndeclaredVertexError: If an edge references an unknown code.
        """
        if line is None:
            return LineKind.IGNORED
        text = line.rstrip("\r\n")

        match = EDGE_PATTERN.match(text)
        if match is not None:
            self._apply_edge(match, text, is_time_graph, line_number)
            return LineKind.EDGE

        match = LABEL_PATTERN.match(text)
        if match is not None:
            self._apply_label(match, text, is_time_graph, line_number)
            return LineKind.LABEL

        return LineKind.IGNORED

    def parse_lines(self, lines: Iterable[str], is_time_graph: bool) -> Counter:
        """Parse lines in order and count them by LineKind."""
        counts: Counter = Counter()
        for line_number, line in enumerate(lines, start=1):
            counts[self.parse_line(line, is_time_graph, line_number)] += 1
        return counts

    def _apply_label(
        self,
        match: re.Match,
        line: str,
        is_time_graph: bool,
        line_number: Optional[int],
    ) -> None:
        code = match.group("code")
        airport = Airport(parse_label(match.group("value"), line, line_number))

        previous = self.network.labels.get(code)
        if previous is not None and previous != airport:
            self._logger.warning(
                "Airport code redeclared",
                extra={"code": code, "previous": previous.name, "current": airport.name},
            )
        self.network.labels[code] = airport
        self.network.graph_for(is_time_graph).insert_vertex(airport)

    def _apply_edge(
        self,
        match: re.Match,
        line: str,
        is_time_graph: bool,
        line_number: Optional[int],
    ) -> None:
        source = self.network.airport(match.group("source"), line)
        target = self.network.airport(match.group("target"), line)
        weight = parse_weight(match.group("weight"), line, line_number)

        graph = self.network.graph_for(is_time_graph)
        # Codes are shared, so a code declared in the other description is a vertex here too.
        graph.insert_vertex(source)
        graph.insert_vertex(target)
        if not graph.insert_edge(source, target, weight):
            self._logger.debug(
                "Edge weight overwritten",
                extra={"source": source.name, "target": target.name, "weight": weight},
            )
