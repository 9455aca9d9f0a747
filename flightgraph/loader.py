"""Airport description loader.

This is the file boundary of the engine. It:
- validates the two source identifiers (time and cost descriptions)
- reads both sources completely before touching any graph
- streams the time description, then the cost description, through
  the DescriptionParser with the matching graph flag

A load either returns a fully populated AirportNetwork or raises.
Nothing is partially populated.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .config import GraphConfig, get_config
from .domain.errors import SourceNotFoundError
from .parsing import AirportNetwork, DescriptionParser, is_graph_opener

Source = Union[str, os.PathLike]

_COMMENT_PREFIXES = ("//", "#")


@dataclass
class AirportLoader:
    """Load a time description and a cost description into one network.

    Attributes:
        config: Graph configuration (data directory, accepted extensions)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_airports(self, time_source: Optional[Source], cost_source: Optional[Source]) -> AirportNetwork:
        """Load both descriptions.

        Args:
            time_source: Path of the description weighted by travel time.
            cost_source: Path of the description weighted by cost.

        Returns:
            The populated network (label table and both graphs).

        Raises:
            SourceNotFoundError: If either source is missing, unreadable,
                has an unexpected extension or does not hold a description.
            ParseError: If a line is malformed.
            UndeclaredVertexError: If an edge uses an undeclared code.
        """
        self._logger.debug(
            "Loading airports",
            extra={"time_source": str(time_source), "cost_source": str(cost_source)},
        )

        time_lines = self._read_source(time_source)
        cost_lines = self._read_source(cost_source)
        network = self.load_lines(time_lines, cost_lines)

        self._logger.info(
            "Airports loaded",
            extra={
                "airports": len(network.labels),
                "time_edges": network.time_graph.get_edge_count(),
                "cost_edges": network.cost_graph.get_edge_count(),
            },
        )
        return network

    def load_default(self) -> AirportNetwork:
        """Load the descriptions named in the configuration."""
        return self.load_airports(self.config.time_path, self.config.cost_path)

    def load_lines(self, time_lines: Iterable[str], cost_lines: Iterable[str]) -> AirportNetwork:
        """Build a network from in-memory line sequences.

        The time lines are parsed first with the time flag, then the cost
        lines with the cost flag.
        """
        network = AirportNetwork()
        parser = DescriptionParser(network)
        parser.parse_lines(time_lines, is_time_graph=True)
        parser.parse_lines(cost_lines, is_time_graph=False)
        return network

    def resolve_path(self, source: Optional[Source]) -> Path:
        """Validate a source identifier and return the file it names.

        Relative paths that do not exist from the working directory are
        looked up in the configured data directory.

        Raises:
            SourceNotFoundError: If the identifier is empty, has an
                unexpected extension or names no existing file.
        """
        if source is None or not str(source).strip():
            raise SourceNotFoundError("No description source given", source=None)

        path = Path(source)
        if path.suffix.lower() not in self.config.allowed_extensions:
            raise SourceNotFoundError(
                f"Unexpected file extension {path.suffix!r} for {path}"
                f" (expected one of {', '.join(self.config.allowed_extensions)})",
                source=str(source),
            )

        if not path.is_absolute() and not path.exists():
            candidate = self.config.data_dir / path
            if candidate.exists():
                path = candidate

        if not path.is_file():
            raise SourceNotFoundError(f"Description not found: {path}", source=str(source))
        return path

    def _read_source(self, source: Optional[Source]) -> List[str]:
        path = self.resolve_path(source)
        try:
            with path.open(encoding=self.config.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceNotFoundError(
                f"Cannot read description {path}",
                source=str(source),
                cause=e,
            )

        first = next(
            (
                line
                for line in lines
                if line.strip() and not line.lstrip().startswith(_COMMENT_PREFIXES)
            ),
            None,
        )
        if first is None or not is_graph_opener(first):
            raise SourceNotFoundError(
                f"{path} does not start with a graph declaration",
                source=str(source),
            )
        return lines
