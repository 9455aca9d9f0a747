"""Typed domain errors for the flight graph engine.

Every failure the engine can report is one of these types, so callers
can tell a malformed description apart from a bad query or a missing
input file.

All errors inherit from FlightGraphError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FlightGraphError(Exception):
    """Base error for the flight graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(FlightGraphError):
    """A graph query or mutation could not be carried out."""


@dataclass
class InvalidEndpointError(GraphError):
    """An edge was inserted with an endpoint the graph does not know.

    Attributes:
        vertex: The missing endpoint
    """

    vertex: Any = None


@dataclass
class UnknownVertexError(GraphError):
    """A query named a vertex that is not part of the graph.

    Attributes:
        vertex: The vertex that was not found
    """

    vertex: Any = None


@dataclass
class NoPathError(GraphError):
    """No directed path exists between the requested vertices.

    Attributes:
        source: Start vertex of the query
        target: Destination vertex of the query
    """

    source: Any = None
    target: Any = None


@dataclass
class ParseError(FlightGraphError):
    """A recognised description line carries malformed content.

    Attributes:
        line: The offending line, as read
        line_number: 1-based position in its source, when known
    """

    line: str = ""
    line_number: Optional[int] = None


@dataclass
class UndeclaredVertexError(FlightGraphError):
    """A short code was used before its label declaration.

    Attributes:
        code: The unresolved short code
        line: The line that referenced it, if any
    """

    code: str = ""
    line: Optional[str] = None


@dataclass
class SourceNotFoundError(FlightGraphError):
    """A description source could not be located, opened or accepted.

    Attributes:
        source: The source identifier as given by the caller
    """

    source: Optional[str] = None


@dataclass
class ConfigurationError(FlightGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
