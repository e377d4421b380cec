"""Typed domain errors for the all-pairs shortest path toolkit.

Construction errors (bad weights, unknown endpoints, malformed edge
lists) abort graph or matrix construction immediately. A missing path
is never an error: queries return a ``NoPath`` value instead.

All errors inherit from AllPairsError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AllPairsError(Exception):
    """Base error for the all-pairs domain.

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
class GraphError(AllPairsError):
    """Graph construction or loading error.

    Attributes:
        graph_name: Name of the graph being built, if any
    """

    graph_name: Optional[str] = None


@dataclass
class InvalidWeightError(GraphError):
    """An edge label does not parse to a finite number.

    Attributes:
        label: The offending edge label (None when the edge had none)
    """

    label: Optional[str] = None


@dataclass
class UnknownNodeError(GraphError):
    """An edge or a query references a node that is not in the graph.

    Attributes:
        node_label: Label (or index, as text) of the missing node
    """

    node_label: str = ""


@dataclass
class DuplicateNodeError(GraphError):
    """A node with the same label is already part of the graph.

    Attributes:
        node_label: The duplicated label
    """

    node_label: str = ""


@dataclass
class GraphParseError(GraphError):
    """A statement of the edge-list language could not be parsed.

    Attributes:
        statement: The raw statement text
        line: 1-based line number where the statement starts
    """

    statement: str = ""
    line: int = 0


@dataclass
class EngineNotReadyError(AllPairsError):
    """A query or step was requested in the wrong engine state.

    Attributes:
        state: Name of the state the engine was in
    """

    state: str = ""


@dataclass
class ComputationCancelledError(AllPairsError):
    """The relaxation pass was cancelled cooperatively.

    Attributes:
        completed_iterations: Number of intermediate nodes fully processed
    """

    completed_iterations: int = 0


@dataclass
class PathReconstructionError(AllPairsError):
    """Following predecessors did not lead back to the source.

    Only happens when the graph has a negative-weight cycle, which the
    engine requires callers not to supply.

    Attributes:
        source: Source node label
        target: Target node label
    """

    source: str = ""
    target: str = ""


@dataclass
class ConfigurationError(AllPairsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(AllPairsError):
    """Writing a diagnostic report failed.

    Attributes:
        output_path: Path where the report was to be written
    """

    output_path: Optional[str] = None
