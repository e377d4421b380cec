"""Graph ports - Abstractions for graph loading and shortest path engines.

These protocols define the contracts for graph operations, including
loading a graph description and computing all-pairs shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import EngineState, PathQueryResult
    from ..graph.floyd_warshall import CancelCheck, ShortestPathMatrices
    from ..graph.model import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/edge_list_repository.py
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The graph, ready to be handed to an engine.
        """
        ...

    def clear_cache(self) -> None:
        """Forget any previously loaded graph."""
        ...


class ShortestPathEnginePort(Protocol):
    """Port for all-pairs shortest path computation.

    Implementation: adapters/graph/floyd_warshall_engine.py

    An engine owns the matrices of one graph snapshot at a time and
    answers queries once it has converged.
    """

    @property
    def state(self) -> EngineState:
        ...

    def compute(
        self,
        graph: Graph,
        should_cancel: Optional[CancelCheck] = None,
    ) -> ShortestPathMatrices:
        """Compute all shortest distances and predecessors of ``graph``.

        Args:
            graph: The graph snapshot to process.
            should_cancel: Optional callable polled once per iteration.

        Returns:
            The converged, read-only matrices.
        """
        ...

    def distance(self, source: str, target: str) -> float:
        """Shortest distance between two node labels."""
        ...

    def path(self, source: str, target: str) -> PathQueryResult:
        """Shortest path between two node labels, or NoPath."""
        ...
