"""Floyd-Warshall engine adapter.

This adapter wraps the matrix routines of graph/floyd_warshall.py and adds:
- An explicit lifecycle (UNINITIALIZED -> BUILT -> CONVERGED)
- Label-based queries
- Cooperative cancellation
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from ...config import EngineConfig, get_config
from ...domain.errors import ComputationCancelledError, EngineNotReadyError
from ...domain.models import EngineState, PathQueryResult
from ...graph.floyd_warshall import (
    CancelCheck,
    ShortestPathMatrices,
    build_matrices,
    relax,
)
from ...graph.model import Graph


@dataclass
class FloydWarshallEngine:
    """All-pairs shortest path engine.

    This adapter implements ShortestPathEnginePort. Every call to
    initialize() allocates new matrices, so results handed out by an
    earlier run are never modified.

    The graph must not contain a negative-weight cycle; this is a
    precondition, not something the engine detects.

    Attributes:
        config: Engine configuration (dtype, matrix logging)
    """

    config: EngineConfig = field(default_factory=lambda: get_config().engine)
    _logger: logging.Logger = field(init=False, repr=False)

    _state: EngineState = field(default=EngineState.UNINITIALIZED, init=False, repr=False)
    _labels: Tuple[str, ...] = field(default=(), init=False, repr=False)
    _costs: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _predecessors: Optional[np.ndarray] = field(default=None, init=False, repr=False)
    _result: Optional[ShortestPathMatrices] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def result(self) -> ShortestPathMatrices:
        """The converged matrices.

        Raises:
            EngineNotReadyError: If the engine has not converged.
        """
        self._require(EngineState.CONVERGED, "read results")
        assert self._result is not None
        return self._result

    def initialize(self, graph: Graph) -> None:
        """Build fresh cost and predecessor matrices for ``graph``.

        Any previous matrices are dropped. On error the engine is left
        UNINITIALIZED.

        Raises:
            UnknownNodeError: If an edge references an unindexed node.
            InvalidWeightError: If an edge weight is not finite.
        """
        self._reset()
        self._logger.debug(
            "Building matrices",
            extra={"graph": graph.name, "nodes": len(graph)},
        )

        costs, predecessors = build_matrices(
            len(graph), graph.weighted_edges(), dtype=self.config.dtype
        )

        self._labels = graph.labels()
        self._costs = costs
        self._predecessors = predecessors
        self._state = EngineState.BUILT
        self._log_matrices("Initial matrices")

    def run(self, should_cancel: Optional[CancelCheck] = None) -> ShortestPathMatrices:
        """Relax the built matrices until convergence.

        Args:
            should_cancel: Optional callable polled before each iteration.

        Returns:
            The converged, read-only matrices.

        Raises:
            EngineNotReadyError: If initialize() was not called first.
            ComputationCancelledError: If the run was cancelled; the
                engine goes back to UNINITIALIZED.
        """
        self._require(EngineState.BUILT, "run relaxation")
        assert self._costs is not None and self._predecessors is not None

        try:
            relax(self._costs, self._predecessors, should_cancel)
        except ComputationCancelledError as e:
            self._logger.warning(
                "Relaxation cancelled",
                extra={"completed_iterations": e.completed_iterations},
            )
            self._reset()
            raise

        self._result = ShortestPathMatrices.freeze(
            self._labels, self._costs, self._predecessors
        )
        self._state = EngineState.CONVERGED
        self._log_matrices("Converged matrices")
        self._logger.info(
            "All-pairs shortest paths computed",
            extra={
                "nodes": len(self._labels),
                "unreachable_pairs": int(np.isinf(self._result.costs).sum()),
            },
        )
        return self._result

    def compute(
        self,
        graph: Graph,
        should_cancel: Optional[CancelCheck] = None,
    ) -> ShortestPathMatrices:
        """Initialize from ``graph`` and run to convergence."""
        self.initialize(graph)
        return self.run(should_cancel)

    def distance(self, source: str, target: str) -> float:
        """Shortest distance between two labels (``inf`` if unreachable).

        Raises:
            EngineNotReadyError: If the engine has not converged.
            UnknownNodeError: If a label is not in the graph.
        """
        return self.result.distance(source, target)

    def path(self, source: str, target: str) -> PathQueryResult:
        """Shortest path between two labels, or NoPath.

        Raises:
            EngineNotReadyError: If the engine has not converged.
            UnknownNodeError: If a label is not in the graph.
        """
        return self.result.path(source, target)

    def _require(self, expected: EngineState, action: str) -> None:
        if self._state is not expected:
            raise EngineNotReadyError(
                f"Cannot {action} in state {self._state.name}; expected {expected.name}",
                state=self._state.name,
            )

    def _reset(self) -> None:
        self._state = EngineState.UNINITIALIZED
        self._labels = ()
        self._costs = None
        self._predecessors = None
        self._result = None

    def _log_matrices(self, title: str) -> None:
        if not self.config.log_matrices or not self._logger.isEnabledFor(logging.DEBUG):
            return
        self._logger.debug(
            "%s\ncosts:\n%s\npredecessors:\n%s",
            title,
            np.array2string(self._costs),
            np.array2string(self._predecessors),
        )
