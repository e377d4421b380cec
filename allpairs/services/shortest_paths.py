"""All-pairs service - Main orchestrator.

This service ties the graph repository, the shortest path engine and
the report renderer together behind a small use-case API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.models import PathQueryResult
from ..graph.floyd_warshall import CancelCheck, ShortestPathMatrices
from ..ports.graph import GraphRepositoryPort, ShortestPathEnginePort
from ..ports.rendering import ReportRendererPort


@dataclass
class AllPairsService:
    """Main service for all-pairs shortest path queries.

    This service orchestrates:
    1. Graph loading
    2. Matrix computation
    3. Path queries
    4. Optional report rendering

    Attributes:
        graph_repository: Loads the graph
        engine: Computes shortest paths
        report_renderer: Renders the diagnostic report
    """

    graph_repository: GraphRepositoryPort
    engine: ShortestPathEnginePort
    report_renderer: ReportRendererPort

    _result: Optional[ShortestPathMatrices] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, should_cancel: Optional[CancelCheck] = None) -> ShortestPathMatrices:
        """Load the graph and compute all shortest paths.

        Raises:
            GraphError: If the graph cannot be loaded or is malformed.
            ComputationCancelledError: If ``should_cancel`` fired.
        """
        graph = self.graph_repository.load()
        self._logger.debug(
            "Graph ready",
            extra={"nodes": len(graph), "edges": len(graph.edges())},
        )

        self._result = self.engine.compute(graph, should_cancel)
        return self._result

    @property
    def result(self) -> ShortestPathMatrices:
        """The last computed result, solving first if needed."""
        if self._result is None:
            return self.solve()
        return self._result

    def query(self, source: str, target: str) -> PathQueryResult:
        """Shortest path between two node labels, or NoPath."""
        query = self.result.path(source, target)
        self._logger.info(
            "Path query",
            extra={
                "source": source,
                "target": target,
                "found": bool(query),
                "distance": query.distance,
            },
        )
        return query

    def report(self, output_path: Optional[Path] = None) -> str:
        """Render the diagnostic report, optionally saving it to file.

        Raises:
            RenderingError: If the report cannot be written.
        """
        result = self.result
        if output_path is not None:
            self.report_renderer.write(result, output_path)
        return self.report_renderer.render(result)
