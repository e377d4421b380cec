"""Edge-list graph repository adapter.

This adapter wraps the edge-list parser and adds:
- Configuration injection (path, default weight from config)
- Caching support
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ...config import GraphConfig, get_config
from ...graph.model import Graph
from ...graph.parser import read_graph


@dataclass
class EdgeListGraphRepository:
    """Graph repository that loads an edge-list file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (directory, file name, default weight)
        path: Explicit file to load; overrides the configured path
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def graph_path(self) -> Path:
        return self.path if self.path is not None else self.config.graph_path

    def load(self) -> Graph:
        """Load the graph from its edge-list file.

        Returns:
            The parsed graph, cached for later calls.

        Raises:
            GraphError: If the file cannot be read or parsed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug("Loading graph", extra={"graph_path": str(self.graph_path)})

        graph = read_graph(
            self.graph_path,
            unlabeled_weight=self.config.unlabeled_weight,
        )
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "edges": len(graph.edges())},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
