"""Plain-text report renderer adapter.

Produces the classic console report of the Floyd-Warshall tool:
the distance matrix, the predecessor matrix and one line per ordered
pair of nodes, e.g.::

    The path from 1 to 3 is 1 2 3
    There is no path between 3 and 1.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ...config import ReportConfig, get_config
from ...domain.errors import PathReconstructionError, RenderingError
from ...domain.models import NoPath, PathQueryResult
from ...graph.floyd_warshall import NO_PREDECESSOR, ShortestPathMatrices


def format_path_line(query: PathQueryResult) -> str:
    """One report line for a path query."""
    if isinstance(query, NoPath):
        return f"There is no path between {query.source} and {query.target}."
    return f"The path from {query.source} to {query.target} is {' '.join(query.nodes)}"


@dataclass
class TextReportRenderer:
    """Plain-text renderer for converged matrices.

    This adapter implements ReportRendererPort.

    Attributes:
        config: Report configuration (tokens, sections)
    """

    config: ReportConfig = field(default_factory=lambda: get_config().report)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def format_cost(self, value: float) -> str:
        if value == float("inf"):
            return self.config.infinity_token
        return repr(float(value))

    def render_costs(self, result: ShortestPathMatrices) -> str:
        return "\n".join(
            " ".join(self.format_cost(value) for value in row) for row in result.costs
        )

    def render_predecessors(self, result: ShortestPathMatrices) -> str:
        rows: List[str] = []
        for row in result.predecessors:
            if self.config.predecessor_style == "label":
                cells = [
                    "-" if index == NO_PREDECESSOR else result.labels[index]
                    for index in row
                ]
            else:
                # 1-based positions, 0 for none
                cells = [str(int(index) + 1) for index in row]
            rows.append(" ".join(cells))
        return "\n".join(rows)

    def render_path_line(self, result: ShortestPathMatrices, source: str, target: str) -> str:
        try:
            return format_path_line(result.path(source, target))
        except PathReconstructionError as e:
            self._logger.warning(
                "Path reconstruction failed",
                extra={"source": source, "target": target, "error": e.message},
            )
            return f"The path from {source} to {target} is undefined."

    def render_paths(self, result: ShortestPathMatrices) -> str:
        lines = [
            self.render_path_line(result, source, target)
            for source, target in result.pairs()
            if source != target or self.config.include_diagonal
        ]
        return "\n".join(lines)

    def render(self, result: ShortestPathMatrices) -> str:
        """Render the full report.

        Sections are separated by a blank line.
        """
        sections: List[str] = []
        if self.config.include_matrices:
            sections.append(self.render_costs(result))
            sections.append(self.render_predecessors(result))
        sections.append(self.render_paths(result))
        return "\n\n".join(section for section in sections if section) + "\n"

    def write(self, result: ShortestPathMatrices, output_path: Path) -> Path:
        """Render the report and save it to file.

        Args:
            result: The converged matrices.
            output_path: Where to save the report.

        Returns:
            Path to the written report.

        Raises:
            RenderingError: If the file cannot be written.
        """
        output_path = Path(output_path)
        self._logger.info(
            "Writing report",
            extra={"nodes": result.size, "output_path": str(output_path)},
        )
        try:
            output_path.write_text(self.render(result), encoding="utf-8")
        except OSError as e:
            raise RenderingError(
                f"Failed to write report to {output_path}",
                output_path=str(output_path),
                cause=e,
            )
        return output_path
