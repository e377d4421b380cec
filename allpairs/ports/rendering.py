"""Rendering port - Abstraction for diagnostic reports.

This protocol defines the contract for turning converged matrices into
human-readable text.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.floyd_warshall import ShortestPathMatrices


class ReportRendererPort(Protocol):
    """Port for report rendering.

    Implementation: adapters/rendering/text_report.py
    """

    def render(self, result: ShortestPathMatrices) -> str:
        """Render the full report for a converged result."""
        ...

    def write(self, result: ShortestPathMatrices, output_path: Path) -> Path:
        """Render the report and save it to file.

        Returns:
            Path to the written report.
        """
        ...
