"""Services layer - Application orchestration.

Available services:
- AllPairsService: Load a graph, compute all shortest paths, answer
  queries and render reports
"""

from .shortest_paths import AllPairsService

__all__ = ["AllPairsService"]
