"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- EdgeListGraphRepository: Loads a graph from an edge-list file
- FloydWarshallEngine: All-pairs shortest paths with path reconstruction
"""

from .edge_list_repository import EdgeListGraphRepository
from .floyd_warshall_engine import FloydWarshallEngine

__all__ = ["EdgeListGraphRepository", "FloydWarshallEngine"]
