"""Ports layer - Abstract interfaces (Protocols) for the package.

Ports define the contracts between the core and its adapters. They
enable dependency injection and make the services testable.
"""

from .graph import GraphRepositoryPort, ShortestPathEnginePort
from .rendering import ReportRendererPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "ShortestPathEnginePort",
    # Rendering
    "ReportRendererPort",
]
