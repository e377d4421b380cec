"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    AllPairsError,
    ComputationCancelledError,
    ConfigurationError,
    DuplicateNodeError,
    EngineNotReadyError,
    GraphError,
    GraphParseError,
    InvalidWeightError,
    PathReconstructionError,
    RenderingError,
    UnknownNodeError,
)
from .models import (
    Edge,
    EngineState,
    Node,
    NoPath,
    PathQueryResult,
    ShortestPath,
    node_alpha_key,
)

__all__ = [
    # Models
    "Node",
    "Edge",
    "EngineState",
    "ShortestPath",
    "NoPath",
    "PathQueryResult",
    "node_alpha_key",
    # Errors
    "AllPairsError",
    "GraphError",
    "InvalidWeightError",
    "UnknownNodeError",
    "DuplicateNodeError",
    "GraphParseError",
    "EngineNotReadyError",
    "ComputationCancelledError",
    "PathReconstructionError",
    "ConfigurationError",
    "RenderingError",
]
