"""Immutable domain models for the all-pairs shortest path toolkit.

All models are frozen dataclasses with slots for memory efficiency.
These models have no external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class EngineState(Enum):
    """Lifecycle of a shortest path engine.

    Queries are only answered in CONVERGED.
    """

    UNINITIALIZED = auto()
    BUILT = auto()
    CONVERGED = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """A graph node identified by its label."""

    label: str

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label:
            raise ValueError(f"Node label must be a non-empty string, got {self.label!r}")

    def __str__(self) -> str:
        return self.label


def node_alpha_key(node: Node) -> str:
    """Sort key ordering nodes lexicographically by label."""
    return node.label


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, labeled edge.

    Attributes:
        source: Node the edge leaves
        target: Node the edge enters
        label: Textual label the weight was parsed from
        weight: Numeric weight of the edge
    """

    source: Node
    target: Node
    label: str
    weight: float

    @property
    def is_self_loop(self) -> bool:
        """Check if the edge starts and ends on the same node."""
        return self.source == self.target

    def __str__(self) -> str:
        return f"{self.source}-{self.label}->{self.target}"


@dataclass(frozen=True, slots=True)
class ShortestPath:
    """A reconstructed shortest path.

    Attributes:
        source: Source node label
        target: Target node label
        nodes: Labels from source to target, both inclusive
        distance: Total weight of the path
    """

    source: str
    target: str
    nodes: tuple[str, ...]
    distance: float

    @property
    def num_hops(self) -> int:
        """Return the number of edges on the path."""
        return len(self.nodes) - 1


@dataclass(frozen=True, slots=True)
class NoPath:
    """The target cannot be reached from the source."""

    source: str
    target: str

    @property
    def nodes(self) -> tuple[str, ...]:
        return ()

    @property
    def distance(self) -> float:
        return math.inf

    def __bool__(self) -> bool:
        return False


PathQueryResult = Union[ShortestPath, NoPath]
