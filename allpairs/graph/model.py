"""In-memory weighted directed graph.

This module defines the Graph used throughout the project. Nodes are
identified by label and get a dense 0-based index in insertion order,
so the shortest path engine never has to interpret labels as numbers.
"""

from __future__ import annotations

import math
from typing import Dict, Iterator, List, Optional, Tuple, Union, ValuesView

from ..domain.errors import DuplicateNodeError, InvalidWeightError, UnknownNodeError
from ..domain.models import Edge, Node, node_alpha_key

NodeRef = Union[str, Node]


def parse_weight(label: Optional[str], graph_name: Optional[str] = None) -> float:
    """Parse an edge label into a finite weight.

    Parameters
    ----------
    label:
        Textual edge label, e.g. ``"5"`` or ``"-2.5"``.
    graph_name:
        Name of the graph the edge belongs to, for error reporting.

    Returns
    -------
    float
        The parsed weight.
    """
    if label is None or not label.strip():
        raise InvalidWeightError(
            "Edge has no weight label", graph_name=graph_name, label=label
        )
    try:
        weight = float(label.strip())
    except ValueError as e:
        raise InvalidWeightError(
            f"Edge label is not a number: {label!r}",
            graph_name=graph_name,
            label=label,
            cause=e,
        )
    if not math.isfinite(weight):
        raise InvalidWeightError(
            f"Edge weight must be finite: {label!r}",
            graph_name=graph_name,
            label=label,
        )
    return weight


def _label_of(node: NodeRef) -> str:
    return node.label if isinstance(node, Node) else node


class Graph:
    """A set of labeled nodes and directed, weighted edges.

    At most one edge is kept per ordered pair of nodes; adding another
    edge between the same pair replaces the previous one. The graph is
    not thread-safe and must not be mutated while an engine reads it.
    """

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self._nodes: Dict[str, Node] = {}
        self._index: Dict[str, int] = {}
        self._edges: Dict[Tuple[str, str], Edge] = {}

    def add_node(self, node: NodeRef, *, exist_ok: bool = False) -> Node:
        """Insert a node.

        Args:
            node: A label or a Node.
            exist_ok: Return the existing node instead of failing
                when the label is already present.

        Returns:
            The node stored in the graph.

        Raises:
            DuplicateNodeError: If the label exists and exist_ok is False.
        """
        label = _label_of(node)
        existing = self._nodes.get(label)
        if existing is not None:
            if exist_ok:
                return existing
            raise DuplicateNodeError(
                f"Node already in graph: {label}",
                graph_name=self.name,
                node_label=label,
            )

        stored = node if isinstance(node, Node) else Node(label)
        self._index[label] = len(self._nodes)
        self._nodes[label] = stored
        return stored

    def add_edge(self, source: NodeRef, target: NodeRef, label: Optional[str]) -> Edge:
        """Insert a directed edge whose weight is parsed from its label.

        Raises:
            UnknownNodeError: If either endpoint is not in the graph.
            InvalidWeightError: If the label is not a finite number.
        """
        source_node = self.node(_label_of(source))
        target_node = self.node(_label_of(target))
        weight = parse_weight(label, graph_name=self.name)

        edge = Edge(
            source=source_node,
            target=target_node,
            label=str(label).strip(),
            weight=weight,
        )
        self._edges[(source_node.label, target_node.label)] = edge
        return edge

    def node(self, label: str) -> Node:
        """Get a node by label, raising UnknownNodeError if absent."""
        try:
            return self._nodes[label]
        except KeyError:
            raise UnknownNodeError(
                f"Node not in graph: {label}",
                graph_name=self.name,
                node_label=label,
            ) from None

    def nodes(self) -> ValuesView[Node]:
        """Nodes in insertion order."""
        return self._nodes.values()

    def edges(self) -> ValuesView[Edge]:
        """Edges in insertion order."""
        return self._edges.values()

    def sorted_nodes(self) -> List[Node]:
        """Nodes ordered by label."""
        return sorted(self._nodes.values(), key=node_alpha_key)

    def labels(self) -> Tuple[str, ...]:
        """Node labels in index order."""
        return tuple(self._nodes)

    def index_of(self, node: NodeRef) -> int:
        label = _label_of(node)
        if label not in self._index:
            raise UnknownNodeError(
                f"Node not in graph: {label}",
                graph_name=self.name,
                node_label=label,
            )
        return self._index[label]

    def label_at(self, index: int) -> str:
        if not 0 <= index < len(self._nodes):
            raise UnknownNodeError(
                f"Node index out of range: {index}",
                graph_name=self.name,
                node_label=str(index),
            )
        return self.labels()[index]

    def out_edges(self, node: NodeRef) -> List[Edge]:
        label = self.node(_label_of(node)).label
        return [e for e in self._edges.values() if e.source.label == label]

    def in_edges(self, node: NodeRef) -> List[Edge]:
        label = self.node(_label_of(node)).label
        return [e for e in self._edges.values() if e.target.label == label]

    def successors(self, node: NodeRef) -> List[Node]:
        return [e.target for e in self.out_edges(node)]

    def predecessors(self, node: NodeRef) -> List[Node]:
        return [e.source for e in self.in_edges(node)]

    def edge_between(self, source: NodeRef, target: NodeRef) -> Optional[Edge]:
        """Return the edge source -> target, or None if there is none."""
        return self._edges.get((_label_of(source), _label_of(target)))

    def weighted_edges(self) -> Iterator[Tuple[int, int, float]]:
        """Yield ``(source_index, target_index, weight)`` triples."""
        for edge in self._edges.values():
            yield self._index[edge.source.label], self._index[edge.target.label], edge.weight

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        if isinstance(node, (str, Node)):
            return _label_of(node) in self._nodes
        return False

    def __str__(self) -> str:
        header = f"Graph {self.name}" if self.name else "Graph"
        lines = [f"{header} [{len(self._nodes)} nodes, {len(self._edges)} edges]"]
        lines.extend(str(edge) for edge in self._edges.values())
        return "\n".join(lines)
