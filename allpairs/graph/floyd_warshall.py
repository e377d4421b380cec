"""All-pairs shortest paths with the Floyd-Warshall algorithm.

Matrices are dense numpy arrays indexed by the 0-based node indices the
Graph assigns. Unreachable pairs hold ``numpy.inf`` and missing
predecessors hold ``NO_PREDECESSOR``.

The graph must not contain a negative-weight cycle. This is not
checked: distances of pairs touched by such a cycle are meaningless.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..domain.errors import (
    ComputationCancelledError,
    InvalidWeightError,
    PathReconstructionError,
    UnknownNodeError,
)
from ..domain.models import NoPath, PathQueryResult, ShortestPath

NO_PREDECESSOR = -1

CancelCheck = Callable[[], bool]


def build_matrices(
    size: int,
    edges: Iterable[Tuple[int, int, float]],
    dtype: str = "float64",
) -> Tuple[np.ndarray, np.ndarray]:
    """Build the initial cost and predecessor matrices.

    Parameters
    ----------
    size:
        Number of nodes N.
    edges:
        ``(source_index, target_index, weight)`` triples. Later triples
        overwrite earlier ones on the same pair; self-loops are ignored.
    dtype:
        Floating point type of the cost matrix.

    Returns
    -------
    numpy.ndarray, numpy.ndarray
        ``cost`` with direct weights, ``inf`` elsewhere and ``0`` on the
        diagonal, and ``pred`` holding the source index of every direct
        edge and ``NO_PREDECESSOR`` elsewhere.
    """
    if size < 0:
        raise ValueError(f"Matrix size must be non-negative, got {size}")

    cost = np.full((size, size), np.inf, dtype=dtype)
    np.fill_diagonal(cost, 0.0)
    pred = np.full((size, size), NO_PREDECESSOR, dtype=np.intp)

    for u, v, w in edges:
        for index in (u, v):
            if not 0 <= index < size:
                raise UnknownNodeError(
                    f"Edge endpoint index {index} out of range for {size} nodes",
                    node_label=str(index),
                )
        if not math.isfinite(w):
            raise InvalidWeightError(
                f"Edge {u}->{v} has a non-finite weight: {w}", label=str(w)
            )
        if u == v:
            continue
        cost[u, v] = w
        pred[u, v] = u

    return cost, pred


def relax(
    cost: np.ndarray,
    pred: np.ndarray,
    should_cancel: Optional[CancelCheck] = None,
) -> None:
    """Run the relaxation pass in place.

    For every intermediate node k (outermost), every pair (i, j) with
    i, j and k pairwise distinct is improved when going through k is
    strictly cheaper. Row k and column k are never written while k is
    the intermediate, so the (i, j) sweep for one k is done as a single
    array operation.

    Raises:
        ComputationCancelledError: If ``should_cancel`` returns True at
            the start of an iteration.
    """
    size = cost.shape[0]
    off_diagonal = ~np.eye(size, dtype=bool)

    for k in range(size):
        if should_cancel is not None and should_cancel():
            raise ComputationCancelledError(
                f"Relaxation cancelled after {k} of {size} iterations",
                completed_iterations=k,
            )

        through_k = cost[:, k, np.newaxis] + cost[np.newaxis, k, :]
        improved = (through_k < cost) & off_diagonal
        improved[k, :] = False
        improved[:, k] = False

        rows, cols = np.nonzero(improved)
        cost[rows, cols] = through_k[rows, cols]
        pred[rows, cols] = pred[k, cols]


def reconstruct_path(pred: np.ndarray, source: int, target: int) -> Optional[List[int]]:
    """Rebuild the index path from ``source`` to ``target``.

    Returns None when no path exists. The walk goes backwards through
    ``pred[source, ...]`` and is bounded by the number of nodes.
    """
    if source == target:
        return [source]
    if pred[source, target] == NO_PREDECESSOR:
        return None

    path = [target]
    current = target
    for _ in range(pred.shape[0]):
        current = int(pred[source, current])
        if current == NO_PREDECESSOR:
            break
        path.append(current)
        if current == source:
            path.reverse()
            return path

    raise PathReconstructionError(
        f"Predecessors from {target} do not lead back to {source}; "
        "the graph probably has a negative-weight cycle",
        source=str(source),
        target=str(target),
    )


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class ShortestPathMatrices:
    """Converged matrices of one run, addressed by node label.

    The arrays are read-only; a new run always produces new arrays.

    Attributes:
        labels: Node labels in index order
        costs: Shortest distances, ``inf`` when unreachable
        predecessors: Last hop before j on the best i -> j path
    """

    labels: Tuple[str, ...]
    costs: np.ndarray
    predecessors: np.ndarray

    @classmethod
    def freeze(
        cls, labels: Tuple[str, ...], costs: np.ndarray, predecessors: np.ndarray
    ) -> ShortestPathMatrices:
        return cls(labels=labels, costs=_read_only(costs), predecessors=_read_only(predecessors))

    @property
    def size(self) -> int:
        return len(self.labels)

    @cached_property
    def _index(self) -> Dict[str, int]:
        return {label: index for index, label in enumerate(self.labels)}

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise UnknownNodeError(f"Node not in graph: {label}", node_label=label) from None

    def distance(self, source: str, target: str) -> float:
        """Shortest distance from ``source`` to ``target`` (``inf`` if unreachable)."""
        return float(self.costs[self.index_of(source), self.index_of(target)])

    def path(self, source: str, target: str) -> PathQueryResult:
        """Shortest path from ``source`` to ``target``, or NoPath."""
        i, j = self.index_of(source), self.index_of(target)
        try:
            indices = reconstruct_path(self.predecessors, i, j)
        except PathReconstructionError as e:
            raise PathReconstructionError(e.message, source=source, target=target) from e
        if indices is None:
            return NoPath(source=source, target=target)
        return ShortestPath(
            source=source,
            target=target,
            nodes=tuple(self.labels[index] for index in indices),
            distance=float(self.costs[i, j]),
        )

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Every ordered pair of labels, row by row."""
        for source in self.labels:
            for target in self.labels:
                yield source, target
