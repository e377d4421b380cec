import itertools
import math

import numpy as np
import pytest

from allpairs.domain.errors import (
    ComputationCancelledError,
    InvalidWeightError,
    PathReconstructionError,
    UnknownNodeError,
)
from allpairs.domain.models import NoPath, ShortestPath
from allpairs.graph.floyd_warshall import (
    NO_PREDECESSOR,
    ShortestPathMatrices,
    build_matrices,
    reconstruct_path,
    relax,
)
from allpairs.graph.parser import parse_edge_list

SAMPLE = """
1 -5> 2;
2 -3> 3;
1 -10> 3;
3 -2> 4;
4 --1> 2;
5 -7> 1;
"""


def solve(text: str) -> ShortestPathMatrices:
    graph = parse_edge_list(text)
    cost, pred = build_matrices(len(graph), graph.weighted_edges())
    relax(cost, pred)
    return ShortestPathMatrices.freeze(graph.labels(), cost, pred)


def test_build_matrices_initial_state():
    cost, pred = build_matrices(3, [(0, 1, 5.0), (1, 2, 3.0), (0, 2, 10.0)])

    assert cost.tolist() == [
        [0.0, 5.0, 10.0],
        [math.inf, 0.0, 3.0],
        [math.inf, math.inf, 0.0],
    ]
    assert pred.tolist() == [
        [NO_PREDECESSOR, 0, 0],
        [NO_PREDECESSOR, NO_PREDECESSOR, 1],
        [NO_PREDECESSOR, NO_PREDECESSOR, NO_PREDECESSOR],
    ]


def test_build_matrices_keeps_zero_weight_edges_and_ignores_self_loops():
    cost, pred = build_matrices(2, [(0, 1, 0.0), (1, 1, 4.0)])

    assert cost[0, 1] == 0.0
    assert pred[0, 1] == 0
    assert cost[1, 1] == 0.0
    assert pred[1, 1] == NO_PREDECESSOR


def test_build_matrices_last_write_wins():
    cost, _ = build_matrices(2, [(0, 1, 5.0), (0, 1, 2.0)])

    assert cost[0, 1] == 2.0


def test_build_matrices_rejects_out_of_range_index():
    with pytest.raises(UnknownNodeError):
        build_matrices(2, [(0, 2, 1.0)])


def test_build_matrices_rejects_non_finite_weight():
    with pytest.raises(InvalidWeightError):
        build_matrices(2, [(0, 1, math.nan)])


def test_build_matrices_float32():
    cost, _ = build_matrices(2, [(0, 1, 1.5)], dtype="float32")

    assert cost.dtype == np.float32


def test_scenario_shorter_path_through_intermediate():
    result = solve("1 -5> 2; 2 -3> 3; 1 -10> 3;")

    assert result.distance("1", "3") == 8.0
    assert result.path("1", "3") == ShortestPath("1", "3", ("1", "2", "3"), 8.0)


def test_scenario_no_edges_means_no_path():
    graph = parse_edge_list("")
    graph.add_node("1")
    graph.add_node("2")
    cost, pred = build_matrices(len(graph), graph.weighted_edges())
    relax(cost, pred)
    result = ShortestPathMatrices.freeze(graph.labels(), cost, pred)

    assert math.isinf(result.distance("1", "2"))
    assert result.path("1", "2") == NoPath("1", "2")
    assert not result.path("1", "2")


def test_scenario_single_node_trivial_path():
    graph = parse_edge_list("")
    graph.add_node("1")
    cost, pred = build_matrices(1, [])
    relax(cost, pred)
    result = ShortestPathMatrices.freeze(graph.labels(), cost, pred)

    assert result.distance("1", "1") == 0.0
    path = result.path("1", "1")
    assert path.nodes == ("1",)
    assert path.num_hops == 0


def test_negative_edge_without_negative_cycle():
    result = solve(SAMPLE)

    assert result.distance("3", "2") == 1.0
    assert result.path("3", "2").nodes == ("3", "4", "2")
    assert result.distance("4", "3") == 2.0
    assert result.path("5", "4").nodes == ("5", "1", "2", "3", "4")
    assert result.distance("5", "4") == 17.0


def test_unreachable_pairs_stay_infinite():
    result = solve(SAMPLE)

    for target in ("1", "2", "3", "4"):
        assert math.isinf(result.distance(target, "5"))
        assert isinstance(result.path(target, "5"), NoPath)


def test_diagonal_is_zero():
    result = solve(SAMPLE)

    assert all(result.distance(label, label) == 0.0 for label in result.labels)


def test_distance_never_exceeds_direct_edge():
    graph = parse_edge_list(SAMPLE)
    result = solve(SAMPLE)

    for edge in graph.edges():
        assert result.distance(edge.source.label, edge.target.label) <= edge.weight


def test_triangle_inequality():
    result = solve(SAMPLE)

    for i, k, j in itertools.product(result.labels, repeat=3):
        assert result.distance(i, j) <= result.distance(i, k) + result.distance(k, j)


def test_paths_follow_edges_and_sum_to_distance():
    graph = parse_edge_list(SAMPLE)
    result = solve(SAMPLE)

    for source, target in result.pairs():
        path = result.path(source, target)
        if not path:
            continue
        assert path.nodes[0] == source
        assert path.nodes[-1] == target
        total = 0.0
        for a, b in zip(path.nodes, path.nodes[1:]):
            edge = graph.edge_between(a, b)
            assert edge is not None
            total += edge.weight
        assert total == result.distance(source, target)


def test_relax_is_idempotent_on_same_snapshot():
    first = solve(SAMPLE)
    second = solve(SAMPLE)

    assert np.array_equal(first.costs, second.costs)
    assert np.array_equal(first.predecessors, second.predecessors)


def test_relax_cancellation_reports_progress():
    cost, pred = build_matrices(3, [(0, 1, 1.0), (1, 2, 1.0)])
    calls = []

    def should_cancel() -> bool:
        calls.append(None)
        return len(calls) > 2

    with pytest.raises(ComputationCancelledError) as excinfo:
        relax(cost, pred, should_cancel)

    assert excinfo.value.completed_iterations == 2


def test_reconstruct_path_returns_none_without_predecessor():
    _, pred = build_matrices(2, [])

    assert reconstruct_path(pred, 0, 1) is None
    assert reconstruct_path(pred, 1, 1) == [1]


def test_reconstruct_path_detects_predecessor_loop():
    pred = np.array(
        [
            [NO_PREDECESSOR, 2, 1],
            [NO_PREDECESSOR, NO_PREDECESSOR, NO_PREDECESSOR],
            [NO_PREDECESSOR, NO_PREDECESSOR, NO_PREDECESSOR],
        ]
    )

    with pytest.raises(PathReconstructionError):
        reconstruct_path(pred, 0, 1)


def test_negative_cycle_path_raises_instead_of_looping():
    # b -> c -> b weighs -1; row a ends up with b and c preceding each other
    result = solve("a -1> b; b -1> c; c --2> b;")

    assert result.predecessors.tolist()[0] == [NO_PREDECESSOR, 2, 1]
    with pytest.raises(PathReconstructionError) as excinfo:
        result.path("a", "b")
    assert (excinfo.value.source, excinfo.value.target) == ("a", "b")
    with pytest.raises(PathReconstructionError):
        result.path("a", "c")
    assert result.path("b", "c").nodes == ("b", "c")
    assert result.path("c", "b").nodes == ("c", "b")


def test_result_matrices_are_read_only():
    result = solve(SAMPLE)

    with pytest.raises(ValueError):
        result.costs[0, 1] = 0.0
    with pytest.raises(ValueError):
        result.predecessors[0, 1] = 0


def test_unknown_label_query_raises():
    result = solve(SAMPLE)

    with pytest.raises(UnknownNodeError):
        result.distance("1", "42")
