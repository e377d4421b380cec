"""Top-level package for the allpairs project.

This package computes, for a weighted directed graph, the shortest
distance and an explicit shortest path between every ordered pair of
nodes using the Floyd-Warshall algorithm.

Typical use::

    from allpairs.graph.parser import parse_edge_list
    from allpairs.adapters.graph import FloydWarshallEngine

    graph = parse_edge_list("1 -5> 2; 2 -3> 3; 1 -10> 3;")
    result = FloydWarshallEngine().compute(graph)
    result.path("1", "3")
"""

__version__ = "0.1.0"
