"""Graph representation and the shortest path algorithm.

This subpackage contains the in-memory graph, the edge-list parser
that builds it from text, and the Floyd-Warshall matrix routines that
run on top of it.
"""
