"""Graph loading from the textual edge-list language.

A graph description is a sequence of statements, each terminated by
``;``::

    # comments run to the end of the line
    1 -5> 2;
    2 -3> 3;
    1 -10> 3;
    3 --2> 1;    # negative weight
    4 -> 1;      # unlabeled edge

Nodes are created the first time they are mentioned.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from ..domain.errors import GraphError, GraphParseError
from .model import Graph

_COMMENT = re.compile(r"#[^\n]*")
_STATEMENT = re.compile(
    r"^(?P<source>[^\s;>-]+)\s*-(?P<label>[^>]*)>\s*(?P<target>[^\s;>-]+)$"
)


def _blank_comments(text: str) -> str:
    # Keeps offsets intact so line numbers stay right.
    return _COMMENT.sub(lambda m: " " * len(m.group()), text)


def _statements(text: str) -> Iterator[Tuple[str, int]]:
    """Yield ``(statement, line)`` for every non-empty statement."""
    offset = 0
    for chunk in text.split(";"):
        stripped = chunk.strip()
        if stripped:
            start = offset + chunk.index(stripped[0])
            yield stripped, text.count("\n", 0, start) + 1
        offset += len(chunk) + 1


def parse_edge_list(
    text: str,
    name: Optional[str] = None,
    unlabeled_weight: Optional[float] = None,
) -> Graph:
    """Build a graph from an edge-list description.

    Parameters
    ----------
    text:
        The description, statements separated by ``;``.
    name:
        Optional name given to the resulting graph.
    unlabeled_weight:
        Weight for edges written ``a -> b``. When None, such edges are
        rejected with ``InvalidWeightError``.

    Returns
    -------
    Graph
        The graph, with nodes indexed in order of first appearance.
    """
    graph = Graph(name=name)
    source_text = _blank_comments(text)

    trailing = source_text[source_text.rfind(";") + 1:].strip()
    if trailing:
        line = source_text.count("\n", 0, source_text.rfind(trailing)) + 1
        raise GraphParseError(
            f"Missing ';' after statement on line {line}: {trailing!r}",
            graph_name=name,
            statement=trailing,
            line=line,
        )

    for statement, line in _statements(source_text):
        match = _STATEMENT.match(statement)
        if match is None:
            raise GraphParseError(
                f"Malformed statement on line {line}: {statement!r}",
                graph_name=name,
                statement=statement,
                line=line,
            )

        label: Optional[str] = match.group("label").strip() or None
        if label is None and unlabeled_weight is not None:
            label = repr(float(unlabeled_weight))

        graph.add_node(match.group("source"), exist_ok=True)
        graph.add_node(match.group("target"), exist_ok=True)
        graph.add_edge(match.group("source"), match.group("target"), label)

    return graph


def read_graph(
    path: Union[str, Path],
    name: Optional[str] = None,
    unlabeled_weight: Optional[float] = None,
) -> Graph:
    """Read an edge-list file into a graph.

    The graph is named after the file stem unless ``name`` is given.
    I/O failures are reported as ``GraphError``.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphError(
            f"Failed to read graph file {path}",
            graph_name=name or path.stem,
            cause=e,
        )
    return parse_edge_list(text, name=name or path.stem, unlabeled_weight=unlabeled_weight)
