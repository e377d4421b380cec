import pytest

from allpairs.domain.errors import GraphError, GraphParseError, InvalidWeightError
from allpairs.graph.parser import parse_edge_list, read_graph


def test_parse_creates_nodes_in_order_of_appearance():
    graph = parse_edge_list("1 -5> 2; 2 -3> 3; 1 -10> 3;")

    assert graph.labels() == ("1", "2", "3")
    assert [str(e) for e in graph.edges()] == ["1-5->2", "2-3->3", "1-10->3"]


def test_parse_handles_whitespace_comments_and_negative_weights():
    text = """
    # a small graph
    a -2.5> b;   # first edge
    b--1>c;
    c - 4 > a;
    """
    graph = parse_edge_list(text, name="small")

    assert graph.name == "small"
    assert graph.labels() == ("a", "b", "c")
    assert graph.edge_between("a", "b").weight == 2.5
    assert graph.edge_between("b", "c").weight == -1.0
    assert graph.edge_between("c", "a").weight == 4.0


def test_parse_empty_text_gives_empty_graph():
    graph = parse_edge_list("  # nothing here\n")

    assert len(graph) == 0
    assert len(graph.edges()) == 0


def test_unlabeled_edge_without_default_is_rejected():
    with pytest.raises(InvalidWeightError):
        parse_edge_list("AIConf -> conftime;")


def test_unlabeled_edge_takes_configured_weight():
    graph = parse_edge_list("AIConf -> conftime;", unlabeled_weight=1)

    assert graph.edge_between("AIConf", "conftime").weight == 1.0


def test_semantic_label_is_rejected():
    with pytest.raises(InvalidWeightError) as excinfo:
        parse_edge_list("CFP -contains> 05012011;")

    assert excinfo.value.label == "contains"


def test_malformed_statement_reports_line():
    with pytest.raises(GraphParseError) as excinfo:
        parse_edge_list("1 -5> 2;\n\n2 3;")

    assert excinfo.value.line == 3
    assert excinfo.value.statement == "2 3"


def test_missing_terminator_is_an_error():
    with pytest.raises(GraphParseError) as excinfo:
        parse_edge_list("1 -5> 2;\n2 -3> 3")

    assert excinfo.value.line == 2
    assert excinfo.value.statement == "2 -3> 3"


def test_read_graph_names_graph_after_file(tmp_path):
    path = tmp_path / "roads.graph"
    path.write_text("x -1> y;\n", encoding="utf-8")

    graph = read_graph(path)

    assert graph.name == "roads"
    assert graph.labels() == ("x", "y")


def test_read_graph_missing_file_raises_graph_error(tmp_path):
    with pytest.raises(GraphError) as excinfo:
        read_graph(tmp_path / "missing.graph")

    assert isinstance(excinfo.value.cause, OSError)
