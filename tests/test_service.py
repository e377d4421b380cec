"""Tests for the all-pairs service."""

from dataclasses import dataclass, field

import pytest

from allpairs.adapters.graph import FloydWarshallEngine
from allpairs.adapters.rendering import TextReportRenderer
from allpairs.config import EngineConfig, ReportConfig
from allpairs.domain.errors import ComputationCancelledError, InvalidWeightError
from allpairs.domain.models import NoPath
from allpairs.graph.model import Graph
from allpairs.graph.parser import parse_edge_list
from allpairs.services import AllPairsService


@dataclass
class StaticGraphRepository:
    """Repository returning a graph built in memory."""

    text: str
    loads: int = field(default=0)

    def load(self) -> Graph:
        self.loads += 1
        return parse_edge_list(self.text)

    def clear_cache(self) -> None:
        pass


def make_service(text: str = "1 -5> 2; 2 -3> 3; 1 -10> 3;") -> AllPairsService:
    return AllPairsService(
        graph_repository=StaticGraphRepository(text),
        engine=FloydWarshallEngine(EngineConfig()),
        report_renderer=TextReportRenderer(ReportConfig(include_matrices=False)),
    )


def test_query_solves_lazily_once():
    service = make_service()

    assert service.query("1", "3").nodes == ("1", "2", "3")
    assert service.query("3", "1") == NoPath("3", "1")
    assert service.graph_repository.loads == 1


def test_solve_recomputes():
    service = make_service()

    first = service.solve()
    second = service.solve()

    assert second is not first
    assert service.result is second
    assert service.graph_repository.loads == 2


def test_report_renders_and_writes(tmp_path):
    service = make_service()
    output = tmp_path / "report.txt"

    text = service.report(output)

    assert text.splitlines()[0] == "The path from 1 to 2 is 1 2"
    assert output.read_text(encoding="utf-8") == text


def test_invalid_graph_surfaces_at_solve():
    service = make_service("CFP -contains> 05012011;")

    with pytest.raises(InvalidWeightError):
        service.solve()


def test_cancellation_is_propagated():
    service = make_service()

    with pytest.raises(ComputationCancelledError):
        service.solve(should_cancel=lambda: True)
