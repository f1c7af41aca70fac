"""Tests for PathTableService."""

from unittest.mock import MagicMock

import pytest

from pathtable.adapters.rendering import PlainTextTableRenderer
from pathtable.config import EngineConfig
from pathtable.domain.errors import NoPathFoundError, VertexOutOfRangeError
from pathtable.services import PathTableService


class FakeRepository:
    def __init__(self, graphs):
        self.graphs = graphs

    def load(self):
        return self.graphs[0]

    def load_all(self):
        return list(self.graphs)


@pytest.fixture
def service(triangle, campus):
    return PathTableService(
        graph_repository=FakeRepository([triangle, campus]),
        renderer=PlainTextTableRenderer(),
        engine_config=EngineConfig(),
    )


def test_load_graphs_returns_everything(service):
    assert [g.vertex_count for g in service.load_graphs()] == [3, 5]


@pytest.mark.parametrize("selection", ["scan", "heap"])
def test_build_engine_uses_configured_selection(triangle, selection):
    service = PathTableService(
        graph_repository=FakeRepository([triangle]),
        renderer=PlainTextTableRenderer(),
        engine_config=EngineConfig(selection=selection),
    )

    engine = service.build_engine(triangle)

    assert engine.selection == selection
    assert engine.is_computed
    assert engine.distance(1, 3) == 7


def test_find_path(service, campus):
    engine = service.build_engine(campus)

    result = service.find_path(engine, 1, 4)

    assert result.path == (1, 3, 2, 4)
    assert result.distance == 40
    assert result.labels[0] == "Aurora and 85th"


def test_find_path_unreachable_is_empty(service, campus):
    engine = service.build_engine(campus)

    assert not service.find_path(engine, 4, 1).is_reachable


def test_require_path_raises_when_unreachable(service, campus):
    engine = service.build_engine(campus)

    with pytest.raises(NoPathFoundError) as excinfo:
        service.require_path(engine, 4, 5)

    assert excinfo.value.source == 4
    assert excinfo.value.destination == 5


def test_require_path_returns_result(service, triangle):
    engine = service.build_engine(triangle)

    assert service.require_path(engine, 1, 3).num_hops == 2


def test_out_of_range_vertex_propagates(service, triangle):
    engine = service.build_engine(triangle)

    with pytest.raises(VertexOutOfRangeError):
        service.find_path(engine, 1, 9)


def test_stale_table_is_recomputed(service, triangle):
    engine = service.build_engine(triangle)
    triangle.remove_edge(2, 3)

    assert service.find_path(engine, 1, 3).path == (1, 3)
    assert not engine.is_stale


def test_stale_table_kept_without_auto_recompute(triangle):
    service = PathTableService(
        graph_repository=FakeRepository([triangle]),
        renderer=PlainTextTableRenderer(),
        engine_config=EngineConfig(auto_recompute=False),
    )
    engine = service.build_engine(triangle)
    triangle.remove_edge(2, 3)

    assert service.find_path(engine, 1, 3).path == (1, 2, 3)
    assert engine.is_stale


def test_describe_delegates_to_renderer(triangle):
    renderer = MagicMock()
    renderer.render_table.return_value = "table"
    renderer.render_path.return_value = "path"
    service = PathTableService(
        graph_repository=FakeRepository([triangle]),
        renderer=renderer,
        engine_config=EngineConfig(),
    )
    engine = service.build_engine(triangle)

    assert service.describe_table(engine) == "table"
    assert service.describe_path(engine, 1, 3) == "path"
    renderer.render_table.assert_called_once_with(engine)
    renderer.render_path.assert_called_once_with(engine, 1, 3)
