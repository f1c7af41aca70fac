"""Tests for the plain-text table renderer."""

import pytest

from pathtable.adapters.rendering import PlainTextTableRenderer
from pathtable.graph import ShortestPathEngine


@pytest.fixture
def engine(triangle):
    engine = ShortestPathEngine(triangle)
    engine.compute_all()
    return engine


class TestPlainTextTableRenderer:
    """Test suite for PlainTextTableRenderer."""

    def test_header(self, engine):
        lines = PlainTextTableRenderer().render_table(engine).splitlines()

        assert lines[0] == "Description            From    To  Dist  Path"

    def test_rows_are_grouped_by_source(self, engine):
        lines = PlainTextTableRenderer().render_table(engine).splitlines()

        assert lines[1] == "Kitchen"
        assert lines[2] == " " * 25 + "1     2     5    1 2"
        assert lines[3].split() == ["1", "3", "7", "1", "2", "3"]
        assert lines[4] == ""
        assert lines[5] == "Hallway"

    def test_self_pairs_are_omitted(self, engine):
        text = PlainTextTableRenderer().render_table(engine)
        rows = [line.split() for line in text.splitlines() if line.startswith(" ")]

        assert len(rows) == 6
        assert all(row[0] != row[1] for row in rows)

    def test_unreachable_pairs_show_dashes(self, engine):
        text = PlainTextTableRenderer().render_table(engine)
        rows = [line.split() for line in text.splitlines() if line.startswith(" ")]

        assert ["2", "1", "--"] in rows
        assert ["3", "2", "--"] in rows

    def test_render_path_lists_labels(self, engine):
        text = PlainTextTableRenderer().render_path(engine, 1, 3)

        assert text.splitlines() == [
            "1     3     7      1 2 3",
            "Kitchen",
            "Hallway",
            "Garden",
        ]

    def test_render_unreachable_path(self, engine):
        text = PlainTextTableRenderer().render_path(engine, 3, 1)

        assert text == "3     1    --\n"

    def test_render_same_vertex(self, engine):
        text = PlainTextTableRenderer().render_path(engine, 2, 2)

        assert text.splitlines() == ["2     2     0      2", "Hallway"]
