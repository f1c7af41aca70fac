from pathlib import Path

import pytest

from pathtable.config import reset_config
from pathtable.container import reset_container
from pathtable.graph import WeightedDigraph

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def triangle() -> WeightedDigraph:
    """Vertices {1, 2, 3} with edges 1->2 (5), 2->3 (2), 1->3 (9)."""
    graph = WeightedDigraph(3)
    graph.set_vertex_label(1, "Kitchen")
    graph.set_vertex_label(2, "Hallway")
    graph.set_vertex_label(3, "Garden")
    graph.insert_edge(1, 2, 5)
    graph.insert_edge(2, 3, 2)
    graph.insert_edge(1, 3, 9)
    return graph


@pytest.fixture
def campus() -> WeightedDigraph:
    """Five-vertex graph with a tie on the way to vertex 4."""
    graph = WeightedDigraph(5)
    for index, label in enumerate(
        ["Aurora and 85th", "Green Lake Starbucks", "Woodland Park Zoo",
         "Troll under bridge", "PCC"],
        start=1,
    ):
        graph.set_vertex_label(index, label)
    for source, destination, weight in [
        (1, 2, 50), (1, 3, 20), (1, 5, 30), (2, 4, 10), (3, 2, 10),
        (3, 4, 50), (5, 2, 20), (5, 4, 25), (4, 3, 25),
    ]:
        graph.insert_edge(source, destination, weight)
    return graph
