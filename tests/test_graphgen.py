import numpy as np
import pytest

from disjoint_set import InvalidArgumentError
from graphgen import from_adjacency, main, random_adjacency, random_graph
from kruskal import kruskal_mst
from nx_utils import networkx_mst_weight


def test_random_graph_edge_count_and_weights():
    graph = random_graph(20, density=0.3, min_weight=-5, max_weight=5, seed=1)
    assert graph.vertices == 20
    assert len(graph.edges) == int(0.3 * 20 * 19 / 2)
    assert all(-5 <= e.weight <= 5 for e in graph.edges)
    assert all(e.u < e.v for e in graph.edges)
    assert len({(e.u, e.v) for e in graph.edges}) == len(graph.edges)


def test_random_graph_is_reproducible():
    assert random_graph(15, seed=42).edges == random_graph(15, seed=42).edges


def test_complete_graph():
    graph = random_graph(6, density=1.0, seed=0)
    assert len(graph.edges) == 15


def test_empty_graph():
    graph = random_graph(0)
    assert graph.vertices == 0
    assert graph.edges == []
    assert kruskal_mst(graph) == 0


def test_zero_weight_edges_survive():
    adj = random_adjacency(5, density=1.0, min_weight=0, max_weight=0, seed=2)
    graph = from_adjacency(adj)
    assert len(graph.edges) == 10
    assert kruskal_mst(graph) == 0


@pytest.mark.parametrize('kwargs', [
    {'nvertices': -1},
    {'nvertices': 5, 'density': 1.5},
    {'nvertices': 5, 'density': -0.1},
    {'nvertices': 5, 'min_weight': 10, 'max_weight': 1},
])
def test_invalid_parameters(kwargs):
    with pytest.raises(InvalidArgumentError):
        random_adjacency(**kwargs)


def test_masked_matrix_matches_graph():
    adj = random_adjacency(8, density=0.5, seed=9)
    graph = from_adjacency(adj)
    assert np.ma.count(adj) == len(graph.edges)
    for e in graph.edges:
        assert adj[e.u, e.v] == e.weight


@pytest.mark.parametrize('seed', range(3))
def test_mst_agrees_with_networkx(seed):
    graph = random_graph(40, density=0.2, seed=seed)
    assert kruskal_mst(graph) == networkx_mst_weight(graph)


def test_main_reports_weight(capsys):
    assert main(['6', '-d', '1.0', '--min-weight', '1', '--max-weight', '1', '-s', '0', '-q']) == 0
    assert capsys.readouterr().out == 'Total weight: 5\n'


def test_main_rejects_bad_density(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(['6', '-d', '2'])
    assert exc_info.value.code == 2
    assert 'density must be within [0, 1]' in capsys.readouterr().err
