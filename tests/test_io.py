"""Tests for graph conversion and the nauty cross-check."""
import networkx as nx
import pytest

from towersym.automorphism.search import compute_automorphisms
from towersym.external.nauty import _parse_grpsize, aut_size, aut_size_g6, dreadnaut_available
from towersym.graph.digraph import Graph, grid_graph
from towersym.io.graph6 import (
    g6_to_graph,
    graph_from_nx,
    graph_to_g6,
    graph_to_nx,
    strip_graph6_header,
)


# --- networkx bridge ---

def test_graph_from_nx_relabels():
    G = nx.Graph()
    G.add_edges_from([("a", "b"), ("b", "c")])
    g = graph_from_nx(G)
    assert g.size() == 3
    assert g.edges() == [(0, 1), (1, 2)]
    assert g.is_symmetric()


def test_graph_from_nx_directed():
    g = graph_from_nx(nx.DiGraph([(0, 1), (1, 2)]))
    assert g.arcs == ((0, 1), (1, 2))
    assert not g.is_symmetric()


def test_graph_to_nx_kind():
    assert not graph_to_nx(grid_graph(2)).is_directed()
    d = Graph(2)
    d.add_arc(0, 1)
    H = graph_to_nx(d)
    assert H.is_directed()
    assert list(H.edges()) == [(0, 1)]


def test_grid_matches_networkx_grid():
    H = graph_to_nx(grid_graph(3))
    assert nx.is_isomorphic(H, nx.grid_2d_graph(3, 3))


# --- graph6 ---

def test_graph6_roundtrip_grid():
    g = grid_graph(3)
    assert g6_to_graph(graph_to_g6(g)).edges() == g.edges()


def test_strip_graph6_header():
    assert strip_graph6_header(">>graph6<<C~\n") == "C~"


def test_graph6_rejects_directed():
    d = Graph(2)
    d.add_arc(0, 1)
    with pytest.raises(ValueError):
        graph_to_g6(d)


def test_graph6_rejects_loops():
    g = Graph(2)
    g.add_arc(0, 0)
    with pytest.raises(ValueError):
        graph_to_g6(g)


# --- dreadnaut ---

def test_parse_grpsize():
    assert _parse_grpsize("level 1: 2 orbits\n;  grpsize=8; 2 gens") == 8
    assert _parse_grpsize("grpsize=1.2*10^3; orbits=2") == 1200


def test_parse_grpsize_missing():
    with pytest.raises(RuntimeError):
        _parse_grpsize("no group here")


@pytest.mark.skipif(not dreadnaut_available(), reason="dreadnaut not available")
def test_aut_size_g6_grid():
    assert aut_size_g6(graph_to_g6(grid_graph(3))) == 8


@pytest.mark.skipif(not dreadnaut_available(), reason="dreadnaut not available")
def test_search_agrees_with_nauty():
    for G in (nx.cycle_graph(5), nx.path_graph(5), nx.star_graph(3), nx.complete_graph(4)):
        g = graph_from_nx(G)
        assert len(compute_automorphisms(g)) == aut_size_g6(graph_to_g6(g))


def test_aut_size_directed_uses_search():
    d = Graph(3)
    d.add_arc(0, 1)
    d.add_arc(1, 2)
    assert aut_size(d) == 1
