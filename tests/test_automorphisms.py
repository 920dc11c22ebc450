"""Tests for the automorphism search."""
import networkx as nx

from towersym.automorphism.mapping import Mapping
from towersym.automorphism.search import AutomorphismSearch, compute_automorphisms, search_order
from towersym.external.nauty import aut_size
from towersym.graph.digraph import Graph, grid_graph
from towersym.io.graph6 import graph_from_nx


def _edges_to_graph(edges, n):
    g = Graph(n)
    for u, v in edges:
        g.add_edge(u, v)
    return g


def _assert_automorphisms(g, group):
    for m in group:
        assert m.is_valid()
        for i, j in g.arcs:
            assert g.is_adjacent(m.lookup(i), m.lookup(j))


# --- grid graphs ---

def test_grid_1_identity_only():
    group = compute_automorphisms(grid_graph(1))
    assert group == [Mapping.identity(1)]


def test_grid_2_dihedral():
    g = grid_graph(2)
    group = compute_automorphisms(g)
    assert len(group) == 8
    assert len(set(group)) == 8
    _assert_automorphisms(g, group)


def test_grid_3_dihedral():
    g = grid_graph(3)
    group = compute_automorphisms(g)
    assert len(group) == 8
    _assert_automorphisms(g, group)
    # the center is fixed by every symmetry
    assert all(m.lookup(4) == 4 for m in group)


def test_identity_first():
    for g in (grid_graph(2), grid_graph(3), _edges_to_graph([(0, 1), (1, 2)], 3)):
        group = compute_automorphisms(g)
        assert group[0] == Mapping.identity(g.size())


# --- small named graphs ---

def test_aut_triangle():
    assert len(compute_automorphisms(_edges_to_graph([(0, 1), (1, 2), (0, 2)], 3))) == 6


def test_aut_p4():
    assert len(compute_automorphisms(_edges_to_graph([(0, 1), (1, 2), (2, 3)], 4))) == 2


def test_aut_star():
    assert len(compute_automorphisms(_edges_to_graph([(0, 1), (0, 2), (0, 3)], 4))) == 6


def test_aut_k4():
    edges = [(i, j) for i in range(4) for j in range(i + 1, 4)]
    assert len(compute_automorphisms(_edges_to_graph(edges, 4))) == 24


def test_aut_cycle_from_networkx():
    g = graph_from_nx(nx.cycle_graph(6))
    group = compute_automorphisms(g)
    assert len(group) == 12
    _assert_automorphisms(g, group)


def test_aut_isolated_vertices():
    assert len(compute_automorphisms(Graph(3))) == 6


def test_aut_directed_path():
    g = Graph(3)
    g.add_arc(0, 1)
    g.add_arc(1, 2)
    assert compute_automorphisms(g) == [Mapping.identity(3)]


# --- search object ---

def test_search_space_and_partition():
    search = AutomorphismSearch(grid_graph(3))
    assert [len(c) for c in search.partition] == [1, 4, 4]
    assert search.search_space() == 24 * 24


def test_describe_partition():
    text = AutomorphismSearch(grid_graph(3)).describe_partition()
    assert "Group 1 : [4]" in text
    assert "Group 2 : [0, 2, 6, 8]" in text
    assert "Group 3 : [1, 3, 5, 7]" in text


def test_aut_size_grid():
    assert aut_size(grid_graph(3)) == 8
    assert aut_size(grid_graph(2)) == 8


# --- class order ---

def test_search_order_grid_3():
    g = grid_graph(3)
    order = search_order(g, AutomorphismSearch(g).partition)
    assert order == [[0, 2, 6, 8], [1, 3, 5, 7], [4]]


def test_search_order_follows_arcs_on_grid_4():
    # corners and inner cells share no arcs, so the edge class goes between them
    search = AutomorphismSearch(grid_graph(4))
    assert search.order == [[0, 3, 12, 15], [1, 2, 4, 7, 8, 11, 13, 14], [5, 6, 9, 10]]


def test_grid_4_candidates_bounded():
    g = grid_graph(4)
    search = AutomorphismSearch(g)
    group = search.compute_automorphisms()
    assert len(group) == 8
    assert group[0] == Mapping.identity(16)
    _assert_automorphisms(g, group)
    # 24 corner + 24 * 8! edge + 8 * 4! inner extensions
    assert search.candidates_checked == 24 + 24 * 40320 + 8 * 24
    assert search.candidates_checked < 1_000_000
