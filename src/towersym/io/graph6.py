from __future__ import annotations

import networkx as nx

from towersym.graph.digraph import Graph


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def graph_from_nx(G: nx.Graph) -> Graph:
    """
    Convert a NetworkX graph into a Graph on 0..n-1.

    Nodes are relabelled in ``G.nodes()`` order. Undirected edges become
    two arcs; DiGraph arcs are kept as they are.
    """
    index = {node: i for i, node in enumerate(G.nodes())}
    g = Graph(len(index))
    directed = G.is_directed()
    for u, v in G.edges():
        if directed:
            g.add_arc(index[u], index[v])
        else:
            g.add_edge(index[u], index[v])
    return g


def graph_to_nx(g: Graph) -> nx.Graph:
    """
    Convert a Graph to NetworkX: an nx.Graph if every arc has its reverse,
    otherwise an nx.DiGraph.
    """
    H = nx.Graph() if g.is_symmetric() else nx.DiGraph()
    H.add_nodes_from(range(g.size()))
    H.add_edges_from(g.arcs)
    return H


def g6_to_graph(g6: str) -> Graph:
    """
    Parse a graph6 string into an undirected Graph.
    """
    s = strip_graph6_header(g6)
    G = nx.from_graph6_bytes(s.encode("ascii"))
    return graph_from_nx(G)


def graph_to_g6(g: Graph) -> str:
    """
    Encode an undirected, loop-free Graph as a graph6 string (no header).
    """
    if not g.is_symmetric():
        raise ValueError("graph6 can only encode undirected graphs")
    if any(v == w for v, w in g.arcs):
        raise ValueError("graph6 cannot encode self-loops")
    H = nx.Graph()
    H.add_nodes_from(range(g.size()))
    H.add_edges_from(g.edges())
    return nx.to_graph6_bytes(H, header=False).decode("ascii").strip()
