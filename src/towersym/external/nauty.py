from __future__ import annotations

import os
import re
import shutil
import subprocess

import networkx as nx

from towersym.automorphism.search import compute_automorphisms
from towersym.graph.digraph import Graph
from towersym.io.graph6 import graph_to_g6


NAUTY_DREADNAUT = os.environ.get("NAUTY_DREADNAUT", "dreadnaut")


def dreadnaut_available() -> bool:
    """Returns True iff dreadnaut appears runnable."""
    return shutil.which(NAUTY_DREADNAUT) is not None


# ---------------------------------------------------------------------------
# Automorphism group order
# ---------------------------------------------------------------------------

def _g6_to_dreadnaut_input(g6: str) -> str:
    """Convert a graph6 string to dreadnaut adjacency input."""
    G = nx.from_graph6_bytes(g6.strip().encode("ascii"))
    n = G.number_of_nodes()
    lines = [f"n={n} g"]
    for v in range(n):
        neighbors = sorted(G.neighbors(v))
        lines.append(f"{v} : {' '.join(str(u) for u in neighbors)};")
    lines.append("x")
    lines.append("q")
    return "\n".join(lines) + "\n"


_GRPSIZE_RE = re.compile(r"grpsize=(\d+(?:\.\d+)?)(?:\*10\^(\d+))?")


def _parse_grpsize(output: str) -> int:
    """Parse 'grpsize=N' or 'grpsize=A*10^B' from dreadnaut output."""
    m = _GRPSIZE_RE.search(output)
    if not m:
        raise RuntimeError(f"Could not parse grpsize from dreadnaut output:\n{output}")
    base = float(m.group(1))
    exp = int(m.group(2)) if m.group(2) else 0
    return round(base * (10 ** exp))


def aut_size_g6(g6: str) -> int:
    """Compute |Aut(G)| for a graph given in graph6 format using dreadnaut."""
    if not dreadnaut_available():
        raise RuntimeError(
            "dreadnaut not available (need 'dreadnaut' in PATH, "
            "or set NAUTY_DREADNAUT)."
        )
    inp = _g6_to_dreadnaut_input(g6)
    p = subprocess.run(
        [NAUTY_DREADNAUT],
        input=inp.encode("ascii"),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    combined = p.stdout.decode("ascii", errors="replace") + p.stderr.decode("ascii", errors="replace")
    return _parse_grpsize(combined)


def aut_size(graph: Graph) -> int:
    """Compute |Aut(G)|.

    Strategy:
      1. If the graph is simple and undirected and dreadnaut is available, use nauty.
      2. Otherwise, count the mappings found by the backtracking search.
    """
    simple = graph.is_symmetric() and all(v != w for v, w in graph.arcs)
    if simple and dreadnaut_available():
        return aut_size_g6(graph_to_g6(graph))
    return len(compute_automorphisms(graph))
