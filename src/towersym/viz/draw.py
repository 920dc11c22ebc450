from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import networkx as nx

from towersym.game.towerbloxx import LEVELS, TowerBloxx
from towersym.io.graph6 import graph_to_nx
from .layouts import base_layout

LEVEL_COLORS = ("#d9d9d9", "#9ecae1", "#4292c6", "#08306b")


def draw_state(
    game: TowerBloxx,
    state: int,
    *,
    ax=None,
    node_size: int = 900,
    title: str | None = None,
):
    """
    Draw one board: every cell is a node coloured by its level and labelled
    with it.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(4, 4))

    G = graph_to_nx(game.graph)
    pos = base_layout(game.graph, dim=game.dim)
    levels = game.encoder.decode(state)

    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        node_color=[LEVEL_COLORS[lv % LEVELS] for lv in levels],
        labels={v: str(lv) for v, lv in enumerate(levels)},
        font_color="white",
        node_size=node_size,
        width=1.2,
    )
    ax.set_title(title if title is not None else f"score={game.compute_score(state)}")
    ax.set_axis_off()
    return ax


def draw_path(
    game: TowerBloxx,
    states: Sequence[int],
    *,
    save_prefix: str | None = None,
    node_size: int = 900,
) -> list[str]:
    """
    Draw every state of a search path.

    If save_prefix is set, saves PNG files:
      {save_prefix}_step0.png, ..., {save_prefix}_step{len-1}.png
    and returns their names; otherwise shows each figure.
    """
    saved = []
    for i, state in enumerate(states):
        fig, ax = plt.subplots(figsize=(4, 4))
        draw_state(
            game,
            state,
            ax=ax,
            node_size=node_size,
            title=f"step {i}   score={game.compute_score(state)}",
        )
        plt.tight_layout()

        if save_prefix:
            name = f"{save_prefix}_step{i}.png"
            plt.savefig(name, dpi=200)
            plt.close(fig)
            saved.append(name)
        else:
            plt.show()

    return saved
