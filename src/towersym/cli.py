#!/usr/bin/env python3
"""
Best TowerBloxx boards reachable on a k x k grid.

Usage
-----
    towersym            # 3 x 3 grid
    towersym 4 --budget 5000 -v
    python -m towersym 3 --save-prefix out/best
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from towersym.config import SearchConfig
from towersym.errors import InvalidArgumentError
from towersym.game.search import BoundedSearch
from towersym.game.towerbloxx import TowerBloxx

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="towersym",
        description="Symmetry-reduced breadth-first search for TowerBloxx on a k x k grid.",
    )
    ap.add_argument("k", type=int, nargs="?", default=3, help="grid dimension (default 3)")
    ap.add_argument("--budget", type=int, default=None,
                    help="number of states to expand (default 3*k*k)")
    ap.add_argument("--save-prefix", type=str, default=None,
                    help="draw the best path to {prefix}_step{i}.png")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def run(config: SearchConfig, out=None) -> BoundedSearch:
    """Run the search described by *config* and print the report to *out*."""
    out = sys.stdout if out is None else out

    game = TowerBloxx(config.dim)
    logger.info("[k=%d] %d automorphisms", config.dim, len(game.automorphisms))

    search = BoundedSearch(game)
    search.run_bfs(config.resolved_budget)

    for state in search.best_path():
        print(state, file=out)
    print("----", file=out)
    print(f"Number of states with equal score: {search.best_count}", file=out)
    for state in search.best_states():
        print(state, file=out)

    if config.save_prefix:
        from towersym.viz.draw import draw_path

        saved = draw_path(game, search.best_path_states(), save_prefix=config.save_prefix)
        logger.info("[draw] wrote %d files", len(saved))

    return search


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = SearchConfig(dim=args.k, budget=args.budget, save_prefix=args.save_prefix)
        run(config)
    except InvalidArgumentError as e:
        print(f"towersym: error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
