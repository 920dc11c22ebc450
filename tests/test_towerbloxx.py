"""Tests for TowerBloxx move generation and scoring."""
import pytest

from towersym.errors import EncodingWidthError, InvalidArgumentError
from towersym.game.towerbloxx import SCORES, TowerBloxx


def test_scores_table():
    assert SCORES == (205, 966, 2677, 5738)


def test_automorphisms_of_board():
    assert len(TowerBloxx(3).automorphisms) == 8
    assert len(TowerBloxx(1).automorphisms) == 1


def test_too_large_board():
    with pytest.raises(EncodingWidthError):
        TowerBloxx(6)


def test_negative_board_size():
    with pytest.raises(InvalidArgumentError):
        TowerBloxx(-2)


# --- scoring ---

def test_score_all_level_3():
    for k in (2, 3):
        tb = TowerBloxx(k)
        n = k * k
        assert tb.compute_score(tb.encoder.encode([3] * n)) == 5738 * n


def test_score_empty_board():
    tb = TowerBloxx(3)
    assert tb.compute_score(0) == 205 * 9


# --- histogram ---

def test_get_hist():
    tb = TowerBloxx(3)
    s = tb.encoder.encode([0, 1, 0, 2, 0, 3, 0, 1, 0])
    # center 4 has neighbours 1, 3, 5, 7 at levels 1, 2, 3, 1
    assert tb.get_hist(s, 4) == [0, 2, 1, 1]
    assert tb.get_hist(s, 0) == [0, 1, 1, 0]


# --- expand ---

def test_expand_empty_2x2_collapses_to_one():
    tb = TowerBloxx(2)
    succ = tb.expand(0)
    assert succ == [1]


def test_expand_successors_are_canonical_and_distinct():
    tb = TowerBloxx(2)
    succ = tb.expand(1)
    # upgrade a neighbour to 1, upgrade a neighbour to 2, or the far corner to 1
    assert len(succ) == 3
    assert len(set(succ)) == 3
    assert all(tb.reduce(s) == s for s in succ)


def test_expand_demolish_when_no_empty_neighbour():
    tb = TowerBloxx(2)
    # both neighbours of corners 0 and 3 are built: only demolition is possible
    s = tb.encoder.encode([0, 1, 1, 0])
    assert tb.expand(s) == [1]


def test_expand_upgrade_to_3():
    tb = TowerBloxx(3)
    # center has neighbours at 0, 1 and 2
    s = tb.encoder.encode([0, 1, 0, 2, 0, 0, 0, 0, 0])
    upgraded = tb.reduce(tb.encoder.change_state(s, 4, 3))
    assert upgraded in tb.expand(s)


def test_expand_level_3_is_final():
    tb = TowerBloxx(2)
    s = tb.encoder.encode([3, 0, 0, 0])
    for succ in tb.expand(s):
        assert 3 in tb.encoder.decode(succ)


def test_to_grid():
    tb = TowerBloxx(2)
    assert tb.to_grid(tb.encoder.encode([1, 0, 2, 3])) == "10\n23\n"
