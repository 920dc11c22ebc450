"""Tests for the command-line front end."""
import io

import pytest

from towersym.cli import build_parser, main, run
from towersym.config import SearchConfig
from towersym.errors import InvalidArgumentError


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.k == 3
    assert args.budget is None
    assert args.save_prefix is None


def test_config_budget_default():
    assert SearchConfig(dim=3).resolved_budget == 27
    assert SearchConfig(dim=3, budget=5).resolved_budget == 5


def test_config_rejects_bad_values():
    with pytest.raises(InvalidArgumentError):
        SearchConfig(dim=0)
    with pytest.raises(InvalidArgumentError):
        SearchConfig(dim=2, budget=-1)


def test_run_single_cell():
    out = io.StringIO()
    run(SearchConfig(dim=1), out=out)
    assert out.getvalue() == "0\n\n----\nNumber of states with equal score: 1\n0\n\n"


def test_main_prints_report(capsys):
    assert main(["2", "--budget", "50"]) == 0
    text = capsys.readouterr().out
    head, tail = text.split("----\n")
    assert head.startswith("00\n00\n")
    assert tail.startswith("Number of states with equal score: ")


def test_main_invalid_dimension(capsys):
    assert main(["0"]) == 2
    assert "dim must be at least 1" in capsys.readouterr().err
