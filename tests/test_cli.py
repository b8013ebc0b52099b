import random

import pytest

from pushswap.cli import main, run
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values)
    for name in output.splitlines():
        getattr(stacks, name)()
    return stacks


def test_no_arguments_prints_nothing(capsys):
    assert run([]) == 0
    assert capsys.readouterr().out == ""


def test_blank_argument_is_an_error(capsys):
    assert run(["   "]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_two_values(capsys):
    assert run(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_values_in_one_argument(capsys):
    assert run(["3 2 1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


def test_sorted_input_prints_nothing(capsys):
    assert run(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["1", "a"], ["4 2 2"], ["2147483648", "1"], ["-2147483649", "3"], ["1.5", "2"]],
)
def test_invalid_input_prints_error(args, capsys):
    assert run(args) == 0
    assert capsys.readouterr().out == "Error\n"


def test_single_value_becomes_exit_status(capsys):
    assert run(["42"]) == 42
    assert capsys.readouterr().out == ""


def test_single_negative_value_wraps(capsys):
    assert run(["-1"]) == 255
    assert capsys.readouterr().out == ""


def test_single_value_at_limit_is_error(capsys):
    assert run(["2147483647"]) == 0
    assert capsys.readouterr().out == "Error\n"


def test_main_with_explicit_arguments(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize("seed", range(4))
def test_output_sorts_the_input(seed, capsys):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), rng.randint(2, 60))
    assert run([str(v) for v in values]) == 0
    stacks = _replay(values, capsys.readouterr().out)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b