import random

import pytest

from pushswap.cli import main
from pushswap.stacks import PushSwap

_METHODS = {
    "sa": PushSwap.swap_a,
    "sb": PushSwap.swap_b,
    "ss": PushSwap.swap_both,
    "pa": PushSwap.push_a,
    "pb": PushSwap.push_b,
    "ra": PushSwap.rotate_a,
    "rb": PushSwap.rotate_b,
    "rr": PushSwap.rotate_both,
    "rra": PushSwap.reverse_rotate_a,
    "rrb": PushSwap.reverse_rotate_b,
}


def _replay(values, lines):
    machine = PushSwap(values)
    for line in lines:
        _METHODS[line](machine)
    return machine


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    out = capsys.readouterr()
    assert out.out == ""
    assert out.err == ""


def test_single_value_prints_nothing(capsys):
    assert main(["42"]) == 0
    assert capsys.readouterr().out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_two_values_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_values_in_one_quoted_argument(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "sa\nrra\n"


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["abc"], ["", "1"], ["1", "2147483648"], ["   "], ["1 2 1"], ["4-2"]],
)
def test_bad_input_reports_error(args, capsys):
    assert main(args) == 1
    out = capsys.readouterr()
    assert out.err == "Error\n"
    assert out.out == ""


def test_output_sorts_large_input(capsys):
    rng = random.Random(7)
    values = rng.sample(range(-1000, 1000), 120)
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    machine = _replay(values, lines)
    assert list(machine.a) == sorted(values)
    assert not machine.b


def test_output_sorts_five_values(capsys):
    values = [5, -1, 3, 0, 2]
    assert main([" ".join(str(v) for v in values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    machine = _replay(values, lines)
    assert list(machine.a) == sorted(values)
    assert not machine.b