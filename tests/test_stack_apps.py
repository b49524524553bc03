import math

import pytest

from dskit.errors import CapacityError, UnderflowError
from dskit.stack_apps import (
    Matching,
    check_matching,
    eval_postfix,
    factorial,
    factorial_iter,
    factorial_trace,
    hanoi_tower,
    infix_to_postfix,
    precedence,
    reverse_string,
)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("{A[(i+1)]=0;}", Matching.OK),
        ("if((i==0) && (j==0)", Matching.UNCLOSED),
        ("while(n<8)){n++;}", Matching.UNEXPECTED_CLOSE),
        ("arr[(i+1]) = 0;", Matching.MISMATCH),
    ],
)
def test_check_matching_source_cases(expr, expected):
    assert check_matching(expr) is expected


def test_check_matching_codes_are_rule_numbers():
    exprs = ["{A[(i+1)]=0;}", "if((i==0) && (j==0)", "while(n<8)){n++;}", "arr[(i+1]) = 0;"]
    assert [check_matching(e).value for e in exprs] == [0, 1, 2, 3]


def test_check_matching_overflow():
    with pytest.raises(CapacityError):
        check_matching("(" * 101)


def test_eval_postfix_source_cases():
    assert eval_postfix("8 2 / 3- 3 2 * +") == pytest.approx(7.0)
    assert eval_postfix("1 2 / 4 * 1 4 / *") == pytest.approx(0.5)


def test_eval_postfix_missing_operand():
    with pytest.raises(UnderflowError):
        eval_postfix("3 +")


def test_infix_to_postfix_source_case():
    assert infix_to_postfix("8 / 2 - 3 + (3 * 2)") == "8 2 / 3 - 3 2 * +"


@pytest.mark.parametrize(
    "infix, postfix",
    [
        ("8 / 2 - 3 + (3 * 2)", "8 2 / 3- 3 2 * +"),
        ("1 / 2 * 4 * (1 / 4)", "1 2 / 4 * 1 4 / *"),
    ],
)
def test_infix_conversion_evaluates_like_source_postfix(infix, postfix):
    assert eval_postfix(infix_to_postfix(infix)) == pytest.approx(eval_postfix(postfix))


def test_precedence_ordering():
    assert precedence("*") == precedence("/")
    assert precedence("+") == precedence("-")
    assert precedence("*") > precedence("+") > precedence("(")
    assert precedence("(") == precedence(")")
    assert precedence("x") == -1


def test_reverse_string_round_trip():
    text = "Hello World"
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert reversed_text[0] == text[-1]
    assert len(reversed_text) == len(text)


def test_factorials_agree():
    for n in range(1, 25):
        assert factorial(n) == factorial_iter(n) == math.factorial(n)


def test_factorial_iter_zero():
    assert factorial_iter(0) == math.factorial(0)


def test_factorial_rejects_zero():
    with pytest.raises(ValueError):
        factorial(0)


def test_factorial_trace():
    value, trace = factorial_trace(3)
    assert value == factorial(3)
    assert len(trace) == 6
    assert trace[0] == "call factorial(3)"
    assert trace[2] == "call factorial(1)"
    assert trace[-1] == f"return factorial(3) --> {factorial(3)}"


@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_hanoi_moves_are_legal_and_complete(n):
    pegs = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    moves = list(hanoi_tower(n, "A", "B", "C"))
    assert len(moves) == 2**n - 1
    for disk, src, dst in moves:
        assert pegs[src][-1] == disk
        pegs[src].pop()
        assert not pegs[dst] or pegs[dst][-1] > disk
        pegs[dst].append(disk)
    assert pegs["C"] == list(range(n, 0, -1))


def test_hanoi_single_disk():
    assert list(hanoi_tower(1, "A", "B", "C")) == [(1, "A", "C")]


def test_hanoi_rejects_zero_disks():
    with pytest.raises(ValueError):
        hanoi_tower(0)