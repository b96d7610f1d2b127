"""
环形胜负规则测试
Circular Winner Resolution Tests
"""
import numpy as np
import pytest

from fair_rps.game import Outcome, WinnerResolver

ODD_SIZES = [3, 5, 7, 9, 11]


def test_classic_three_moves():
    # Rock=1, Paper=2, Scissors=3
    assert WinnerResolver.resolve(1, 2, 3) == Outcome.SECOND_WINS
    assert WinnerResolver.resolve(1, 3, 3) == Outcome.FIRST_WINS
    assert WinnerResolver.resolve(2, 3, 3) == Outcome.FIRST_WINS
    assert WinnerResolver.resolve(2, 1, 3) == Outcome.FIRST_WINS


def test_lizard_loses_to_rock():
    # delta = ((4 - 1 + 2 + 5) % 5) - 2 = -2
    assert WinnerResolver.delta(4, 1, 5) == -2
    assert WinnerResolver.resolve(4, 1, 5) == Outcome.SECOND_WINS


@pytest.mark.parametrize("n", ODD_SIZES)
def test_swapping_arguments_inverts_outcome(n):
    inverse = {
        Outcome.FIRST_WINS: Outcome.SECOND_WINS,
        Outcome.SECOND_WINS: Outcome.FIRST_WINS,
        Outcome.DRAW: Outcome.DRAW,
    }
    for a in range(1, n + 1):
        assert WinnerResolver.resolve(a, a, n) == Outcome.DRAW
        for b in range(1, n + 1):
            assert WinnerResolver.resolve(b, a, n) == inverse[WinnerResolver.resolve(a, b, n)]


@pytest.mark.parametrize("n", ODD_SIZES)
def test_each_move_beats_exactly_half(n):
    for a in range(1, n + 1):
        outcomes = [WinnerResolver.resolve(a, b, n) for b in range(1, n + 1)]
        assert outcomes.count(Outcome.FIRST_WINS) == n // 2
        assert outcomes.count(Outcome.SECOND_WINS) == n // 2
        assert outcomes.count(Outcome.DRAW) == 1


@pytest.mark.parametrize("n", ODD_SIZES)
def test_dominance_matrix_agrees_with_resolve(n):
    matrix = WinnerResolver.dominance_matrix(n)
    assert matrix.shape == (n, n)
    assert np.array_equal(matrix, -matrix.T)
    assert not matrix.diagonal().any()
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            assert Outcome.from_sign(matrix[a - 1, b - 1]) == WinnerResolver.resolve(a, b, n)


@pytest.mark.parametrize("a, b, n", [(0, 1, 3), (1, 4, 3), (1, 1, 4), (1, 1, 1)])
def test_invalid_arguments_raise(a, b, n):
    with pytest.raises(ValueError):
        WinnerResolver.resolve(a, b, n)
