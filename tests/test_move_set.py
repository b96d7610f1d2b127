"""
招式集合测试
Move Set Tests
"""
import pytest

from fair_rps.game import MoveSet
from fair_rps.utils import ValidationError, INVALID_CARDINALITY


@pytest.mark.parametrize("tokens", [
    ["Rock"],
    ["Rock", "Paper"],
    ["Rock", "Paper", "Scissors", "Lizard"],
    [],
])
def test_rejects_bad_cardinality(tokens):
    with pytest.raises(ValidationError) as exc_info:
        MoveSet.build(tokens)
    assert exc_info.value.kind == INVALID_CARDINALITY
    assert exc_info.value.count == len(tokens)


@pytest.mark.parametrize("count", [3, 5, 7])
def test_accepts_odd_cardinality(count):
    move_set = MoveSet.build([f"m{i}" for i in range(count)])
    assert move_set.size() == count
    assert len(move_set) == count


def test_duplicates_collapse_below_minimum():
    with pytest.raises(ValidationError) as exc_info:
        MoveSet.build(["Rock", "Rock", "Paper", "Paper", "Rock"])
    assert exc_info.value.count == 2


def test_dedup_keeps_first_occurrence_order():
    move_set = MoveSet.build(["Spock", "Rock", "Spock", "Paper", "Rock", "Lizard", "Scissors"])
    assert move_set.labels == ("Spock", "Rock", "Paper", "Lizard", "Scissors")


def test_dedup_can_turn_even_input_valid():
    move_set = MoveSet.build(["a", "b", "c", "a"])
    assert move_set.labels == ("a", "b", "c")


def test_indices_are_one_based_and_reversible():
    move_set = MoveSet.build(["Rock", "Paper", "Scissors"])
    assert move_set.label_at(1) == "Rock"
    assert move_set.label_at(3) == "Scissors"
    assert move_set.index_of("Paper") == 2
    assert list(move_set) == [(1, "Rock"), (2, "Paper"), (3, "Scissors")]


def test_out_of_range_lookups_raise_key_error():
    move_set = MoveSet.build(["Rock", "Paper", "Scissors"])
    with pytest.raises(KeyError):
        move_set.label_at(0)
    with pytest.raises(KeyError):
        move_set.label_at(4)
    with pytest.raises(KeyError):
        move_set.index_of("Lizard")
    assert not move_set.has_index(0)
    assert move_set.has_index(3)


def test_error_message_gives_guidance():
    with pytest.raises(ValidationError) as exc_info:
        MoveSet.build(["Rock", "Paper"])
    assert "odd number" in str(exc_info.value)
