"""
Tests for turn and round scheduling.
"""
import pytest

from darts_score.game import TurnState


def test_turn_state_validation():
    with pytest.raises(ValueError):
        TurnState(throws_per_turn=0)


def test_initial_state(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob")
    state = scheduler.state

    assert state.active_index == 0
    assert state.throws_left == 3
    assert state.current_round == 0
    assert state.throws_this_round == 0
    assert scheduler.active_name == "Alice"
    assert scheduler.table.capacity == 1


def test_empty_scheduler(make_scheduler):
    scheduler = make_scheduler()
    assert scheduler.state.active_index == -1
    assert scheduler.active_name == ""
    assert scheduler.table.capacity == 1


def test_throw_consumes_turn(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob")

    record = scheduler.record_throw("Alice", 20)

    assert record.player == "Alice"
    assert record.points == 20
    assert record.snapshot.throws_left == 3
    assert scheduler.state.throws_left == 2
    assert scheduler.state.throws_this_round == 1

    alice = scheduler.table.find("Alice")
    assert alice.score == 20
    assert alice.round_score == 20
    assert alice.round_scores[0].value == 20
    assert not alice.round_scores[0].is_future


def test_turn_advances_after_three_throws(make_scheduler):
    """After throws_per_turn throws the next participant is active."""
    scheduler = make_scheduler("Alice", "Bob", "Carol")

    for _ in range(3):
        scheduler.record_throw("Alice", 5)

    assert scheduler.state.active_index == 1
    assert scheduler.state.throws_left == 3
    assert scheduler.state.current_round == 0
    assert scheduler.table.find("Bob").is_active
    assert not scheduler.table.find("Alice").is_active


def test_round_completes_after_everyone_throws(make_scheduler):
    """Two players: A scores 60, B scores 0, then round two starts."""
    scheduler = make_scheduler("A", "B")

    for _ in range(3):
        scheduler.record_throw("A", 20)
    assert scheduler.state.active_index == 1
    assert scheduler.state.current_round == 0

    for _ in range(3):
        scheduler.record_throw("B", 0)

    state = scheduler.state
    assert state.active_index == 0
    assert state.current_round == 1
    assert state.throws_this_round == 0
    assert scheduler.table.capacity == 2

    table = scheduler.table
    assert table.cumulative_total("A", 0) == 60
    assert table.cumulative_total("B", 0) == 0
    assert table.headers[0].is_past
    assert table.headers[1].is_current

    a_current = table.find("A").round_scores[1]
    assert a_current.is_active_cell
    assert a_current.is_future


def test_capacity_covers_current_round(make_scheduler):
    """Every participant has an entry for the current round at all times."""
    scheduler = make_scheduler("A", "B")

    for throw in range(2 * 3 * 4):
        player = scheduler.active_name
        scheduler.record_throw(player, throw % 7)
        for participant in scheduler.table.participants:
            assert len(participant.round_scores) >= scheduler.state.current_round + 1
        assert 0 <= scheduler.state.throws_left <= 3

    assert scheduler.state.current_round == 4


def test_off_turn_throw_only_touches_ledger(make_scheduler):
    """Scores for a non-active participant are manual corrections."""
    scheduler = make_scheduler("Alice", "Bob")

    record = scheduler.record_throw("Bob", 15)

    assert record is not None
    bob = scheduler.table.find("Bob")
    assert bob.score == 15
    assert bob.round_scores[0].value == 0
    assert scheduler.state.throws_left == 3
    assert scheduler.state.throws_this_round == 0
    assert scheduler.state.active_index == 0


def test_throw_for_unknown_player(make_scheduler):
    scheduler = make_scheduler("Alice")

    scheduler.record_throw("Zed", 10)

    assert scheduler.ledger.get("Zed") == 10
    assert scheduler.state.throws_left == 3


def test_record_throw_noops(make_scheduler):
    """Empty names and empty sessions record nothing."""
    scheduler = make_scheduler("Alice")
    assert scheduler.record_throw("", 20) is None
    assert scheduler.state.throws_left == 3

    empty = make_scheduler()
    assert empty.record_throw("Alice", 20) is None
    assert empty.ledger.get("Alice") == 0


def test_scores_never_negative(make_scheduler):
    scheduler = make_scheduler("Alice")
    scheduler.record_throw("Alice", 10)
    scheduler.record_throw("Alice", -50)

    alice = scheduler.table.find("Alice")
    assert alice.score == 0
    assert alice.round_scores[0].value == 0
    assert alice.round_score == 0


def test_zero_point_throw_keeps_cell_hidden(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob")
    scheduler.record_throw("Alice", 0)

    entry = scheduler.table.find("Alice").round_scores[0]
    assert entry.is_future
    assert entry.display_total == ""


def test_manual_advance_counts_unused_throws(make_scheduler):
    """Single participant with two throws left: unused throws count as zeros."""
    scheduler = make_scheduler("A")
    scheduler.state.throws_left = 2

    assert scheduler.advance_turn_manually()

    state = scheduler.state
    assert state.throws_this_round == 2
    assert state.throws_left == 3
    assert state.active_index == 0
    assert state.current_round == 0

    entry = scheduler.table.find("A").round_scores[0]
    assert entry.value == 0
    assert not entry.is_future
    assert entry.display_total == "0"


def test_manual_advance_completes_round(make_scheduler):
    scheduler = make_scheduler("A", "B")
    scheduler.record_throw("A", 20)

    scheduler.advance_turn_manually()
    assert scheduler.state.active_index == 1
    assert scheduler.state.throws_this_round == 3

    scheduler.advance_turn_manually()
    assert scheduler.state.active_index == 0
    assert scheduler.state.current_round == 1
    assert scheduler.state.throws_this_round == 0
    assert scheduler.table.cumulative_total("A", 0) == 20
    assert scheduler.table.find("A").round_scores[0].value == 20


def test_manual_advance_without_participants(make_scheduler):
    scheduler = make_scheduler()
    assert not scheduler.advance_turn_manually()
    assert scheduler.state.active_index == -1


def test_select_participant(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob")
    bob = scheduler.table.find("Bob")

    assert scheduler.select(bob)
    assert scheduler.state.active_index == 1
    assert bob.is_active


def test_removal_keeps_active_participant(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob", "Carol")
    table = scheduler.table
    scheduler.select(table.find("Carol"))

    idx = table.remove(table.find("Alice"))
    scheduler.participant_removed(idx)

    assert scheduler.active_name == "Carol"


def test_removal_of_last_active_wraps(make_scheduler):
    scheduler = make_scheduler("Alice", "Bob")
    table = scheduler.table
    scheduler.select(table.find("Bob"))

    idx = table.remove(table.find("Bob"))
    scheduler.participant_removed(idx)

    assert scheduler.active_name == "Alice"


def test_removal_of_only_participant(make_scheduler):
    scheduler = make_scheduler("Alice")
    table = scheduler.table

    idx = table.remove(table.find("Alice"))
    scheduler.participant_removed(idx)

    assert scheduler.state.active_index == -1
    assert scheduler.state.throws_left == 0
