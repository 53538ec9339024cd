"""
Shared fixtures for the game tests.
"""
import pytest

from darts_score.game import (
    GameSession,
    Participant,
    RoundTable,
    ScoreLedger,
    TurnScheduler,
)


class FakeSchedule:
    """Collects deferred callbacks so tests decide when they fire."""

    def __init__(self):
        self.calls = []

    def __call__(self, delay_sec, callback):
        self.calls.append((delay_sec, callback))

    def run_all(self):
        calls, self.calls = self.calls, []
        for _, callback in calls:
            callback()


@pytest.fixture
def fake_schedule():
    return FakeSchedule()


@pytest.fixture
def session(fake_schedule):
    """In-memory session (no roster file) with a manual highlight timer."""
    return GameSession(schedule=fake_schedule)


@pytest.fixture
def make_scheduler():
    """Factory building a scheduler with the given participant names."""
    def _make(*names):
        table = RoundTable()
        ledger = ScoreLedger(table)
        scheduler = TurnScheduler(table, ledger)
        for name in names:
            table.add(Participant(name=name, score=ledger.ensure(name)),
                      scheduler.state.current_round)
            scheduler.ensure_active_participant()
        scheduler.ensure_capacity(scheduler.state.current_round + 1)
        return scheduler
    return _make
