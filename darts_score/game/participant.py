"""
Participant data structures and per-round score cells.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RoundScoreEntry:
    """
    One cell of a participant's round history.

    ``value`` and ``resolved`` are canonical; ``is_current``, ``is_future``
    and ``is_active_cell`` are derived and only written by ``project_flags``.
    ``total`` is the cached cumulative sum up to this cell, refreshed by the
    round table whenever a value at or before ``index`` changes.
    """
    owner: str  # Name of the owning participant (handle, not a reference)
    index: int
    value: int = 0
    resolved: bool = False  # Turn closed early by a manual advance

    # Derived view state
    is_future: bool = True
    is_current: bool = False
    is_active_cell: bool = False
    total: int = 0

    @property
    def display_total(self) -> str:
        """Cumulative total for display, empty while the cell is future."""
        if self.is_future:
            return ""
        return str(self.total)


@dataclass
class RoundHeader:
    """Column label for one round."""
    number: int  # 1-based
    is_current: bool = False
    is_past: bool = False


@dataclass
class Participant:
    """Represents a player in the current session."""
    name: str
    score: int = 0  # Mirror of the ledger aggregate
    round_score: int = 0  # Mirror of the current round's value

    is_active: bool = False
    is_highlighted: bool = False  # Transient, cleared after a short delay

    round_scores: List[RoundScoreEntry] = field(default_factory=list)

    @property
    def highlight_state(self) -> bool:
        return self.is_active or self.is_highlighted

    def entry(self, index: int) -> Optional[RoundScoreEntry]:
        """Round entry at ``index``, or None if not materialized."""
        if 0 <= index < len(self.round_scores):
            return self.round_scores[index]
        return None

    def cumulative_total(self, index: int) -> int:
        """Sum of round values at indices 0..index inclusive."""
        return sum(e.value for e in self.round_scores[:index + 1])
