"""
Round table: participants, their per-round score cells, and round headers.
"""
from typing import List, Optional
import logging

from .participant import Participant, RoundHeader, RoundScoreEntry

logger = logging.getLogger(__name__)


class RoundTable:
    """
    Ordered participants plus a parallel, growable sequence of round headers.

    Every participant always has at least ``len(headers)`` round entries;
    capacity only grows. Derived flags on headers and entries are left to
    ``project_flags``.
    """

    def __init__(self):
        self.participants: List[Participant] = []
        self.headers: List[RoundHeader] = []

    def __len__(self) -> int:
        return len(self.participants)

    @property
    def capacity(self) -> int:
        """Number of round columns currently materialized."""
        return len(self.headers)

    def find(self, name: str) -> Optional[Participant]:
        """Participant with ``name``, or None."""
        for participant in self.participants:
            if participant.name == name:
                return participant
        return None

    def index_of(self, participant: Participant) -> int:
        """Position of ``participant`` (identity match), or -1."""
        for idx, p in enumerate(self.participants):
            if p is participant:
                return idx
        return -1

    def get(self, index: int) -> Optional[Participant]:
        if 0 <= index < len(self.participants):
            return self.participants[index]
        return None

    def add(self, participant: Participant, current_round: int = 0) -> None:
        """Append a participant and give it entries for every existing column."""
        self.participants.append(participant)
        self._grow_entries(participant, self.capacity, current_round)

    def remove(self, participant: Participant) -> int:
        """
        Remove a participant.

        Returns:
            Index it occupied, or -1 if it was not in the table
        """
        idx = self.index_of(participant)
        if idx >= 0:
            self.participants.pop(idx)
        return idx

    def ensure_capacity(self, rounds: int, current_round: int = 0) -> None:
        """
        Grow headers and every participant's entries to at least ``rounds``.

        Args:
            rounds: Minimum number of round columns (values below 1 mean 1)
            current_round: Round the scheduler is on; new cells at or before
                it start as not-future
        """
        rounds = max(1, rounds)

        if len(self.headers) < rounds:
            logger.debug(f"Round capacity {len(self.headers)} → {rounds}")
        while len(self.headers) < rounds:
            self.headers.append(RoundHeader(number=len(self.headers) + 1))

        for participant in self.participants:
            self._grow_entries(participant, rounds, current_round)

    def _grow_entries(self, participant: Participant, rounds: int, current_round: int) -> None:
        entries = participant.round_scores
        while len(entries) < rounds:
            idx = len(entries)
            entry = RoundScoreEntry(
                owner=participant.name,
                index=idx,
                is_future=idx > current_round,
                total=participant.cumulative_total(idx - 1) if idx else 0,
            )
            entries.append(entry)

    def add_points(self, participant: Participant, index: int, points: int) -> Optional[RoundScoreEntry]:
        """Add ``points`` to the cell at ``index``, clamped at zero."""
        entry = participant.entry(index)
        if entry is None:
            return None
        self.set_value(participant, index, max(0, entry.value + points))
        return entry

    def set_value(self, participant: Participant, index: int, value: int) -> None:
        """Set a cell value and refresh cumulative totals from ``index`` on."""
        entry = participant.entry(index)
        if entry is None:
            return
        if entry.value != value:
            entry.value = max(0, value)
        self.refresh_totals(participant, index)

    def refresh_totals(self, participant: Participant, start: int = 0) -> None:
        """Recompute cached cumulative totals for cells ``start..end``."""
        entries = participant.round_scores
        if not entries:
            return
        start = max(0, start)
        running = participant.cumulative_total(start - 1) if start else 0
        for entry in entries[start:]:
            running += entry.value
            entry.total = running

    def cumulative_total(self, name: str, index: int) -> Optional[int]:
        """
        Cumulative total for display.

        Returns:
            Sum of the participant's values at 0..index, or None when the
            cell is future or does not exist
        """
        participant = self.find(name)
        if participant is None:
            return None
        entry = participant.entry(index)
        if entry is None or entry.is_future:
            return None
        return participant.cumulative_total(index)
