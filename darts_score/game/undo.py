"""
Single-slot undo for the most recent throw.
"""
from typing import Optional
import logging

from darts_score.core import TurnSnapshot, ThrowRecord
from .scheduler import TurnScheduler

logger = logging.getLogger(__name__)


class UndoController:
    """
    Compensates the last recorded throw.

    Only the most recent ``ThrowRecord`` is meaningful: restoring an older
    snapshot, or undoing twice, reverses points against the wrong state.
    Round capacity growth and resolved cells are not rewound.
    """

    def __init__(self, scheduler: TurnScheduler):
        self.scheduler = scheduler
        self.last: Optional[ThrowRecord] = None

    @property
    def can_undo(self) -> bool:
        return self.last is not None

    def remember(self, record: Optional[ThrowRecord]) -> None:
        """Keep ``record`` in the single slot (None leaves the slot as is)."""
        if record is not None:
            self.last = record

    def undo(self, snapshot: TurnSnapshot, player: str, points: int) -> None:
        """
        Reverse a throw.

        Args:
            snapshot: Scheduler state captured before the throw
            player: Player the throw was credited to
            points: Points the throw scored
        """
        scheduler = self.scheduler
        table = scheduler.table

        scheduler.ledger.adjust(player, -points)
        scheduler.restore(snapshot)

        participant = table.find(player)
        if participant is not None:
            entry = participant.entry(scheduler.state.current_round)
            if entry is not None:
                table.set_value(participant, entry.index, max(0, entry.value - points))

        scheduler.refresh()
        logger.debug(f"Undone: {player} {points} (round {snapshot.round_index + 1})")

    def undo_record(self, record: ThrowRecord) -> None:
        self.undo(record.snapshot, record.player, record.points)

    def undo_last(self) -> bool:
        """
        Undo the remembered throw and clear the slot.

        Returns:
            True if a throw was undone, False if there was nothing to undo
        """
        if self.last is None:
            return False

        record, self.last = self.last, None
        self.undo_record(record)
        return True
