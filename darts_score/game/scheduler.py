"""
Turn and round scheduling.

The scheduler owns four canonical scalars (active participant index, throws
left, current round, throws counted this round) and the rules that move
them:

- A throw by the active participant is added to their current-round cell
  and consumes one throw from the turn.
- When the turn runs out of throws, the next participant becomes active.
- When every participant has used ``throws_per_turn`` throws, the round
  advances.

Throws credited to anyone other than the active participant only touch the
ledger; they model manual score corrections outside the turn flow.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from darts_score.core import TurnSnapshot, ThrowRecord
from .flags import project_flags
from .ledger import ScoreLedger
from .participant import Participant
from .round_table import RoundTable

logger = logging.getLogger(__name__)

THROWS_PER_TURN = 3


@dataclass
class TurnState:
    """Canonical turn/round state."""
    active_index: int = -1
    throws_left: int = 0
    throws_per_turn: int = THROWS_PER_TURN
    current_round: int = 0
    throws_this_round: int = 0

    def __post_init__(self):
        if self.throws_per_turn <= 0:
            raise ValueError("throws_per_turn must be positive")


class TurnScheduler:
    """
    State machine over ``TurnState``.

    Every mutation ends with a flag projection so the round table's derived
    flags always match canonical state.
    """

    def __init__(
            self,
            table: RoundTable,
            ledger: ScoreLedger,
            state: Optional[TurnState] = None,
            initial_rounds: int = 1
    ):
        """
        Initialize scheduler.

        Args:
            table: Round table holding the participants
            ledger: Aggregate score ledger
            state: Starting state (default: fresh TurnState)
            initial_rounds: Minimum round columns kept materialized
        """
        self.table = table
        self.ledger = ledger
        self.state = state or TurnState()
        self.initial_rounds = max(1, initial_rounds)

        self.ensure_capacity(self.state.current_round + 1)

    @property
    def throws_per_turn(self) -> int:
        return self.state.throws_per_turn

    @property
    def active_participant(self) -> Optional[Participant]:
        return self.table.get(self.state.active_index)

    @property
    def active_name(self) -> str:
        participant = self.active_participant
        return participant.name if participant else ""

    def snapshot(self) -> TurnSnapshot:
        """Capture the four scalar fields."""
        s = self.state
        return TurnSnapshot(
            active_index=s.active_index,
            throws_left=s.throws_left,
            round_index=s.current_round,
            throws_this_round=s.throws_this_round,
        )

    def refresh(self) -> None:
        """Re-project derived flags from canonical state."""
        project_flags(self.table, self.state)

    def ensure_capacity(self, rounds: int) -> None:
        """Grow the round table to ``rounds`` columns and re-project flags."""
        self.table.ensure_capacity(max(rounds, self.initial_rounds), self.state.current_round)
        self.refresh()

    def restore(self, snapshot: TurnSnapshot) -> None:
        """Restore the four scalar fields verbatim (capacity is not rewound)."""
        s = self.state
        s.active_index = snapshot.active_index
        s.throws_left = snapshot.throws_left
        s.current_round = snapshot.round_index
        s.throws_this_round = snapshot.throws_this_round

    def ensure_active_participant(self) -> None:
        """Make the first participant active if nobody is."""
        if self.state.active_index < 0 and len(self.table) > 0:
            self.state.active_index = 0
            self.state.throws_left = self.throws_per_turn
            logger.debug(f"Active participant: {self.active_name}")
        self.refresh()

    def select(self, participant: Participant) -> bool:
        """
        Make ``participant`` the active one.

        Returns:
            True if the participant is in the table
        """
        idx = self.table.index_of(participant)
        if idx < 0:
            return False

        self.state.active_index = idx
        if self.state.throws_left <= 0:
            self.state.throws_left = self.throws_per_turn
        self.refresh()
        return True

    def participant_removed(self, index: int) -> None:
        """Keep the active index consistent after a removal at ``index``."""
        s = self.state
        count = len(self.table)

        if count == 0:
            s.active_index = -1
            s.throws_left = 0
        elif index < s.active_index:
            s.active_index -= 1
        elif s.active_index >= count:
            s.active_index = 0

        self.refresh()

    def record_throw(self, player: str, points: int) -> Optional[ThrowRecord]:
        """
        Record a throw credited to ``player``.

        Args:
            player: Player name
            points: Points scored (0 for a miss)

        Returns:
            ThrowRecord for undo, or None when nothing was recorded
        """
        if not player or len(self.table) == 0:
            return None

        s = self.state
        snapshot = self.snapshot()

        self.ledger.adjust(player, points)

        active = self.active_participant
        on_turn = active is not None and player == active.name

        if on_turn:
            self.table.ensure_capacity(s.current_round + 1, s.current_round)
            entry = self.table.add_points(active, s.current_round, points)
            active.round_score = entry.value
            s.throws_this_round += 1

            if s.throws_left > 0:
                s.throws_left -= 1

            logger.debug(
                f"{player} threw {points} (round {s.current_round + 1}, "
                f"{s.throws_left} left)"
            )

            if s.throws_left <= 0:
                self._advance_turn()
        else:
            logger.debug(f"Off-turn score for {player}: {points:+d}")

        self.refresh()
        return ThrowRecord(snapshot=snapshot, player=player, points=points)

    def advance_turn_manually(self) -> bool:
        """
        End the active turn early; unused throws count as zero-point throws.

        Returns:
            True if the turn advanced, False when there are no participants
        """
        if len(self.table) == 0:
            return False

        s = self.state
        active = self.active_participant

        if active is not None and s.throws_left > 0:
            self.table.ensure_capacity(s.current_round + 1, s.current_round)
            entry = active.entry(s.current_round)
            entry.resolved = True
            active.round_score = entry.value

            s.throws_this_round += s.throws_left
            logger.debug(f"{active.name} skipped {s.throws_left} throw(s)")
            s.throws_left = 0

        self._advance_turn()
        self.refresh()
        return True

    def _advance_turn(self) -> None:
        """Move to the next participant and complete the round if due."""
        s = self.state
        count = len(self.table)
        if count == 0:
            return

        s.active_index = (s.active_index + 1) % count
        s.throws_left = self.throws_per_turn
        self.refresh()
        logger.debug(f"Next participant: {self.active_name}")

        if s.throws_this_round >= count * self.throws_per_turn:
            s.throws_this_round = 0
            s.current_round += 1
            self.ensure_capacity(s.current_round + 1)
            logger.info(f"Round {s.current_round + 1} started")
