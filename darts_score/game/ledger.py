"""
Lifetime aggregate scores per player name.
"""
from typing import Dict, Optional, TYPE_CHECKING
import logging

if TYPE_CHECKING:
    from .round_table import RoundTable

logger = logging.getLogger(__name__)


class ScoreLedger:
    """
    Name -> aggregate score store with a floor of zero.

    When a round table is attached, participants present in it get their
    ``score`` and ``round_score`` mirrors updated alongside the ledger.
    """

    def __init__(self, round_table: Optional["RoundTable"] = None):
        self._scores: Dict[str, int] = {}
        self.round_table = round_table

    def get(self, player: str) -> int:
        """Aggregate score for ``player`` (0 if unknown)."""
        if not player:
            return 0
        return self._scores.get(player, 0)

    def ensure(self, player: str) -> int:
        """Create a zero entry for an unseen player and return the score."""
        if player and player not in self._scores:
            self._scores[player] = 0
        return self.get(player)

    def adjust(self, player: str, delta: int) -> int:
        """
        Add a signed delta to the player's aggregate.

        Args:
            player: Player name (empty names are ignored)
            delta: Points to add, may be negative

        Returns:
            New aggregate score
        """
        if not player:
            return 0

        total = max(0, self._scores.get(player, 0) + delta)
        self._scores[player] = total

        participant = self.round_table.find(player) if self.round_table else None
        if participant is not None:
            participant.score = total
            participant.round_score = max(0, participant.round_score + delta)

        logger.debug(f"Ledger: {player} {delta:+d} → {total}")
        return total

    def __contains__(self, player: str) -> bool:
        return player in self._scores

    def as_dict(self) -> Dict[str, int]:
        return dict(self._scores)
