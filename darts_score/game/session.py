"""
Scoring session: the object a front end creates and drives.
"""
from typing import Any, Callable, List, Optional
import logging
import threading

from darts_score.core import Config, ThrowRecord
from .ledger import ScoreLedger
from .participant import Participant, RoundHeader
from .round_table import RoundTable
from .roster import Roster, RosterStore
from .scheduler import TurnScheduler, TurnState
from .undo import UndoController

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], Any]


def timer_schedule(delay_sec: float, callback: Callable[[], None]) -> threading.Timer:
    """Run ``callback`` once after ``delay_sec`` on a daemon timer thread."""
    timer = threading.Timer(delay_sec, callback)
    timer.daemon = True
    timer.start()
    return timer


class GameSession:
    """
    Owns the roster, ledger, round table, scheduler and undo slot.

    All mutations run synchronously on the caller's thread. The only
    deferred work is clearing a participant's transient highlight, which
    goes through ``schedule(delay_sec, callback)``; GUI front ends pass
    their event loop's timer (e.g. ``lambda d, cb: root.after(int(d * 1000), cb)``).
    """

    def __init__(
            self,
            config: Optional[Config] = None,
            store: Optional[RosterStore] = None,
            schedule: Optional[Scheduler] = None
    ):
        """
        Initialize session.

        Args:
            config: Configuration (default: Config())
            store: Roster persistence; None keeps the roster in memory only
            schedule: Deferred-call hook for highlight clearing
        """
        self.config = config or Config()
        self.store = store
        self.schedule = schedule or timer_schedule
        self.highlight_delay = float(self.config.get("session", "highlight_clear_sec", 0.3))

        self.table = RoundTable()
        self.ledger = ScoreLedger(self.table)
        self.scheduler = TurnScheduler(
            self.table,
            self.ledger,
            TurnState(throws_per_turn=int(self.config.get("game", "throws_per_turn", 3))),
            initial_rounds=int(self.config.get("game", "initial_rounds", 1)),
        )
        self.undo_controller = UndoController(self.scheduler)

        self.roster = Roster()
        if self.store is not None:
            self.roster = self.store.load_roster()

        logger.info(f"Session started with {len(self.roster.entries)} saved player(s)")

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "GameSession":
        """Create a session persisting the roster at ``config.roster_path``."""
        return cls(config=config, store=RosterStore(config.roster_path), **kwargs)

    @property
    def participants(self) -> List[Participant]:
        return self.table.participants

    @property
    def round_headers(self) -> List[RoundHeader]:
        return self.table.headers

    @property
    def has_participants(self) -> bool:
        return len(self.table) > 0

    @property
    def active_participant_name(self) -> str:
        return self.scheduler.active_name

    @property
    def throws_left(self) -> int:
        return self.scheduler.state.throws_left

    @property
    def throws_per_turn(self) -> int:
        return self.scheduler.throws_per_turn

    @property
    def current_round_index(self) -> int:
        return self.scheduler.state.current_round

    @property
    def selected_player_score(self) -> int:
        return self.ledger.get(self.roster.selected)

    def player_score(self, name: str) -> int:
        return self.ledger.get(name)

    def add_player(self, name: str) -> bool:
        """Add a name to the saved roster."""
        if self.roster.add(name) is None:
            return False
        self._save_roster()
        return True

    def remove_player(self, name: str) -> bool:
        """Remove a name from the saved roster (participants are unaffected)."""
        if not self.roster.remove(name):
            return False
        self._save_roster()
        return True

    def select_player(self, name: Optional[str]) -> None:
        if self.roster.selected == (name or ""):
            return
        self.roster.select(name)
        self._save_roster()

    def load_roster(self, names: List[str], selected: Optional[str] = None) -> None:
        """Replace the roster with ``names`` and restore the selection."""
        self.roster = Roster.from_names(names, selected)
        for participant in self.participants:
            self.roster.mark_in_game(participant.name, True)
        self._save_roster()

    def _save_roster(self) -> None:
        if self.store is not None:
            self.store.save(self.roster)

    def add_participant(self, name: str) -> Optional[Participant]:
        """
        Add a player to the current game.

        Args:
            name: Player name

        Returns:
            The participant (existing one if already present), or None for
            an empty name
        """
        name = (name or "").strip()
        if not name:
            return None

        existing = self.table.find(name)
        if existing is not None:
            return existing

        participant = Participant(name=name, score=self.ledger.ensure(name))
        self.table.add(participant, self.current_round_index)
        self.scheduler.ensure_active_participant()
        self.scheduler.ensure_capacity(self.current_round_index + 1)

        known = self.roster.find(name) is not None
        self.roster.mark_in_game(name, True)
        if not known:
            self._save_roster()

        logger.info(f"Participant added: {name}")
        return participant

    def remove_participant(self, participant: Participant) -> bool:
        """
        Remove a participant from the current game.

        Returns:
            True if removed, False if not found
        """
        if participant is None:
            return False

        idx = self.table.remove(participant)
        if idx < 0:
            return False

        self.roster.mark_in_game(participant.name, False)
        self.scheduler.participant_removed(idx)

        logger.info(f"Participant removed: {participant.name}")
        return True

    def select_participant(self, participant: Participant) -> bool:
        """Make ``participant`` the active one and select it on the roster."""
        if not self.scheduler.select(participant):
            return False
        self.select_player(participant.name)
        return True

    def record_throw(self, player: str, points: int) -> Optional[ThrowRecord]:
        """
        Record a throw for ``player`` and remember it for undo.

        Returns:
            ThrowRecord, or None when nothing was recorded
        """
        record = self.scheduler.record_throw(player, points)
        if record is None:
            return None

        self.undo_controller.remember(record)
        self._flash_highlight(self.scheduler.active_participant)
        return record

    def throw(self, points: int) -> Optional[ThrowRecord]:
        """Record a throw for the active participant, else the selected player."""
        return self.record_throw(self.target_player(), points)

    def target_player(self) -> str:
        return self.active_participant_name or self.roster.selected

    def advance_turn(self) -> bool:
        return self.scheduler.advance_turn_manually()

    def undo(self, record: ThrowRecord) -> None:
        """Undo ``record`` explicitly (it should be the most recent throw)."""
        self.undo_controller.undo_record(record)
        if self.undo_controller.last is record:
            self.undo_controller.last = None

    def undo_last(self) -> bool:
        return self.undo_controller.undo_last()

    def _flash_highlight(self, participant: Optional[Participant]) -> None:
        if participant is None:
            return

        participant.is_highlighted = True

        def clear() -> None:
            participant.is_highlighted = False

        self.schedule(self.highlight_delay, clear)
