"""
Game module - score ledger, round table, turn scheduling, undo and roster.
"""
from .participant import Participant, RoundScoreEntry, RoundHeader
from .ledger import ScoreLedger
from .round_table import RoundTable
from .flags import project_flags
from .scheduler import TurnScheduler, TurnState, THROWS_PER_TURN
from .undo import UndoController
from .roster import PlayerEntry, Roster, RosterStore
from .session import GameSession

__all__ = [
    "Participant",
    "RoundScoreEntry",
    "RoundHeader",
    "ScoreLedger",
    "RoundTable",
    "project_flags",
    "TurnScheduler",
    "TurnState",
    "THROWS_PER_TURN",
    "UndoController",
    "PlayerEntry",
    "Roster",
    "RosterStore",
    "GameSession",
]
