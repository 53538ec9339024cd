"""
Derived view flags projected from canonical turn/round state.
"""
from typing import TYPE_CHECKING

from .participant import RoundScoreEntry

if TYPE_CHECKING:
    from .round_table import RoundTable
    from .scheduler import TurnState


def is_future_entry(entry: RoundScoreEntry, current_round: int) -> bool:
    """
    A cell is future unless its round is behind the current one, or it is
    the current round's cell and holds points or was resolved.
    """
    if entry.index < current_round:
        return False
    if entry.index == current_round and (entry.value > 0 or entry.resolved):
        return False
    return True


def project_flags(table: "RoundTable", state: "TurnState") -> None:
    """
    Recompute every derived flag in ``table`` from ``state``.

    Headers get ``is_current``/``is_past``; participants get ``is_active``;
    entries get ``is_current``, ``is_future`` and ``is_active_cell``.
    Cumulative totals are refreshed as well so they never go stale.
    """
    current = state.current_round

    for idx, header in enumerate(table.headers):
        header.is_current = idx == current
        header.is_past = idx < current

    for p_idx, participant in enumerate(table.participants):
        active = p_idx == state.active_index
        participant.is_active = active

        for entry in participant.round_scores:
            entry.is_current = entry.index == current
            entry.is_future = is_future_entry(entry, current)
            entry.is_active_cell = active and entry.index == current

        table.refresh_totals(participant)
