"""
Saved player roster and its YAML persistence.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import logging

import yaml

from darts_score.core import atomic_write_yaml, load_yaml

logger = logging.getLogger(__name__)


@dataclass
class PlayerEntry:
    """A saved player name and whether it is in the current game."""
    name: str
    in_game: bool = False


@dataclass
class Roster:
    """Known players plus a single selected name."""
    entries: List[PlayerEntry] = field(default_factory=list)
    selected: str = ""

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def find(self, name: str) -> Optional[PlayerEntry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def add(self, name: str, in_game: bool = False) -> Optional[PlayerEntry]:
        """
        Add a player by name.

        Args:
            name: Player name (surrounding whitespace is stripped)
            in_game: Initial in-game flag

        Returns:
            The new entry, or None for an empty or duplicate name
        """
        name = (name or "").strip()
        if not name or self.find(name) is not None:
            return None

        entry = PlayerEntry(name=name, in_game=in_game)
        self.entries.append(entry)
        return entry

    def remove(self, name: str) -> bool:
        entry = self.find(name)
        if entry is None:
            return False

        self.entries.remove(entry)
        if self.selected == name:
            self.selected = ""
        return True

    def select(self, name: Optional[str]) -> None:
        self.selected = name or ""

    def mark_in_game(self, name: str, in_game: bool) -> None:
        """Set the in-game flag, adding the name first if it is unknown."""
        entry = self.find(name)
        if entry is None:
            if in_game:
                self.add(name, in_game=True)
            return
        entry.in_game = in_game

    def to_dict(self) -> Dict[str, Any]:
        return {"players": self.names, "selected": self.selected}

    @classmethod
    def from_names(cls, names: List[str], selected: Optional[str] = None) -> "Roster":
        """Build a roster; ``selected`` is kept only if it names a player."""
        roster = cls()
        for name in names:
            roster.add(name)
        if selected and roster.find(selected) is not None:
            roster.selected = selected
        return roster


class RosterStore:
    """
    Reads and writes the roster as ``{players: [...], selected: name}``.

    Failures are logged and swallowed: a failed load gives an empty roster
    and a failed save leaves the session untouched.
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> Tuple[List[str], Optional[str]]:
        """
        Load roster names and the selected name.

        Returns:
            (names, selected); ([], None) when missing or unreadable
        """
        if not self.path.exists():
            logger.info(f"No roster at {self.path}, starting empty")
            return [], None

        try:
            data = load_yaml(self.path)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load roster from {self.path}: {e}")
            return [], None

        players = (data.get("players") or []) if isinstance(data, dict) else None
        if not isinstance(players, list):
            logger.warning(f"Ignoring malformed roster file {self.path}")
            return [], None

        names = [p for p in players if isinstance(p, str)]
        selected = data.get("selected")
        if not isinstance(selected, str):
            selected = None

        logger.info(f"Loaded {len(names)} player(s) from {self.path}")
        return names, selected

    def load_roster(self) -> Roster:
        names, selected = self.load()
        return Roster.from_names(names, selected)

    def save(self, roster: Roster) -> bool:
        """
        Write the roster.

        Returns:
            True on success, False if the write failed
        """
        try:
            atomic_write_yaml(self.path, roster.to_dict())
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to save roster to {self.path}: {e}")
            return False

        logger.debug(f"Saved {len(roster.entries)} player(s) to {self.path}")
        return True
