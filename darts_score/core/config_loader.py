"""
Configuration loader with defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from .io_utils import load_yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration container with defaults for a scoring session.
    """

    DEFAULTS = {
        "game": {
            "throws_per_turn": 3,
            "initial_rounds": 1,  # Round columns shown before the first throw
        },

        "session": {
            "highlight_clear_sec": 0.3,
        },

        "storage": {
            "roster_path": "~/.darts_score/players.yaml",
        },

        # Ring radii as fractions of the drawn board radius
        "board": {
            "inner_bull": 0.06,
            "outer_bull": 0.12,
            "triple_inner": 0.48,
            "triple_outer": 0.55,
            "double_inner": 0.88,
            "double_outer": 0.99,
            "board_edge": 1.0,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except Exception as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        if not isinstance(user_config, dict):
            logger.warning("Config file is not a mapping, using defaults")
            return

        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            elif section in self.data:
                logger.warning(f"Ignoring non-mapping config section: {section}")
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        section_data = self.data.get(section)
        if not isinstance(section_data, dict):
            return default
        return section_data.get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        section_data = self.data.get(section)
        return section_data if isinstance(section_data, dict) else {}

    @property
    def roster_path(self) -> Path:
        """Roster file location with ``~`` expanded."""
        path = self.get("storage", "roster_path") or self.DEFAULTS["storage"]["roster_path"]
        return Path(path).expanduser()
