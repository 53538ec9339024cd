"""
Core module - shared data types, utilities, and configuration.
"""
from .types import (
    TurnSnapshot,
    ThrowRecord,
    BoardGeometry,
    BoardHit,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config

__all__ = [
    # Types
    "TurnSnapshot",
    "ThrowRecord",
    "BoardGeometry",
    "BoardHit",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
]
