"""
Board module - dartboard geometry and hit scoring.
"""
from .geometry import DartboardMapper, build_board_geometry

__all__ = [
    "DartboardMapper",
    "build_board_geometry",
]
