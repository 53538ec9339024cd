"""
Core data types for the darts score keeper.
Defines contracts between modules to ensure stable interfaces.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class TurnSnapshot:
    """
    Scalar scheduler state captured before a throw is recorded.
    """
    active_index: int  # Active participant index (-1 = none)
    throws_left: int  # Throws remaining in the active turn
    round_index: int  # Current round (0-based)
    throws_this_round: int  # Throws counted toward completing the round


@dataclass(frozen=True)
class ThrowRecord:
    """
    Everything needed to undo one recorded throw.
    """
    snapshot: TurnSnapshot
    player: str
    points: int


@dataclass
class BoardGeometry:
    """
    Dartboard ring layout as fractions of the drawn board radius.
    """
    inner_bull: float = 0.06  # Double bull (50 points)
    outer_bull: float = 0.12  # Single bull (25 points)
    triple_inner: float = 0.48  # Inner edge of triple ring
    triple_outer: float = 0.55  # Outer edge of triple ring
    double_inner: float = 0.88  # Inner edge of double ring
    double_outer: float = 0.99  # Outer edge of double ring
    board_edge: float = 1.0  # Anything further out is a miss

    # Sector configuration
    sector_angle: float = 18.0  # Degrees per sector
    sector_sequence: Tuple[int, ...] = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                                        3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

    def __post_init__(self):
        radii = (self.inner_bull, self.outer_bull, self.triple_inner,
                 self.triple_outer, self.double_inner, self.double_outer)
        if any(r <= 0 for r in radii) or list(radii) != sorted(radii):
            raise ValueError("Ring fractions must be positive and increasing")


@dataclass
class BoardHit:
    """
    Result of hit-testing a point on the board.
    """
    x_px: float
    y_px: float
    radius: float  # Distance from center (fraction of board radius)
    angle: float  # Degrees, 0° = top, clockwise

    ring: str  # "double_bull", "single_bull", "triple", "double", "single", "miss"
    sector: Optional[int] = None  # Number hit (1-20), None for bulls and misses
    multiplier: int = 0
    points: int = 0

    @property
    def label(self) -> str:
        """Short human-readable description of the hit."""
        if self.ring == "double_bull":
            return "Bull (50)"
        if self.ring == "single_bull":
            return "Bull (25)"
        if self.ring == "miss" or self.sector is None:
            return "Miss"
        if self.multiplier > 1:
            return f"{self.sector} x{self.multiplier}"
        return str(self.sector)
