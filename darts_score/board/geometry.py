"""
Dartboard geometry calculations and sector mapping.
"""
from dataclasses import fields
import numpy as np
from typing import Any, Dict, Tuple, Optional
import logging

from darts_score.core import BoardGeometry, BoardHit

logger = logging.getLogger(__name__)


def build_board_geometry(settings: Optional[Dict[str, Any]] = None) -> BoardGeometry:
    """
    Build BoardGeometry from a config section.

    Unknown keys are ignored so older code can read newer config files.
    Invalid ring layouts fall back to the default board.

    Args:
        settings: Raw "board" section (e.g. Config.get_section("board"))

    Returns:
        Populated BoardGeometry
    """
    known = {f.name for f in fields(BoardGeometry)}
    overrides = {}
    for key, value in (settings or {}).items():
        if key in known:
            overrides[key] = value
        else:
            logger.debug(f"Ignoring unknown board key: {key}")

    try:
        return BoardGeometry(**overrides)
    except (TypeError, ValueError) as exc:
        logger.warning(f"Invalid board geometry {overrides}: {exc}, using defaults")
        return BoardGeometry()


class DartboardMapper:
    """
    Maps canvas coordinates to dartboard sectors and points.

    The board is drawn centered in the canvas with a radius of half the
    shorter canvas side; ring boundaries are fractions of that radius.
    """

    def __init__(
            self,
            canvas_size: Tuple[float, float] = (360.0, 360.0),
            board_geometry: Optional[BoardGeometry] = None
    ):
        """
        Initialize dartboard mapper.

        Args:
            canvas_size: Canvas (width, height) in pixels
            board_geometry: Ring layout (default: BoardGeometry())

        Raises:
            ValueError: If the canvas has a non-positive side
        """
        self.geometry = board_geometry or BoardGeometry()
        self.resize(canvas_size)

    def resize(self, canvas_size: Tuple[float, float]) -> None:
        """Recompute center and radius for a new canvas size."""
        width, height = canvas_size
        if width <= 0 or height <= 0:
            raise ValueError("Canvas dimensions must be positive")

        self.center = (width / 2.0, height / 2.0)
        self.radius_px = min(width, height) / 2.0
        logger.debug(f"Board mapped: center={self.center}, radius={self.radius_px:.1f}px")

    def pixel_to_polar(self, x: float, y: float) -> Tuple[float, float]:
        """
        Convert canvas coordinates to board polar coordinates.

        Args:
            x: X coordinate in pixels
            y: Y coordinate in pixels (grows downward)

        Returns:
            (radius, angle) where:
                - radius: Distance from center as a fraction of board radius
                - angle: Angle in degrees (0° = top, clockwise)
        """
        dx = x - self.center[0]
        dy = y - self.center[1]

        radius = float(np.hypot(dx, dy)) / self.radius_px

        # Screen y grows downward, so atan2(dx, -dy) is clockwise from top
        angle = float(np.degrees(np.arctan2(dx, -dy))) % 360.0

        return radius, angle

    def angle_to_sector(self, angle: float) -> int:
        """
        Convert angle to sector number.

        Args:
            angle: Angle in degrees (0° = top, clockwise)

        Returns:
            Sector number (1-20)
        """
        # Sector 20 is centered at 0° (top), spanning [-9°, 9°)
        adjusted_angle = (angle + self.geometry.sector_angle / 2) % 360
        sector_idx = int(adjusted_angle / self.geometry.sector_angle)
        return self.geometry.sector_sequence[sector_idx % len(self.geometry.sector_sequence)]

    def radius_to_ring(self, radius: float) -> Tuple[str, int]:
        """
        Convert normalized radius to ring type and multiplier.

        Args:
            radius: Distance from center as a fraction of board radius

        Returns:
            (ring_name, multiplier) where:
                - ring_name: "double_bull", "single_bull", "triple", "double", "single", "miss"
                - multiplier: 50, 25, 3, 2, 1, 0
        """
        g = self.geometry

        if radius <= g.inner_bull:
            return "double_bull", 50
        elif radius <= g.outer_bull:
            return "single_bull", 25
        elif g.triple_inner <= radius <= g.triple_outer:
            return "triple", 3
        elif g.double_inner <= radius <= g.double_outer:
            return "double", 2
        elif radius <= g.board_edge:
            return "single", 1
        else:
            return "miss", 0

    def pixel_to_score(self, x: float, y: float) -> BoardHit:
        """
        Convert canvas coordinates to a scored hit.

        Args:
            x: X coordinate in pixels
            y: Y coordinate in pixels

        Returns:
            BoardHit with ring, sector, multiplier and points
        """
        radius, angle = self.pixel_to_polar(x, y)
        ring, multiplier = self.radius_to_ring(radius)

        if multiplier in (50, 25):
            sector = None
            points = multiplier
        elif multiplier == 0:
            sector = None
            points = 0
        else:
            sector = self.angle_to_sector(angle)
            points = sector * multiplier

        hit = BoardHit(
            x_px=x,
            y_px=y,
            radius=radius,
            angle=angle,
            ring=ring,
            sector=sector,
            multiplier=multiplier,
            points=points,
        )

        logger.debug(
            f"Score: ({x:.1f}, {y:.1f}) → r={radius:.3f}, θ={angle:.1f}° → "
            f"{hit.label} = {points}"
        )

        return hit

    def is_on_board(self, x: float, y: float) -> bool:
        """Check if coordinates fall inside the board edge."""
        radius, _ = self.pixel_to_polar(x, y)
        return radius <= self.geometry.board_edge

    def get_ring_boundaries(self) -> dict:
        """
        Get all ring boundaries in pixels.

        Returns:
            Dictionary with ring names and radii
        """
        g = self.geometry
        return {
            "inner_bull": g.inner_bull * self.radius_px,
            "outer_bull": g.outer_bull * self.radius_px,
            "triple_inner": g.triple_inner * self.radius_px,
            "triple_outer": g.triple_outer * self.radius_px,
            "double_inner": g.double_inner * self.radius_px,
            "double_outer": g.double_outer * self.radius_px,
        }
