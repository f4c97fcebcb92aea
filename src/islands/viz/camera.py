"""
Camera for the 3D heightmap view.

The camera orbits around a point of the map plane:
- pan: drag moves the point (a fifth of the mouse motion)
- zoom: scroll moves the eye closer or further, never through the map
- rotate: ctrl+scroll tilts the view, 0° looks straight down

Scroll deltas are in wheel units, 120 per notch.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from islands.core.hexgrid import ROW_SPACING

WHEEL_NOTCH = 120
PAN_DIVISOR = 5.0
ZOOM_DIVISOR = 6.0
ROTATE_DIVISOR = 30.0


@dataclass
class Camera:
    """Orbit/zoom/pan state."""

    x: float  # Point looked at, map X
    y: float  # Point looked at, map Y
    zoom: float = 100.0  # Distance from eye to the point
    rotation: float = 0.0  # Tilt in degrees, in [0, 360]

    @classmethod
    def for_grid(cls, width: int, height: int) -> Camera:
        """Camera centred on a width x height heightmap."""
        return cls(x=width / 2.0, y=-ROW_SPACING * height / 2.0)

    def pan(self, dx: float, dy: float) -> None:
        """Move the view by a mouse drag of (dx, dy) pixels."""
        self.x -= dx / PAN_DIVISOR
        self.y += dy / PAN_DIVISOR

    def scroll(self, delta: float, rotate: bool = False) -> None:
        """Zoom (or rotate, with rotate=True) by a wheel delta."""
        if rotate:
            self.rotation += delta / ROTATE_DIVISOR
            while self.rotation < 0:
                self.rotation += 360
            while self.rotation > 360:
                self.rotation -= 360
        else:
            zoom = self.zoom - delta / ZOOM_DIVISOR
            if zoom > 0:
                self.zoom = zoom

    @property
    def elevation(self) -> float:
        """Elevation angle of the eye above the map plane, in degrees."""
        return 90.0 - self.rotation

    def look_at(self) -> tuple[tuple[float, float, float], ...]:
        """
        Eye position, target and up vector.

        Returns:
            (eye, center, up)
        """
        angle = math.radians(self.rotation)
        eye = (
            self.x,
            self.y + self.zoom * math.sin(angle),
            self.zoom * math.cos(angle),
        )
        center = (self.x, self.y, 0.0)
        up = (0.0, math.cos(angle), -math.sin(angle))
        return eye, center, up

    def limits(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """Visible map window ((xmin, xmax), (ymin, ymax)) at this zoom."""
        half = self.zoom / 2.0
        return (self.x - half, self.x + half), (self.y - half, self.y + half)
