"""
House scene state: the two-valued door color and the fixed house geometry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
Point = Tuple[int, int]
Rect = Tuple[int, int, int, int]  # (x, y, width, height)


class DoorState(Enum):
    """
    Fill color of the door. Only these two values exist.
    """

    BLUE = (0, 0, 255)
    RED = (255, 0, 0)

    @property
    def rgb(self) -> RGB:
        return self.value

    def toggled(self) -> "DoorState":
        return DoorState.RED if self is DoorState.BLUE else DoorState.BLUE


@dataclass(frozen=True)
class HouseGeometry:
    """
    Fixed coordinates and colors of the house silhouette, in window pixels.
    """

    body: Rect = (100, 200, 200, 150)
    body_color: RGB = (255, 255, 0)  # yellow
    roof: Tuple[Point, Point, Point] = ((100, 200), (200, 100), (300, 200))
    roof_color: RGB = (255, 0, 0)  # red
    door: Rect = (170, 270, 60, 80)


@dataclass
class HouseScene:
    """
    Mutable scene owned by the window. The click handler is the only writer.
    """

    door: DoorState = DoorState.BLUE
    clicks: int = 0
    geometry: HouseGeometry = field(default_factory=HouseGeometry)

    @property
    def door_color(self) -> RGB:
        return self.door.rgb

    def toggle_door(self) -> DoorState:
        previous = self.door
        self.door = previous.toggled()
        self.clicks += 1
        logger.debug(
            "Door toggled %s -> %s (click %d)", previous.name, self.door.name, self.clicks
        )
        return self.door
