"""
QPainter drawing of the house scene, on screen or into an offscreen image.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QPolygon

from ..core import HouseScene, RGB


@dataclass(frozen=True)
class RenderConfig:
    """
    Window and canvas settings.
    """

    title: str = "House Applet"
    width: int = 500
    height: int = 500
    background_color: str = "#ffffff"

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Canvas width and height must be positive.")


def _color(rgb: RGB) -> QColor:
    return QColor(*rgb)


class Renderer:
    """
    Paints the background, house body, roof and door in that order.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def draw_frame(self, surface: Any, scene: HouseScene) -> None:
        """
        Render a single frame of ``scene`` onto ``surface`` (an active QPainter).
        """

        geometry = scene.geometry

        surface.fillRect(
            0, 0, self.config.width, self.config.height, QColor(self.config.background_color)
        )
        surface.fillRect(*geometry.body, _color(geometry.body_color))

        roof = QPolygon([QPoint(x, y) for x, y in geometry.roof])
        surface.setPen(Qt.PenStyle.NoPen)
        surface.setBrush(_color(geometry.roof_color))
        surface.drawPolygon(roof)

        surface.fillRect(*geometry.door, _color(scene.door_color))

    def snapshot(self, scene: HouseScene) -> np.ndarray:
        """
        Paint one frame offscreen and return it as an (height, width, 3) uint8 array.
        """

        width, height = self.config.width, self.config.height
        image = QImage(width, height, QImage.Format.Format_RGB32)
        painter = QPainter(image)
        try:
            self.draw_frame(painter, scene)
        finally:
            painter.end()

        image = image.convertToFormat(QImage.Format.Format_RGB888)
        stride = image.bytesPerLine()
        raw = image.constBits().asstring(image.sizeInBytes())
        pixels = np.frombuffer(raw, dtype=np.uint8).reshape(height, stride)
        return pixels[:, : width * 3].reshape(height, width, 3).copy()


def snapshot(scene: HouseScene, config: RenderConfig | None = None) -> np.ndarray:
    return Renderer(config).snapshot(scene)
