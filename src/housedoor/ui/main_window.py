"""
PyQt6 window hosting the clickable house scene.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import QMainWindow, QWidget

from ..core import DoorState, HouseScene
from ..graphics.renderer import RenderConfig, Renderer

logger = logging.getLogger(__name__)


class SceneWidget(QWidget):
    """
    Drawable surface: repaints the scene and toggles the door on any click.
    """

    doorToggled = pyqtSignal(str)

    def __init__(
        self,
        scene: HouseScene,
        renderer: Renderer,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.scene = scene
        self.renderer = renderer

    # -- Qt event overrides ----------------------------------------------
    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.renderer.draw_frame(painter, self.scene)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self._on_click(event)

    # -- Event handlers --------------------------------------------------
    def _on_click(self, event: Optional[QMouseEvent] = None) -> DoorState:
        # Click position and button are irrelevant.
        state = self.scene.toggle_door()
        self.doorToggled.emit(state.name)
        self.update()
        return state


class MainWindow(QMainWindow):
    """
    Fixed-size top-level window owning a single house scene.
    """

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        super().__init__()
        self.config = config or RenderConfig()
        self.setWindowTitle(self.config.title)

        self.scene = HouseScene()
        self.renderer = Renderer(self.config)
        self.scene_widget = SceneWidget(self.scene, self.renderer, self)
        self.setCentralWidget(self.scene_widget)
        self.setFixedSize(self.config.width, self.config.height)

        logger.info(
            "Window %r ready (%dx%d), door %s",
            self.config.title,
            self.config.width,
            self.config.height,
            self.scene.door.name,
        )

    @property
    def door(self) -> DoorState:
        """
        Current door state (useful for debugging/tests).
        """

        return self.scene.door
