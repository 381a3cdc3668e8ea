import pytest
from PyQt6.QtCore import QPoint, Qt
from PyQt6.QtTest import QTest

from housedoor.core import DoorState
from housedoor.ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    win = MainWindow()
    win.show()
    yield win
    win.close()


def _click(window, pos=QPoint(250, 250), button=Qt.MouseButton.LeftButton):
    QTest.mouseClick(window.scene_widget, button, Qt.KeyboardModifier.NoModifier, pos)
    QTest.qWait(0)


def test_window_title_and_size(window) -> None:
    assert window.windowTitle() == "House Applet"
    assert window.width() == 500
    assert window.height() == 500
    assert window.door is DoorState.BLUE


def test_click_toggles_door(window) -> None:
    _click(window)
    assert window.door is DoorState.RED
    _click(window)
    assert window.door is DoorState.BLUE
    assert window.scene.clicks == 2


def test_click_position_and_button_ignored(window) -> None:
    _click(window, pos=QPoint(5, 5))
    _click(window, pos=QPoint(480, 20), button=Qt.MouseButton.RightButton)
    _click(window, pos=QPoint(200, 310))
    assert window.door is DoorState.RED


def test_click_emits_signal(window) -> None:
    received = []
    window.scene_widget.doorToggled.connect(received.append)
    _click(window)
    _click(window)
    assert received == ["RED", "BLUE"]


def test_widget_repaints_with_new_door(window) -> None:
    _click(window)
    image = window.scene_widget.grab().toImage()
    color = image.pixelColor(200, 310)
    assert (color.red(), color.green(), color.blue()) == DoorState.RED.rgb
