"""
Prize Wheel (PyQt6) - wheel_window.py
转盘主窗口 — 把绘图表面、旋转驱动、点击控制器组装在一起。
"""

import logging
import random

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPoint
from PyQt6.QtGui import QColor, QPainter

from core.constants import APP_VERSION, COLOR_BG, get_app_title
from engine.interaction_controller import HitRegions, InteractionController
from engine.spin_driver import QtFrameScheduler, SpinDriver
from scene.wheel_surface import WheelSurface

logger = logging.getLogger(__name__)


class WheelWindow(QWidget):
    """转盘窗口

    paintEvent 只负责把离屏表面贴到窗口上；
    真正的重绘由 SpinDriver 每帧调用 WheelSurface.render_frame。
    """

    def __init__(self, entries=(), surface_size=900, frame_interval=16,
                 rng=None, scheduler=None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"{get_app_title()} v{APP_VERSION}")
        self.setFixedSize(surface_size, surface_size)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        # SurfaceUnavailableError 直接抛给调用方
        self._surface = WheelSurface(surface_size, surface_size, entries)
        self._regions = HitRegions()
        self._controller = InteractionController(self._regions)
        self._pressed = False
        self._driver = SpinDriver(
            self._surface.render_frame,
            self._regions,
            scheduler=scheduler or QtFrameScheduler(frame_interval),
            rng=rng or random.Random(),
        )
        self._driver.frame_rendered.connect(lambda _r: self.update())

        self._driver.present(0.0)
        logger.info(f"转盘窗口就绪: {len(entries)} 个扇面, {surface_size}px")

    @property
    def driver(self) -> SpinDriver:
        return self._driver

    @property
    def surface(self) -> WheelSurface:
        return self._surface

    @property
    def controller(self) -> InteractionController:
        return self._controller

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(COLOR_BG))
        painter.drawImage(0, 0, self._surface.image)
        painter.end()

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return
        self._pressed = True
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton or not self._pressed:
            super().mouseReleaseEvent(event)
            return
        self._pressed = False
        # 按下后拖出窗口再松开不算点击
        if not self.rect().contains(event.position().toPoint()):
            event.accept()
            return
        # 屏幕坐标 - 表面左上角屏幕坐标 = 表面局部坐标
        pos = event.globalPosition()
        origin = self.mapToGlobal(QPoint(0, 0))
        self._controller.handle_click(pos.x(), pos.y(), origin.x(), origin.y())
        event.accept()

    def closeEvent(self, event):
        self._driver.cancel()
        super().closeEvent(event)
