"""
Prize Wheel (PyQt6) - wheel_surface.py
离屏绘图表面 — 持有 QImage，每帧清屏后重绘整个转盘。
"""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPainter

from core.i18n import t
from models.wheel_model import FrameContext
from scene.wheel_renderer import draw_scene

logger = logging.getLogger(__name__)


class SurfaceUnavailableError(RuntimeError):
    """无法在绘图表面上获取 QPainter（启动时致命）"""


class WheelSurface:
    """转盘绘图表面

    render_frame() 作为 SpinDriver 的绘制回调:
    清屏 → 按 rotation 绘制整帧 → 返回本帧可点击区域。
    """

    def __init__(self, width: int, height: int, entries=()):
        self._image = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
        if self._image.isNull():
            raise SurfaceUnavailableError(
                t("app.surface_error", width=width, height=height))
        self._entries = list(entries)

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    @property
    def center(self) -> tuple:
        return self.width / 2, self.height / 2

    def begin(self) -> QPainter:
        """获取绘图上下文；失败抛出 SurfaceUnavailableError"""
        painter = QPainter()
        if not painter.begin(self._image):
            logger.critical(f"QPainter 初始化失败 ({self.width}x{self.height})")
            raise SurfaceUnavailableError(
                t("app.surface_error", width=self.width, height=self.height))
        return painter

    def clear(self):
        self._image.fill(Qt.GlobalColor.transparent)

    def render_frame(self, rotation: float, init_spin) -> list:
        self.clear()
        painter = self.begin()
        try:
            cx, cy = self.center
            ctx = FrameContext(
                painter=painter,
                center_x=cx,
                center_y=cy,
                rotation=rotation,
                init_spin=init_spin,
            )
            return draw_scene(ctx, self._entries)
        finally:
            painter.end()
