"""
Prize Wheel (PyQt6) - spin_driver.py
旋转驱动 — 管理一次旋转的逐帧推进、衰减和停止。

旧版: spin() 递归调度自身，重复点击会叠出多条动画链
新版: 状态机 + 代际令牌，新一次旋转使之前的链失效
"""

import logging
import random
from enum import Enum

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from core.constants import (
    FRAME_INTERVAL, SPIN_BASE_DELTA, SPIN_DECAY, SPIN_STOP_THRESHOLD,
)
from models.wheel_model import SpinState

logger = logging.getLogger(__name__)


class SpinPhase(Enum):
    IDLE = 'idle'
    SPINNING = 'spinning'


class QtFrameScheduler:
    """下一帧回调: QTimer 单次触发，间隔 ~16ms"""

    def __init__(self, interval_ms: int = FRAME_INTERVAL):
        self._interval = interval_ms

    def __call__(self, callback):
        QTimer.singleShot(self._interval, callback)


class SpinDriver(QObject):
    """旋转状态机

    状态转换:
      IDLE → SPINNING (start_spin)
      SPINNING → IDLE (增量 < 0.005 或 cancel)
      SPINNING → SPINNING (再次 start_spin，旧链作废)

    render_frame(rotation, init_spin) 负责清屏 + 绘制整帧，返回该帧的可点击区域；
    区域由本类写入 HitRegions，别处只读。
    """

    # 信号
    spin_started = pyqtSignal(float)      # decay_rate
    frame_rendered = pyqtSignal(float)    # rotation
    spin_finished = pyqtSignal(float)     # 最终停止角度
    phase_changed = pyqtSignal(str)

    def __init__(self, render_frame, regions, scheduler=None, rng=None):
        super().__init__()
        self._render_frame = render_frame
        self._regions = regions
        self._schedule = scheduler or QtFrameScheduler()
        self._rng = rng or random.Random()

        self._phase = SpinPhase.IDLE
        self._token = 0
        self._state = None
        self._rotation = 0.0  # 最近一次绘制的角度

    @property
    def phase(self) -> SpinPhase:
        return self._phase

    @property
    def is_spinning(self) -> bool:
        return self._phase == SpinPhase.SPINNING

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def state(self):
        """当前旋转的 SpinState；空闲时为 None"""
        return self._state

    def present(self, rotation: float = 0.0):
        """绘制一帧静止画面并发布其可点击区域"""
        self._draw(rotation)

    def start_spin(self, rotation: float = 0.0):
        """从 rotation 开始一次新旋转；进行中的旋转立即作废"""
        if self._phase == SpinPhase.SPINNING:
            logger.info(f"旋转进行中被新的旋转取代 (第 {self._state.ticks} 帧)")

        self._token += 1
        decay_rate = SPIN_BASE_DELTA + self._rng.random()
        self._state = SpinState(current_rotation=rotation, decay_rate=decay_rate)
        self._set_phase(SpinPhase.SPINNING)
        logger.info(f"开始旋转: rotation={rotation:.3f}, decay_rate={decay_rate:.3f}")
        self.spin_started.emit(decay_rate)

        # 首帧同步绘制
        self._tick(self._token, rotation, decay_rate)

    def cancel(self):
        """立即停止当前旋转，不再重绘"""
        if self._phase != SpinPhase.SPINNING:
            return
        self._token += 1
        logger.info(f"旋转已取消 (第 {self._state.ticks} 帧)")
        self._state = None
        self._set_phase(SpinPhase.IDLE)

    # ── 内部 ──

    def _tick(self, token, rotation, delta):
        if token != self._token:
            return  # 旧链的残留回调

        if delta < SPIN_STOP_THRESHOLD:
            ticks = self._state.ticks
            self._state = None
            self._set_phase(SpinPhase.IDLE)
            logger.info(f"旋转停止: rotation={self._rotation:.3f}, 共 {ticks} 帧")
            self.spin_finished.emit(self._rotation)
            return

        self._state.current_rotation = rotation
        self._state.decay_rate = delta
        self._state.ticks += 1
        self._draw(rotation)
        self._schedule(
            lambda: self._tick(token, rotation + delta, delta * SPIN_DECAY))

    def _draw(self, rotation):
        def init_spin():
            self.start_spin(rotation)

        regions = self._render_frame(rotation, init_spin)
        self._regions.replace(regions)
        self._rotation = rotation
        self.frame_rendered.emit(rotation)

    def _set_phase(self, phase: SpinPhase):
        if self._phase != phase:
            self._phase = phase
            self.phase_changed.emit(phase.value)
