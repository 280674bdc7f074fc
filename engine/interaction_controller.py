"""
Prize Wheel (PyQt6) - interaction_controller.py
点击 → 命中测试 → 回调。

可点击区域列表每帧由 SpinDriver 整体替换（不合并），
控制器只读最新一帧的区域。
"""

import logging

from models.wheel_model import Point

logger = logging.getLogger(__name__)


class HitRegions:
    """当前帧可点击区域。只有 SpinDriver 写入，其他组件只读"""

    def __init__(self):
        self._regions = ()

    def replace(self, regions):
        """整体替换为新一帧的区域，旧区域立即失效"""
        self._regions = tuple(regions)

    def snapshot(self) -> tuple:
        return self._regions

    def __len__(self):
        return len(self._regions)


class InteractionController:
    """点击控制器

    窗口坐标 → 表面局部坐标（减去表面左上角的屏幕偏移），
    再逐个测试最新一帧的区域；所有命中区域的 on_hit 都会被调用。
    """

    def __init__(self, regions: HitRegions):
        self._regions = regions

    @staticmethod
    def to_local(window_x, window_y, origin_x, origin_y) -> Point:
        return Point(window_x - origin_x, window_y - origin_y)

    def handle_click(self, window_x, window_y, origin_x=0.0, origin_y=0.0) -> int:
        """处理一次点击，返回命中的区域数"""
        point = self.to_local(window_x, window_y, origin_x, origin_y)
        # 先取快照: on_hit 可能同步重绘并替换区域列表
        regions = self._regions.snapshot()
        hits = 0
        for region in regions:
            if region.test_hit(point):
                hits += 1
                region.on_hit()
        if hits:
            logger.debug(f"点击 ({point.x:.1f}, {point.y:.1f}) 命中 {hits} 个区域")
        return hits
