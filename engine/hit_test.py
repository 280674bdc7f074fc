"""
Prize Wheel (PyQt6) - hit_test.py
中心转轴命中测试。扇面与外圈仅作装饰，不参与点击。
"""

from core.constants import SHAFT_RADIUS
from models.wheel_model import Point


def hit_shaft(point: Point, center_x: float, center_y: float) -> bool:
    """点到中心的距离严格小于转轴半径即命中（边界上不算）"""
    dx = point.x - center_x
    dy = point.y - center_y
    return dx * dx + dy * dy < SHAFT_RADIUS ** 2
