"""
Prize Wheel (PyQt6) - layout.py
条目 → 扇面参数。纯函数，每帧重新计算。
"""

import math

from models.wheel_model import PieceParams


def piece_hue(angle: float) -> float:
    """扇面颜色色相（度）= 扇面角度"""
    return angle / math.pi * 180


def layout(entries) -> list:
    """按顺序把条目均分到整圆上

    第 i 个扇面: angle = i/n·2π, arc_length = 2π/n
    没有条目时返回空列表（转盘只画外圈和转轴）
    """
    total = len(entries)
    if total == 0:
        return []

    arc_length = math.pi * 2 / total
    pieces = []
    for index, entry in enumerate(entries):
        angle = index / total * math.pi * 2
        pieces.append(PieceParams(
            label=entry.label,
            angle=angle,
            arc_length=arc_length,
            hue=piece_hue(angle),
        ))
    return pieces
