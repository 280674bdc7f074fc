"""
Prize Wheel (PyQt6) - wheel_renderer.py
转盘各部件的绘制函数 — 外圈、内阴影、扇面、转轴、播放符号。

每个绘制函数自行 save()/restore()，画笔状态不会泄漏到下一个部件。
可点击的部件返回 InteractiveRegion，装饰性部件返回 None。
"""

import math
from functools import lru_cache

from PIL import ImageFilter, ImageQt
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import (
    QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen,
)

from core.constants import (
    COLOR_EDGE, COLOR_SHADOW, COLOR_PIECE_OUTLINE, COLOR_LABEL,
    COLOR_SHAFT_FILL, COLOR_SHAFT_BORDER, COLOR_PLAY_SIGN,
    PIECE_SATURATION, PIECE_LIGHTNESS,
    EDGE_RADIUS, EDGE_WIDTH,
    EDGE_SHADOW_RADIUS, EDGE_SHADOW_BLUR, EDGE_SHADOW_OFFSET,
    PIECE_RADIUS, PIECE_OUTLINE_WIDTH,
    LABEL_OFFSET_X, LABEL_MAX_WIDTH, LABEL_FONT_FAMILY, LABEL_FONT_PX,
    SHAFT_RADIUS, SHAFT_BORDER_WIDTH, PLAY_SIGN_SIDE,
)
from engine.hit_test import hit_shaft
from engine.layout import layout
from models.wheel_model import InteractiveRegion


def _pen(color, width) -> QPen:
    """canvas 风格画笔: 平头端点 + 尖角连接"""
    pen = QPen(QColor(color), width)
    pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
    return pen


def _circle_path(cx, cy, r) -> QPainterPath:
    path = QPainterPath()
    path.addEllipse(QPointF(cx, cy), r, r)
    return path


def piece_qcolor(piece) -> QColor:
    return QColor.fromHslF(piece.hue / 360, PIECE_SATURATION, PIECE_LIGHTNESS, 1.0)


# ── 外圈 ──

def draw_edge_line(ctx):
    painter = ctx.painter
    painter.save()
    painter.strokePath(
        _circle_path(ctx.center_x, ctx.center_y, EDGE_RADIUS),
        _pen(COLOR_EDGE, EDGE_WIDTH))
    painter.restore()


@lru_cache(maxsize=4)
def _shadow_layer(width, height, center_x, center_y) -> QImage:
    """内阴影图层 — 黑色细圆环偏移后高斯模糊

    与旋转角度无关，按表面几何缓存。
    canvas 的 shadowBlur 对应高斯 sigma = blur / 2。
    """
    layer = QImage(width, height, QImage.Format.Format_ARGB32_Premultiplied)
    layer.fill(Qt.GlobalColor.transparent)
    painter = QPainter(layer)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    dx, dy = EDGE_SHADOW_OFFSET
    painter.strokePath(
        _circle_path(center_x + dx, center_y + dy, EDGE_SHADOW_RADIUS),
        _pen(COLOR_SHADOW, 1))
    painter.end()

    blurred = ImageQt.fromqimage(layer).convert("RGBA").filter(
        ImageFilter.GaussianBlur(EDGE_SHADOW_BLUR / 2))
    return ImageQt.ImageQt(blurred)


def draw_edge_inner_shadow(ctx):
    painter = ctx.painter
    device = painter.device()
    shadow = _shadow_layer(
        device.width(), device.height(), ctx.center_x, ctx.center_y)
    painter.save()
    painter.drawImage(0, 0, shadow)
    painter.strokePath(
        _circle_path(ctx.center_x, ctx.center_y, EDGE_SHADOW_RADIUS),
        _pen(COLOR_EDGE, 1))
    painter.restore()


def draw_edge(ctx):
    """外圈 = 内阴影在下 + 白色圆环在上"""
    draw_edge_inner_shadow(ctx)
    draw_edge_line(ctx)


# ── 扇面 ──

def _label_font() -> QFont:
    font = QFont(LABEL_FONT_FAMILY)
    font.setPixelSize(LABEL_FONT_PX)
    return font


def draw_label(painter, label):
    """在当前局部坐标系 (LABEL_OFFSET_X, 0) 处绘制标签

    文字基线在 x 轴上；宽度超过 LABEL_MAX_WIDTH 时水平压缩字形。
    """
    font = _label_font()
    width = QFontMetricsF(font).horizontalAdvance(label)
    painter.setFont(font)
    painter.setPen(QColor(COLOR_LABEL))
    painter.translate(LABEL_OFFSET_X, 0)
    if width > LABEL_MAX_WIDTH:
        painter.scale(LABEL_MAX_WIDTH / width, 1.0)
    painter.drawText(QPointF(0, 0), label)


def draw_piece(ctx, piece):
    """单个扇面: 以原点为圆心、沿 x 轴对称的楔形，平移到中心后旋转 angle + rotation"""
    r = PIECE_RADIUS
    span = math.degrees(piece.arc_length)
    path = QPainterPath()
    path.moveTo(0, 0)
    path.arcTo(QRectF(-r, -r, r * 2, r * 2), -span / 2, span)
    path.closeSubpath()

    painter = ctx.painter
    painter.save()
    painter.translate(ctx.center_x, ctx.center_y)
    painter.rotate(math.degrees(piece.angle + ctx.rotation))
    painter.strokePath(path, _pen(COLOR_PIECE_OUTLINE, PIECE_OUTLINE_WIDTH))
    painter.fillPath(path, piece_qcolor(piece))
    draw_label(painter, piece.label)
    painter.restore()


def draw_pieces(ctx, entries):
    for piece in layout(entries):
        draw_piece(ctx, piece)


# ── 中心转轴 ──

def draw_shaft_body(ctx):
    path = _circle_path(ctx.center_x, ctx.center_y, SHAFT_RADIUS)
    painter = ctx.painter
    painter.save()
    painter.strokePath(path, _pen(COLOR_SHAFT_BORDER, SHAFT_BORDER_WIDTH))
    painter.fillPath(path, QColor(COLOR_SHAFT_FILL))
    painter.restore()


def draw_play_sign(ctx):
    """朝 +x 方向的三角形播放符号"""
    side = PLAY_SIGN_SIDE
    cx, cy = ctx.center_x, ctx.center_y
    path = QPainterPath()
    path.moveTo(cx - side / math.sqrt(3), cy - side)
    path.lineTo(cx + side * 2 / math.sqrt(3), cy)
    path.lineTo(cx - side / math.sqrt(3), cy + side)
    path.closeSubpath()

    painter = ctx.painter
    painter.save()
    painter.fillPath(path, QColor(COLOR_PLAY_SIGN))
    painter.restore()


def draw_shaft(ctx) -> InteractiveRegion:
    """转轴 = 圆形底座 + 播放符号；返回本帧的点击区域"""
    draw_shaft_body(ctx)
    draw_play_sign(ctx)

    cx, cy = ctx.center_x, ctx.center_y
    return InteractiveRegion(
        test_hit=lambda point: hit_shaft(point, cx, cy),
        on_hit=ctx.init_spin,
    )


# ── 整帧 ──

def draw_scene(ctx, entries) -> list:
    """按顺序绘制整帧，返回可点击区域

    顺序: 扇面 → 转轴 → 外圈（阴影在下、圆环在上），后画的覆盖先画的
    """
    ctx.painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    ctx.painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

    hooks = [
        draw_pieces(ctx, entries),
        draw_shaft(ctx),
        draw_edge(ctx),
    ]
    return [hook for hook in hooks if hook is not None]
