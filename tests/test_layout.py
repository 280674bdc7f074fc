"""
Prize Wheel - 扇面布局测试
"""

import math

import pytest

from engine.layout import layout, piece_hue
from models.wheel_model import Entry


def _entries(*labels):
    return [Entry(label=label) for label in labels]


def test_empty_entries():
    """没有条目 → 没有扇面"""
    assert layout([]) == []


@pytest.mark.parametrize("n", [1, 2, 3, 7, 12, 64])
def test_arcs_cover_full_circle(n):
    """扇面张角之和 = 2π，角度等距递增"""
    pieces = layout(_entries(*[str(i) for i in range(n)]))
    assert len(pieces) == n
    assert math.isclose(sum(p.arc_length for p in pieces), math.pi * 2)

    step = math.pi * 2 / n
    for i, piece in enumerate(pieces):
        assert math.isclose(piece.angle, i * step, abs_tol=1e-12)
        assert math.isclose(piece.arc_length, step)
    for prev, cur in zip(pieces, pieces[1:]):
        assert cur.angle > prev.angle


def test_four_entries():
    """A/B/C/D → 0, π/2, π, 3π/2；色相 0/90/180/270"""
    pieces = layout(_entries("A", "B", "C", "D"))

    assert [p.label for p in pieces] == ["A", "B", "C", "D"]
    for piece, angle, hue in zip(pieces, [0, 0.5, 1, 1.5], [0, 90, 180, 270]):
        assert math.isclose(piece.angle, angle * math.pi, abs_tol=1e-12)
        assert math.isclose(piece.arc_length, math.pi / 2)
        assert math.isclose(piece.hue, hue, abs_tol=1e-9)

    assert pieces[0].color == "hsla(0, 100%, 66%, 1)"
    assert pieces[2].color == "hsla(180, 100%, 66%, 1)"


def test_order_is_preserved():
    """条目顺序决定扇面位置"""
    forward = layout(_entries("x", "y", "z"))
    backward = layout(_entries("z", "y", "x"))
    assert [p.label for p in forward] == ["x", "y", "z"]
    assert forward[0].angle == backward[0].angle
    assert forward[0].label != backward[0].label


def test_layout_is_pure():
    entries = _entries("A", "B", "C")
    assert layout(entries) == layout(entries)
    assert entries == _entries("A", "B", "C")


def test_piece_hue():
    assert piece_hue(0) == 0
    assert math.isclose(piece_hue(math.pi), 180)
