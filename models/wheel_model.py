"""
Prize Wheel (PyQt6) - wheel_model.py
转盘条目、扇面参数、可点击区域等数据模型。
"""

from dataclasses import dataclass, asdict
from typing import Callable


@dataclass(frozen=True)
class Entry:
    """外部传入的转盘条目，顺序决定扇面位置"""
    label: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> 'Entry':
        valid = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in d.items() if k in valid})


@dataclass(frozen=True)
class PieceParams:
    """单个扇面的布局参数（未叠加旋转）"""
    label: str
    angle: float        # 弧度，扇面中线位置
    arc_length: float   # 弧度，扇面张角
    hue: float          # 度，= angle 换算为角度

    @property
    def color(self) -> str:
        return f"hsla({self.hue:g}, 100%, 66%, 1)"


@dataclass(frozen=True)
class Point:
    """绘图表面局部坐标"""
    x: float
    y: float


@dataclass(frozen=True)
class InteractiveRegion:
    """可点击区域: 命中测试谓词 + 命中回调"""
    test_hit: Callable[[Point], bool]
    on_hit: Callable[[], None]


@dataclass
class SpinState:
    """一次旋转过程的瞬时状态，仅由 SpinDriver 持有"""
    current_rotation: float = 0.0
    decay_rate: float = 0.0
    ticks: int = 0


@dataclass(frozen=True)
class FrameContext:
    """单帧绘制参数，按值传给每个绘制函数"""
    painter: object
    center_x: float
    center_y: float
    rotation: float
    init_spin: Callable[[], None]
