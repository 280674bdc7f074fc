"""
Prize Wheel - pytest 公共夹具
"""

import os
import sys

# 确保项目根目录在 sys.path 中
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# 无显示器环境下使用离屏平台
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


class ManualScheduler:
    """手动帧调度: 回调排队，由测试逐帧推进"""

    def __init__(self):
        self.pending = []

    def __call__(self, callback):
        self.pending.append(callback)

    def step(self) -> bool:
        if not self.pending:
            return False
        self.pending.pop(0)()
        return True

    def run(self, limit=10000) -> int:
        steps = 0
        while self.step():
            steps += 1
            assert steps < limit, "动画链没有收敛"
        return steps


@pytest.fixture
def scheduler():
    return ManualScheduler()
