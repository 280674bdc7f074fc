"""
Prize Wheel - 点击控制器测试
"""

from engine.interaction_controller import HitRegions, InteractionController
from models.wheel_model import InteractiveRegion, Point


class _Region:
    def __init__(self, hit):
        self.hit = hit
        self.tested = []
        self.fired = 0

    def region(self):
        def test_hit(point):
            self.tested.append(point)
            return self.hit

        def on_hit():
            self.fired += 1

        return InteractiveRegion(test_hit=test_hit, on_hit=on_hit)


def test_point_is_localized():
    """窗口坐标减去表面原点"""
    spy = _Region(hit=True)
    regions = HitRegions()
    regions.replace([spy.region()])

    hits = InteractionController(regions).handle_click(130, 245, 30, 45)

    assert hits == 1
    assert spy.tested == [Point(100, 200)]
    assert spy.fired == 1


def test_every_hit_region_fires():
    a, b, c = _Region(True), _Region(False), _Region(True)
    regions = HitRegions()
    regions.replace([a.region(), b.region(), c.region()])

    hits = InteractionController(regions).handle_click(0, 0)

    assert hits == 2
    assert (a.fired, b.fired, c.fired) == (1, 0, 1)
    assert len(b.tested) == 1


def test_no_regions():
    assert InteractionController(HitRegions()).handle_click(10, 10) == 0


def test_replace_drops_stale_regions():
    """新一帧整体替换，旧区域不再被测试"""
    old, new = _Region(True), _Region(True)
    regions = HitRegions()
    controller = InteractionController(regions)

    regions.replace([old.region()])
    regions.replace([new.region()])
    controller.handle_click(5, 5)

    assert old.tested == []
    assert new.fired == 1


def test_on_hit_may_replace_regions():
    """命中回调同步替换区域时，本次点击仍按点击时的快照处理"""
    regions = HitRegions()
    second = _Region(True)
    fired = []

    def on_hit():
        fired.append('first')
        regions.replace([])

    regions.replace([
        InteractiveRegion(test_hit=lambda p: True, on_hit=on_hit),
        second.region(),
    ])
    hits = InteractionController(regions).handle_click(0, 0)

    assert hits == 2
    assert fired == ['first']
    assert second.fired == 1
    assert len(regions) == 0
