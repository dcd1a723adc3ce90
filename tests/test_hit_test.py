"""Pointer hit-testing against injected geometry.

Uses a fake geometry with pixel-like coordinates and gaps between rows so the
overshoot slack is observable.
"""

from __future__ import annotations

import unittest

from lettergrid.hit_test import Hit, HitTester, PointerEvent, PointerPhase, Rect
from lettergrid.selection import JumpTo, JumpToRow


class _FakeGeometry:
    """Three rows, 40 high, 10 apart; three 40-wide columns starting at x=50."""

    def __init__(self) -> None:
        self.col_rect_calls = 0

    def row_count(self) -> int:
        return 3

    def col_count(self) -> int:
        return 3

    def row_rect(self, row: int) -> Rect:
        return Rect(left=0, top=100 + row * 50, width=200, height=40)

    def col_rect(self, col: int) -> Rect:
        self.col_rect_calls += 1
        return Rect(left=50 + col * 40, top=100, width=40, height=40)


class RectTests(unittest.TestCase):
    def test_extents_are_half_open(self) -> None:
        rect = Rect(left=10, top=20, width=5, height=2)
        self.assertTrue(rect.contains(10, 20))
        self.assertTrue(rect.contains(14.9, 21.9))
        self.assertFalse(rect.contains(15, 20))
        self.assertFalse(rect.contains(10, 22))
        self.assertEqual((rect.right, rect.bottom), (15, 22))


class HitTesterLookupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geometry = _FakeGeometry()
        self.tester = HitTester(self.geometry)

    def test_exact_row_and_column_hits(self) -> None:
        self.assertEqual(self.tester.hit(55, 105), Hit(row=0, col=0))
        self.assertEqual(self.tester.hit(129, 170), Hit(row=1, col=1))
        self.assertEqual(self.tester.hit(130, 239), Hit(row=2, col=2))

    def test_row_without_column_outside_column_extents(self) -> None:
        self.assertEqual(self.tester.hit(10, 160), Hit(row=1, col=None))
        self.assertEqual(self.tester.hit(190, 160), Hit(row=1, col=None))

    def test_default_slack_is_one_row_height_below_each_row(self) -> None:
        # Gap between row 0 (ends at 140) and row 1 (starts at 150).
        self.assertEqual(self.tester.row_at(145), 0)
        # Below the last row (ends at 240).
        self.assertEqual(self.tester.row_at(279), 2)
        self.assertIsNone(self.tester.row_at(280))

    def test_exact_match_wins_over_slack_of_previous_row(self) -> None:
        self.assertEqual(self.tester.row_at(150), 1)

    def test_configured_slack(self) -> None:
        tester = HitTester(self.geometry, row_overshoot=3)
        self.assertEqual(tester.row_at(142), 0)
        self.assertIsNone(tester.row_at(144))
        strict = HitTester(self.geometry, row_overshoot=0)
        self.assertIsNone(strict.row_at(140))

    def test_points_above_the_grid_miss(self) -> None:
        self.assertEqual(self.tester.hit(60, 99), Hit(row=None, col=None))

    def test_column_extents_are_read_once(self) -> None:
        calls = self.geometry.col_rect_calls
        for x in (55, 95, 135, 175):
            self.tester.col_at(x)
        self.assertEqual(self.geometry.col_rect_calls, calls)


class HitTesterCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tester = HitTester(_FakeGeometry())

    def test_press_and_move_preview_release_commits(self) -> None:
        for phase, confirm in (
            (PointerPhase.PRESS, False),
            (PointerPhase.MOVE, False),
            (PointerPhase.RELEASE, True),
        ):
            with self.subTest(phase=phase):
                command = self.tester.command_for(PointerEvent(phase, 95, 205))
                self.assertEqual(command, JumpTo(2, 1, confirm=confirm))

    def test_row_only_hit_emits_row_jump(self) -> None:
        command = self.tester.command_for(PointerEvent(PointerPhase.RELEASE, 20, 110))
        self.assertEqual(command, JumpToRow(0))

    def test_miss_emits_nothing(self) -> None:
        self.assertIsNone(self.tester.command_for(PointerEvent(PointerPhase.MOVE, 95, 20)))


if __name__ == "__main__":
    unittest.main()
