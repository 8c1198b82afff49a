"""Tests for the circular cloud layouter.

Validates:
  - Construction rejects centers with a negative coordinate
  - place_next rejects non-positive sizes without changing state
  - The first rectangle is centered exactly on the center
  - No two placed rectangles overlap (checked with shapely as well)
  - By default a cloud at (0, 0) stays inside the non-negative quadrant
  - 10,000 unit rectangles are placed quickly
  - Large rectangles stay cheap after a tiny first one
  - Clouds stay tight (tightness ratio below 5)
  - Placement is deterministic and matches a from-scratch spiral search
"""

from __future__ import annotations

import time
import unittest

from tagcloud.config import LayoutRules
from tagcloud.layout import (
    CircularCloudLayouter, InvalidArgumentError, InvalidCenterError, InvalidSizeError,
    Point, Rectangle, Size, covered_area, intersecting_pairs, tightness_ratio,
)
from tagcloud.layout.metrics import total_area
from tests.cloud_fixture import (
    BASIC_CENTER, BASIC_SIZE, make_layouter, overlapping_pairs_shapely, reference_layout,
)

THROUGHPUT_BUDGET_S = 1.0
LARGE_AFTER_SMALL_BUDGET_S = 1.0


class TestConstruction(unittest.TestCase):

    def test_invalid_center(self):
        for x, y in ((0, -1), (-1, 0), (-5, -5)):
            with self.subTest(center=(x, y)):
                with self.assertRaises(InvalidCenterError) as ctx:
                    CircularCloudLayouter(Point(x, y))
                self.assertTrue(str(ctx.exception).startswith("Invalid center"))
                self.assertEqual(ctx.exception.center, Point(x, y))

    def test_invalid_center_is_value_error(self):
        with self.assertRaises(ValueError):
            CircularCloudLayouter((-1, 3))
        with self.assertRaises(InvalidArgumentError):
            CircularCloudLayouter((3, -1))

    def test_origin_center_is_valid(self):
        layouter = CircularCloudLayouter(Point(0, 0))
        self.assertEqual(layouter.center, Point(0, 0))
        self.assertEqual(layouter.all_rectangles(), ())

    def test_tuple_center(self):
        self.assertEqual(CircularCloudLayouter((7, 9)).center, Point(7, 9))


class TestPlaceNextValidation(unittest.TestCase):

    def test_invalid_size(self):
        layouter = make_layouter()
        for w, h in ((-1, 1), (1, -1), (0, 1), (1, 0), (0, 0)):
            with self.subTest(size=(w, h)):
                with self.assertRaises(InvalidSizeError) as ctx:
                    layouter.place_next(Size(w, h))
                self.assertTrue(str(ctx.exception).startswith("Invalid size"))
                self.assertEqual(ctx.exception.size, Size(w, h))

    def test_invalid_size_leaves_state_unchanged(self):
        layouter = make_layouter()
        first = layouter.place_next(BASIC_SIZE)
        with self.assertRaises(InvalidSizeError):
            layouter.place_next((0, 3))
        self.assertEqual(layouter.all_rectangles(), (first,))
        # The next valid placement behaves as if the bad call never happened.
        fresh = make_layouter()
        fresh.place_next(BASIC_SIZE)
        self.assertEqual(layouter.place_next(BASIC_SIZE), fresh.place_next(BASIC_SIZE))


class TestPlaceNext(unittest.TestCase):

    def setUp(self):
        self.layouter = make_layouter()

    def test_first_rectangle_in_center(self):
        rect = self.layouter.place_next(BASIC_SIZE)
        self.assertEqual(rect.x, BASIC_CENTER.x - BASIC_SIZE.width // 2)
        self.assertEqual(rect.y, BASIC_CENTER.y - BASIC_SIZE.height // 2)
        self.assertEqual(rect.size, BASIC_SIZE)

    def test_returns_requested_size(self):
        for w, h in ((3, 7), (10, 1), (4, 4)):
            rect = self.layouter.place_next(Size(w, h))
            self.assertEqual((rect.width, rect.height), (w, h))

    def test_same_rectangles_without_intersection(self):
        for w, h in ((2, 2), (1, 10), (6, 3)):
            with self.subTest(size=(w, h)):
                layouter = make_layouter()
                rects = [layouter.place_next(Size(w, h)) for _ in range(10)]
                self.assertEqual(intersecting_pairs(rects), [])

    def test_growing_rectangles_without_intersection(self):
        """Center (100, 100), ten sizes from 2x1 growing by 1x1."""
        rects = []
        w, h = 2, 1
        for _ in range(10):
            rects.append(self.layouter.place_next(Size(w, h)))
            w += 1
            h += 1
        self.assertEqual(intersecting_pairs(rects), [])
        self.assertEqual(overlapping_pairs_shapely(rects), [])

    def test_mixed_sizes_no_overlap_shapely(self):
        sizes = [Size(1 + (i * 7) % 13, 1 + (i * 5) % 9) for i in range(120)]
        for s in sizes:
            self.layouter.place_next(s)
        rects = list(self.layouter.all_rectangles())
        self.assertAlmostEqual(covered_area(rects), total_area(rects))
        self.assertEqual(intersecting_pairs(rects), [])

    def test_all_rectangles_in_insertion_order(self):
        returned = [self.layouter.place_next(Size(3 + i, 2)) for i in range(8)]
        self.assertEqual(list(self.layouter.all_rectangles()), returned)
        self.assertEqual(self.layouter.rectangles, tuple(returned))
        self.assertEqual(len(self.layouter), 8)

    def test_all_rectangles_is_a_snapshot(self):
        self.layouter.place_next(BASIC_SIZE)
        snapshot = self.layouter.all_rectangles()
        self.layouter.place_next(BASIC_SIZE)
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(self.layouter.all_rectangles()), 2)

    def test_second_rectangle_touches_first(self):
        """Compaction pulls the second rectangle flush against the first."""
        first = self.layouter.place_next(Size(10, 10))
        second = self.layouter.place_next(Size(10, 10))
        self.assertFalse(first.intersects(second))
        touching = (
            second.right == first.left or second.left == first.right
            or second.bottom == first.top or second.top == first.bottom
        )
        self.assertTrue(touching, f"{first} and {second} are not adjacent")


class TestNonNegative(unittest.TestCase):

    def test_not_on_negative_coordinates(self):
        layouter = CircularCloudLayouter(Point(0, 0))
        rects = [layouter.place_next(Size(1, 1)) for _ in range(10)]
        self.assertFalse(any(r.x < 0 or r.y < 0 for r in rects))
        self.assertEqual(intersecting_pairs(rects), [])

    def test_explicit_flag_matches_default(self):
        a = CircularCloudLayouter(Point(2, 2))
        b = CircularCloudLayouter(Point(2, 2), non_negative=True)
        for i in range(30):
            a.place_next(Size(1 + i % 3, 2))
            b.place_next(Size(1 + i % 3, 2))
        self.assertEqual(a.all_rectangles(), b.all_rectangles())

    def test_mixed_sizes_near_corner(self):
        layouter = CircularCloudLayouter(Point(3, 3))
        rects = [layouter.place_next(Size(2 + i % 4, 1 + i % 3)) for i in range(40)]
        self.assertFalse(any(r.x < 0 or r.y < 0 for r in rects[1:]))
        self.assertEqual(intersecting_pairs(rects), [])

    def test_first_rectangle_still_centered(self):
        """The exemption: a large first rectangle at (0, 0) sticks out."""
        layouter = CircularCloudLayouter(Point(0, 0))
        rect = layouter.place_next(Size(10, 10))
        self.assertEqual((rect.x, rect.y), (-5, -5))
        rest = [layouter.place_next(Size(10, 10)) for _ in range(5)]
        self.assertFalse(any(r.x < 0 or r.y < 0 for r in rest))

    def test_allow_negative(self):
        layouter = CircularCloudLayouter(Point(0, 0), non_negative=False)
        rects = [layouter.place_next(Size(1, 1)) for _ in range(10)]
        self.assertTrue(any(r.x < 0 or r.y < 0 for r in rects))
        self.assertEqual(intersecting_pairs(rects), [])


class TestPerformanceAndTightness(unittest.TestCase):

    def test_places_rectangles_fast(self):
        layouter = make_layouter()
        size = Size(1, 1)
        started = time.perf_counter()
        for _ in range(10_000):
            layouter.place_next(size)
        elapsed = time.perf_counter() - started
        self.assertLess(elapsed, THROUGHPUT_BUDGET_S,
                        f"10,000 unit rectangles took {elapsed:.2f}s")
        self.assertEqual(len(layouter), 10_000)

    def test_large_rectangles_after_tiny_first(self):
        """A 1x1 first rectangle must not make later 400x300 ones slow."""
        layouter = CircularCloudLayouter(Point(500, 500))
        started = time.perf_counter()
        layouter.place_next(Size(1, 1))
        for _ in range(30):
            layouter.place_next(Size(400, 300))
        elapsed = time.perf_counter() - started
        self.assertLess(elapsed, LARGE_AFTER_SMALL_BUDGET_S,
                        f"1x1 then 30 of 400x300 took {elapsed:.2f}s")
        self.assertEqual(intersecting_pairs(list(layouter.all_rectangles())), [])

    def test_places_rectangles_tightly(self):
        for w, h in ((5, 2), (10, 20), (10, 10), (100, 100), (1, 1)):
            with self.subTest(size=(w, h)):
                layouter = make_layouter()
                for _ in range(500):
                    layouter.place_next(Size(w, h))
                ratio = tightness_ratio(layouter.all_rectangles(), BASIC_CENTER)
                self.assertLess(ratio, 5, f"{w}x{h}: tightness ratio {ratio:.2f}")

    def test_growing_sizes_stay_tight(self):
        layouter = make_layouter()
        for i in range(200):
            layouter.place_next(Size(2 + i // 10, 1 + i // 20))
        self.assertLess(tightness_ratio(layouter.all_rectangles(), BASIC_CENTER), 5)


class TestDeterminism(unittest.TestCase):

    SIZES = [Size(1 + (i * 3) % 7, 1 + (i * 2) % 5) for i in range(40)]

    def test_same_inputs_same_layout(self):
        a, b = make_layouter(), make_layouter()
        for s in self.SIZES:
            a.place_next(s)
            b.place_next(s)
        self.assertEqual(a.all_rectangles(), b.all_rectangles())

    def test_matches_from_scratch_search(self):
        """Resuming the spiral gives exactly what a full restart would."""
        layouter = make_layouter()
        for s in self.SIZES:
            layouter.place_next(s)
        self.assertEqual(list(layouter.all_rectangles()),
                         reference_layout(BASIC_CENTER, self.SIZES))

    def test_index_cell_size_does_not_change_layout(self):
        a = make_layouter()
        b = make_layouter(rules=LayoutRules(index_cell_size=7))
        for s in self.SIZES:
            a.place_next(s)
            b.place_next(s)
        self.assertEqual(a.all_rectangles(), b.all_rectangles())

    def test_independent_layouters(self):
        a = make_layouter()
        a.place_next(BASIC_SIZE)
        b = make_layouter()
        self.assertEqual(b.all_rectangles(), ())
        self.assertEqual(b.place_next(BASIC_SIZE), Rectangle.from_center(BASIC_CENTER, BASIC_SIZE))


if __name__ == "__main__":
    unittest.main()
