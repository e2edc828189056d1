import math
import unittest

from SampleChart.Bounds import Bounds
from SampleChart.ViewTransform import ViewTransform


def _two_point_transform(size=220):
    return ViewTransform.create(size, [(0, 0), (10, 10)])


class TestViewTransform(unittest.TestCase):
    def assertBoundsAlmostEqual(self, a, b):
        for x, y in zip(a.as_tuple(), b.as_tuple()):
            self.assertAlmostEqual(x, y)

    def test_create_uses_margin_ratio(self):
        t = _two_point_transform()
        self.assertAlmostEqual(t.margin, 24.2)
        self.assertBoundsAlmostEqual(t.pixel_bounds, Bounds(24.2, 195.8, 24.2, 195.8))
        self.assertEqual(t.default_window, Bounds(left=0, right=10, top=10, bottom=0))

    def test_identity_at_default_view(self):
        t = _two_point_transform()
        self.assertEqual(t.offset, (0.0, 0.0))
        self.assertEqual(t.scale, 1.0)
        self.assertBoundsAlmostEqual(t.data_window(), t.default_window)

    def test_to_pixel_corners(self):
        t = _two_point_transform()
        x, y = t.to_pixel((0, 0))
        self.assertAlmostEqual(x, 24.2)
        self.assertAlmostEqual(y, 195.8)
        x, y = t.to_pixel((10, 10))
        self.assertAlmostEqual(x, 195.8)
        self.assertAlmostEqual(y, 24.2)

    def test_round_trip_at_default_window(self):
        t = _two_point_transform()
        for p in [(24.2, 24.2), (100.0, 57.5), (0.0, 220.0), (300.0, -40.0)]:
            back = t.to_pixel(t.to_data(p))
            self.assertAlmostEqual(back[0], p[0])
            self.assertAlmostEqual(back[1], p[1])
        for d in [(0.0, 0.0), (3.5, 8.25), (-4.0, 12.0)]:
            back = t.to_data(t.to_pixel(d))
            self.assertAlmostEqual(back[0], d[0])
            self.assertAlmostEqual(back[1], d[1])

    def test_to_data_ignores_pan_and_zoom(self):
        t = _two_point_transform()
        moved = t.apply_pan((3, -1)).apply_zoom(-1, 0.02, 0.02, 2)
        self.assertEqual(moved.to_data((100, 100)), t.to_data((100, 100)))
        self.assertNotEqual(moved.to_pixel((5, 5)), t.to_pixel((5, 5)))

    def test_pan_translates_window(self):
        t = _two_point_transform().apply_pan((2, -3))
        self.assertBoundsAlmostEqual(t.data_window(), Bounds(left=2, right=12, top=7, bottom=-3))

    def test_pan_accumulates(self):
        t = _two_point_transform().apply_pan((1, 1)).apply_pan((2, -4))
        self.assertEqual(t.offset, (3, -3))

    def test_zoom_scales_window_by_square(self):
        t = _two_point_transform()
        t = t.apply_zoom(-1, 0.5, 0.02, 2)
        self.assertEqual(t.scale, 0.5)
        # half scale -> quarter-size window around the same centre
        self.assertBoundsAlmostEqual(t.data_window(), Bounds(left=3.75, right=6.25, top=6.25, bottom=3.75))

    def test_zoom_about_panned_centre(self):
        t = _two_point_transform().apply_pan((10, 0)).apply_zoom(1, 0.5, 0.02, 2)
        w = t.data_window()
        self.assertAlmostEqual((w.left + w.right) / 2, 15.0)
        self.assertAlmostEqual(w.right - w.left, 22.5)

    def test_zoom_clamps(self):
        t = _two_point_transform()
        for _ in range(200):
            t = t.apply_zoom(-1, 0.02, 0.02, 2)
        self.assertEqual(t.scale, 0.02)
        for _ in range(200):
            t = t.apply_zoom(1, 0.02, 0.02, 2)
        self.assertEqual(t.scale, 2)

    def test_axis_extents_follow_live_window(self):
        t = _two_point_transform()
        lo, hi = t.axis_extents()
        self.assertAlmostEqual(lo[0], 0)
        self.assertAlmostEqual(lo[1], 0)
        self.assertAlmostEqual(hi[0], 10)
        self.assertAlmostEqual(hi[1], 10)
        lo, hi = t.apply_pan((5, 5)).axis_extents()
        self.assertAlmostEqual(lo[0], 5)
        self.assertAlmostEqual(hi[1], 15)

    def test_reset(self):
        t = _two_point_transform().apply_pan((4, 4)).apply_zoom(1, 0.3, 0.02, 2).reset()
        self.assertEqual(t.offset, (0.0, 0.0))
        self.assertEqual(t.scale, 1.0)

    def test_single_sample_gives_nan_pixels(self):
        t = ViewTransform.create(220, [(3, 3)])
        x, y = t.to_pixel((3, 3))
        self.assertTrue(math.isnan(x))
        self.assertTrue(math.isnan(y))

    def test_to_pixels_vectorised(self):
        t = _two_point_transform()
        out = t.to_pixels([(0, 0), (10, 10)])
        self.assertEqual(out.shape, (2, 2))
        self.assertAlmostEqual(out[1, 0], 195.8)


if __name__ == "__main__":
    unittest.main(verbosity=2)
