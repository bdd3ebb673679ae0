import math
import unittest

from minipdf.layout import (
    PageLayout,
    Unit,
    from_points,
    multiply_matrices,
    rotation_matrix,
    scale_matrix,
    to_device_coordinates,
    to_points,
    translation_matrix,
)


class TestUnitConversion(unittest.TestCase):
    def test_inches(self):
        self.assertEqual(to_points(1, Unit.INCHES), 72.0)
        self.assertEqual(from_points(72, Unit.INCHES), 1.0)

    def test_metric_units(self):
        self.assertAlmostEqual(to_points(25.4, Unit.MILLIMETERS), 72.0)
        self.assertAlmostEqual(to_points(2.54, Unit.CENTIMETERS), 72.0)
        self.assertAlmostEqual(from_points(72, "cm"), 2.54)

    def test_string_aliases(self):
        self.assertEqual(to_points(2, "in"), 144.0)
        self.assertEqual(to_points(2, "Inches"), 144.0)
        self.assertEqual(to_points(5, "pt"), 5)

    def test_unknown_unit_is_identity(self):
        self.assertEqual(to_points(12.5, "furlong"), 12.5)
        self.assertEqual(from_points(12.5, None), 12.5)

    def test_round_trip_all_units(self):
        for unit in Unit:
            for value in (0.0, 1.0, 13.37, -4.2, 1000.0):
                with self.subTest(unit=unit, value=value):
                    self.assertAlmostEqual(from_points(to_points(value, unit), unit), value)


class TestDeviceCoordinates(unittest.TestCase):
    def test_top_left_origin_flips_y(self):
        self.assertEqual(to_device_coordinates(10, 20, 100, True), (10, 80))

    def test_bottom_left_origin_passes_through(self):
        self.assertEqual(to_device_coordinates(10, 20, 100, False), (10, 20))

    def test_out_of_page_coordinates_not_clamped(self):
        self.assertEqual(to_device_coordinates(-5, 150, 100, True), (-5, -50))

    def test_page_layout_converts_units_first(self):
        layout = PageLayout(use_top_left_origin=True, unit=Unit.INCHES)
        self.assertEqual(layout.to_device_coordinates(1, 1, 792), (72.0, 720.0))

    def test_page_layout_defaults(self):
        layout = PageLayout()
        self.assertEqual(layout.to_device_coordinates(10, 20, 100), (10, 20))


class TestMatrices(unittest.TestCase):
    def test_scale(self):
        self.assertEqual(scale_matrix(2, 3), (2, 0, 0, 3, 0, 0))

    def test_translation(self):
        self.assertEqual(translation_matrix(5, -7), (1, 0, 0, 1, 5, -7))

    def test_rotation_quarter_turn(self):
        m = rotation_matrix(90)
        expected = (0, 1, -1, 0, 0, 0)
        for got, want in zip(m, expected):
            self.assertAlmostEqual(got, want)

    def test_rotation_uses_radians(self):
        a, b, c, d, _, _ = rotation_matrix(30)
        self.assertAlmostEqual(a, math.cos(math.pi / 6))
        self.assertAlmostEqual(b, 0.5)
        self.assertAlmostEqual(c, -0.5)

    def test_multiply_applies_first_matrix_first(self):
        m = multiply_matrices(translation_matrix(10, 20), scale_matrix(2, 2))
        self.assertEqual(m, (2, 0, 0, 2, 20, 40))


if __name__ == "__main__":
    unittest.main()
