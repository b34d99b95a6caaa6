"""
Tests for latitude/longitude canonicalization.
"""

import math
import unittest

import numpy as np

from geocoord.errors import InvalidCoordinateError
from geocoord.geo import canonicalize, canonicalize_array


class TestCanonicalize(unittest.TestCase):
    """Test the scalar fold."""

    def assertPair(self, result, lat_deg, lon_deg):
        lat, lon = result
        self.assertAlmostEqual(math.degrees(lat), lat_deg, places=9)
        self.assertAlmostEqual(math.degrees(lon), lon_deg, places=9)

    def test_origin_is_fixed_point(self):
        """Test that (0, 0) is unchanged."""
        self.assertEqual(canonicalize(0.0, 0.0), (0.0, 0.0))

    def test_in_range_values_unchanged(self):
        """Test ordinary coordinates."""
        self.assertPair(canonicalize(math.radians(37.5665), math.radians(126.978)), 37.5665, 126.978)
        self.assertPair(canonicalize(math.radians(-33.9), math.radians(-70.6)), -33.9, -70.6)

    def test_north_overshoot_reflects(self):
        """Test that 100° latitude becomes 80° on the opposite meridian."""
        self.assertPair(canonicalize(math.radians(100), math.radians(10)), 80.0, -170.0)

    def test_south_overshoot_reflects(self):
        """Test that -100° latitude becomes -80° on the opposite meridian."""
        self.assertPair(canonicalize(math.radians(-100), math.radians(-30)), -80.0, 150.0)

    def test_half_turn_reaches_antimeridian(self):
        """Test walking 180° north from the equator."""
        self.assertEqual(canonicalize(math.pi, 0.0), (0.0, math.pi))

    def test_north_pole_does_not_flip(self):
        """Test that latitude exactly at the North Pole is kept."""
        lat, lon = canonicalize(math.pi / 2, math.radians(45))
        self.assertEqual(lat, math.pi / 2)
        self.assertAlmostEqual(math.degrees(lon), 45.0)

    def test_south_pole_does_not_flip(self):
        """Test that latitude exactly at the South Pole is kept."""
        lat, lon = canonicalize(-math.pi / 2, math.radians(200))
        self.assertEqual(lat, -math.pi / 2)
        self.assertAlmostEqual(math.degrees(lon), -160.0)

    def test_longitude_lower_bound_maps_to_upper(self):
        """Test that -180° longitude becomes +180°."""
        self.assertEqual(canonicalize(0.0, -math.pi), (0.0, math.pi))

    def test_longitude_upper_bound_kept(self):
        """Test that +180° longitude is kept."""
        self.assertEqual(canonicalize(0.0, math.pi), (0.0, math.pi))

    def test_multiple_turns(self):
        """Test angles several revolutions out."""
        self.assertPair(canonicalize(math.radians(390), math.radians(730)), 30.0, 10.0)
        self.assertPair(canonicalize(math.radians(-390), math.radians(-730)), -30.0, -10.0)

    def test_non_finite_rejected(self):
        """Test NaN and infinity."""
        for lat, lon in ((math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0), (0.0, -math.inf)):
            with self.assertRaises(InvalidCoordinateError):
                canonicalize(lat, lon)

    def test_integer_too_large_for_float_rejected(self):
        """Test that an overflowing integer raises InvalidCoordinateError."""
        with self.assertRaises(InvalidCoordinateError):
            canonicalize(10**400, 0.0)
        with self.assertRaises(InvalidCoordinateError):
            canonicalize(0.0, -(10**400))

    def test_text_rejected(self):
        """Test that numeric strings are not parsed."""
        for lat, lon in (("1.0", 0.0), (0.0, b"0.5"), (None, 0.0)):
            with self.assertRaises(InvalidCoordinateError):
                canonicalize(lat, lon)

    def test_non_finite_is_value_error(self):
        """Test that the error is a ValueError."""
        with self.assertRaises(ValueError):
            canonicalize(math.nan, 0.0)

    def test_pole_crossing_logged(self):
        """Test that flipping the meridian is logged at DEBUG."""
        with self.assertLogs("geocoord.geo.canonical", level="DEBUG") as logs:
            canonicalize(math.radians(100), 0.0)
        self.assertIn("North Pole", logs.output[0])


class TestCanonicalizeArray(unittest.TestCase):
    """Test the vectorised fold."""

    def setUp(self):
        """Set up a grid of raw angles including the boundary cases."""
        values = [0.0, 45.0, 89.999, 90.0, 90.001, 100.0, 180.0, -180.0, 270.0, -359.5, 725.0, -1000.25]
        lats, lons = np.meshgrid(np.radians(values), np.radians(values))
        self.lats = lats.ravel()
        self.lons = lons.ravel()

    def test_matches_scalar(self):
        """Test that every element equals the scalar result exactly."""
        lat, lon = canonicalize_array(self.lats, self.lons)
        for i in range(self.lats.size):
            expected = canonicalize(self.lats[i], self.lons[i])
            self.assertEqual((float(lat[i]), float(lon[i])), expected)

    def test_range_invariant(self):
        """Test that all outputs are canonical."""
        lat, lon = canonicalize_array(self.lats, self.lons)
        self.assertTrue(np.all(np.abs(lat) <= math.pi / 2))
        self.assertTrue(np.all(lon > -math.pi))
        self.assertTrue(np.all(lon <= math.pi))

    def test_broadcasting(self):
        """Test a scalar latitude against an array of longitudes."""
        lat, lon = canonicalize_array(0.0, np.radians([-180.0, 0.0, 190.0]))
        self.assertEqual(lat.shape, (3,))
        np.testing.assert_allclose(np.degrees(lon), [180.0, 0.0, -170.0], atol=1e-9)

    def test_shape_mismatch_rejected(self):
        """Test arrays that cannot broadcast."""
        with self.assertRaises(InvalidCoordinateError):
            canonicalize_array([0.0, 1.0], [0.0, 1.0, 2.0])

    def test_non_finite_rejected(self):
        """Test that a single NaN element fails the whole batch."""
        with self.assertRaises(InvalidCoordinateError):
            canonicalize_array([0.0, np.nan], [0.0, 0.0])


if __name__ == "__main__":
    unittest.main()
