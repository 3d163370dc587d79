import math
import unittest

from app.domain import InvalidInputError
from app.validation import validate_coordinates, validate_days, validate_search_query


class TestValidateCoordinates(unittest.TestCase):
    def test_accepts_bounds(self):
        validate_coordinates(90, 180)
        validate_coordinates(-90, -180)
        validate_coordinates(51.5074, -0.1278)

    def test_rejects_latitude_out_of_range(self):
        for lat in (91, -91):
            with self.assertRaisesRegex(InvalidInputError, "Latitude must be a number between -90 and 90"):
                validate_coordinates(lat, 0)

    def test_rejects_longitude_out_of_range(self):
        for lon in (181, -181):
            with self.assertRaisesRegex(InvalidInputError, "Longitude must be a number between -180 and 180"):
                validate_coordinates(0, lon)

    def test_rejects_non_finite(self):
        with self.assertRaises(InvalidInputError):
            validate_coordinates(math.nan, 0)
        with self.assertRaises(InvalidInputError):
            validate_coordinates(0, math.inf)


class TestValidateDays(unittest.TestCase):
    def test_accepts_range(self):
        validate_days(1)
        validate_days(16)

    def test_rejects_out_of_range(self):
        for days in (0, 17):
            with self.assertRaisesRegex(InvalidInputError, "Days parameter must be between 1 and 16"):
                validate_days(days)


class TestValidateSearchQuery(unittest.TestCase):
    def test_rejects_short_query(self):
        for query in ("a", "  a  ", "", None):
            with self.assertRaisesRegex(InvalidInputError, "Search query must be at least 2 characters long"):
                validate_search_query(query)

    def test_returns_trimmed_query(self):
        self.assertEqual(validate_search_query("  Lo"), "Lo")
        self.assertEqual(validate_search_query(" London "), "London")

    def test_is_a_value_error(self):
        with self.assertRaises(ValueError):
            validate_search_query("x")


if __name__ == "__main__":
    unittest.main()
