"""Tests for the date-range helpers."""

import unittest
from datetime import date, datetime, timedelta

from globetrotter.services.date_ranges import (
    contains_day,
    day_count,
    format_date,
    parse_date,
    ranges_overlap,
)


class TestParseDate(unittest.TestCase):

    def test_iso_string(self):
        self.assertEqual(parse_date("2026-03-01"), date(2026, 3, 1))

    def test_time_part_is_dropped(self):
        self.assertEqual(parse_date("2026-03-01T22:15:00"), date(2026, 3, 1))
        self.assertEqual(parse_date("2026-03-01 08:00"), date(2026, 3, 1))

    def test_date_and_datetime_objects(self):
        self.assertEqual(parse_date(date(2026, 3, 1)), date(2026, 3, 1))
        self.assertEqual(parse_date(datetime(2026, 3, 1, 23, 59)), date(2026, 3, 1))

    def test_malformed_values_return_none(self):
        for value in (None, "", "   ", "2026-13-01", "tomorrow", "01/03/2026", 20260301):
            with self.subTest(value=value):
                self.assertIsNone(parse_date(value))


class TestDayCount(unittest.TestCase):

    def test_inclusive_count(self):
        self.assertEqual(day_count("2026-03-01", "2026-03-05"), 5)

    def test_same_day_is_one(self):
        self.assertEqual(day_count("2026-03-01", "2026-03-01"), 1)

    def test_at_least_one_for_any_valid_pair(self):
        start = date(2026, 1, 1)
        for offset in range(0, 400, 7):
            end = start + timedelta(days=offset)
            self.assertGreaterEqual(day_count(start, end), 1)
            self.assertEqual(day_count(start, end), offset + 1)

    def test_reversed_range_clamps_to_one(self):
        self.assertEqual(day_count("2026-03-05", "2026-03-01"), 1)

    def test_malformed_or_missing_is_zero(self):
        self.assertEqual(day_count("garbage", "2026-03-01"), 0)
        self.assertEqual(day_count("2026-03-01", None), 0)
        self.assertEqual(day_count(None, None), 0)

    def test_crosses_month_and_leap_day(self):
        self.assertEqual(day_count("2028-02-27", "2028-03-01"), 4)


class TestContainsDay(unittest.TestCase):

    def test_bounds_are_inclusive(self):
        self.assertTrue(contains_day("2026-03-01", "2026-03-01", "2026-03-05"))
        self.assertTrue(contains_day("2026-03-05", "2026-03-01", "2026-03-05"))

    def test_outside_range(self):
        self.assertFalse(contains_day("2026-02-28", "2026-03-01", "2026-03-05"))
        self.assertFalse(contains_day("2026-03-06", "2026-03-01", "2026-03-05"))

    def test_time_of_day_is_ignored(self):
        late = datetime(2026, 3, 5, 23, 59, 59)
        self.assertTrue(contains_day(late, "2026-03-01", "2026-03-05"))

    def test_malformed_input_is_not_contained(self):
        self.assertFalse(contains_day("2026-03-02", "not-a-date", "2026-03-05"))
        self.assertFalse(contains_day(None, "2026-03-01", "2026-03-05"))


class TestRangesOverlap(unittest.TestCase):

    def test_touching_ranges_overlap(self):
        self.assertTrue(ranges_overlap("2026-03-01", "2026-03-05", "2026-03-05", "2026-03-09"))

    def test_disjoint_ranges(self):
        self.assertFalse(ranges_overlap("2026-03-01", "2026-03-04", "2026-03-05", "2026-03-09"))

    def test_contained_range(self):
        self.assertTrue(ranges_overlap("2026-03-01", "2026-03-31", "2026-03-10", "2026-03-12"))

    def test_malformed(self):
        self.assertFalse(ranges_overlap("2026-03-01", None, "2026-03-01", "2026-03-02"))


class TestFormatDate(unittest.TestCase):

    def test_label(self):
        self.assertEqual(format_date("2026-03-01"), "Mar 1, 2026")
        self.assertEqual(format_date(date(2026, 12, 25)), "Dec 25, 2026")

    def test_empty(self):
        self.assertEqual(format_date(None), "")
        self.assertEqual(format_date(""), "")

    def test_unparsable_is_echoed(self):
        self.assertEqual(format_date("sometime in spring"), "sometime in spring")
