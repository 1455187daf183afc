from datetime import date, datetime, timedelta, timezone
import unittest
from mealboard.logic.calendar.dates import (
    format_date_key, is_same_day, normalize_date, shift_week, start_of_week, week_days, week_label
)

SUNDAY, MONDAY = 0, 1


class TestNormalizeDate(unittest.TestCase):

    def test_date_only_string_keeps_its_day(self):
        self.assertEqual(normalize_date("2024-03-10"), date(2024, 3, 10))

    def test_aware_datetimes_keep_their_wall_clock_day(self):
        far_east = datetime(2024, 3, 10, 23, 30, tzinfo=timezone(timedelta(hours=14)))
        far_west = datetime(2024, 3, 10, 0, 30, tzinfo=timezone(timedelta(hours=-12)))
        self.assertEqual(normalize_date(far_east), date(2024, 3, 10))
        self.assertEqual(normalize_date(far_west), date(2024, 3, 10))

    def test_iso_datetime_strings(self):
        self.assertEqual(normalize_date("2024-03-10T23:59:00Z"), date(2024, 3, 10))
        self.assertEqual(normalize_date("2024-03-10T00:00:00-12:00"), date(2024, 3, 10))

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            normalize_date("10/03/2024")
        with self.assertRaises(ValueError):
            normalize_date("not a date")
        with self.assertRaises(ValueError):
            normalize_date(20240310)

    def test_only_extended_iso_strings(self):
        for text in ("20240310", "20240310T120000", "2024-W10-7", "2024-03-10T0930", "2024-03-10T09:30:00.5"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    normalize_date(text)
        self.assertEqual(normalize_date("2024-03-10 09:30"), date(2024, 3, 10))
        self.assertEqual(normalize_date("2024-03-10T09:30:00.123456+05:30"), date(2024, 3, 10))

    def test_format_date_key(self):
        self.assertEqual(format_date_key(datetime(2024, 3, 5, 18, 0)), "2024-03-05")

    def test_is_same_day(self):
        self.assertTrue(is_same_day("2024-03-10", datetime(2024, 3, 10, 22, 15)))
        self.assertFalse(is_same_day("2024-03-10", "2024-03-11"))


class TestWeeks(unittest.TestCase):

    def test_start_of_week_sunday(self):
        # 2024-03-13 is a Wednesday
        self.assertEqual(start_of_week("2024-03-13", SUNDAY), date(2024, 3, 10))
        self.assertEqual(start_of_week("2024-03-10", SUNDAY), date(2024, 3, 10))

    def test_start_of_week_monday(self):
        self.assertEqual(start_of_week("2024-03-13", MONDAY), date(2024, 3, 11))
        self.assertEqual(start_of_week("2024-03-10", MONDAY), date(2024, 3, 4))

    def test_week_days(self):
        days = week_days("2024-03-13", SUNDAY)
        self.assertEqual(len(days), 7)
        self.assertEqual(days[0], date(2024, 3, 10))
        self.assertEqual(days[-1], date(2024, 3, 16))

    def test_shift_week_snaps_to_week_start(self):
        self.assertEqual(shift_week("2024-03-13", 1, SUNDAY), date(2024, 3, 17))
        self.assertEqual(shift_week("2024-03-13", -1, SUNDAY), date(2024, 3, 3))
        self.assertEqual(shift_week("2024-03-13", 0, SUNDAY), date(2024, 3, 10))

    def test_week_across_year_end(self):
        days = week_days("2024-12-31", SUNDAY)
        self.assertEqual(days[0], date(2024, 12, 29))
        self.assertEqual(days[-1], date(2025, 1, 4))

    def test_week_label(self):
        self.assertEqual(week_label(date(2024, 3, 10)), "March 10 - March 16, 2024")
        self.assertEqual(week_label(date(2024, 3, 31)), "March 31 - April 6, 2024")


if __name__ == '__main__':
    unittest.main()
