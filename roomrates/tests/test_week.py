import unittest
from datetime import date, datetime, timedelta
from roomrates.logic.calendar.week import LAST_WEEK_START, monday_of, shift_week, is_in_week, week_dates, is_weekend


class TestWeekNavigation(unittest.TestCase):

    def test_monday_of_friday(self):
        self.assertEqual(monday_of(date(2024, 3, 15)), date(2024, 3, 11))

    def test_monday_of_sunday_goes_back_six_days(self):
        self.assertEqual(monday_of(date(2024, 3, 17)), date(2024, 3, 11))

    def test_monday_of_monday_is_itself(self):
        self.assertEqual(monday_of(date(2024, 3, 11)), date(2024, 3, 11))

    def test_monday_of_datetime_drops_time(self):
        result = monday_of(datetime(2024, 3, 15, 17, 45))
        self.assertEqual(result, date(2024, 3, 11))
        self.assertNotIsInstance(result, datetime)

    def test_monday_of_every_day_of_a_year(self):
        d = date(2023, 12, 25)
        for _ in range(400):
            monday = monday_of(d)
            self.assertEqual(monday.weekday(), 0)
            self.assertTrue(0 <= (d - monday).days <= 6)
            d += timedelta(days=1)

    def test_monday_of_across_year_boundary(self):
        self.assertEqual(monday_of(date(2025, 1, 1)), date(2024, 12, 30))

    def test_shift_week_forward_and_back(self):
        for d in (date(2024, 2, 29), date(2024, 12, 31), date(2025, 3, 30)):
            start = monday_of(d)
            self.assertEqual(shift_week(start, 1), start + timedelta(days=7))
            self.assertEqual(shift_week(shift_week(start, 1), -1), start)

    def test_shift_week_many_weeks(self):
        self.assertEqual(shift_week(date(2024, 3, 11), -52), date(2023, 3, 13))

    def test_is_in_week_bounds(self):
        start = date(2024, 3, 11)
        self.assertTrue(is_in_week(date(2024, 3, 11), start))
        self.assertTrue(is_in_week(date(2024, 3, 17), start))
        self.assertFalse(is_in_week(date(2024, 3, 10), start))
        self.assertFalse(is_in_week(date(2024, 3, 18), start))

    def test_last_week_start_fits_before_date_max(self):
        self.assertEqual(LAST_WEEK_START, date(9999, 12, 20))
        self.assertEqual(LAST_WEEK_START.weekday(), 0)
        self.assertEqual(week_dates(LAST_WEEK_START)[-1], date(9999, 12, 26))

    def test_week_dates_and_weekend(self):
        days = week_dates(date(2024, 3, 11))
        self.assertEqual(len(days), 7)
        self.assertEqual(days[-1], date(2024, 3, 17))
        self.assertEqual([is_weekend(d) for d in days], [False] * 5 + [True, True])


if __name__ == '__main__':
    unittest.main()
