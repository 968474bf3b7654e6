import unittest
from datetime import date

from route_summary.aggregator import aggregate, fold, get_or_create_bucket
from route_summary.models import BucketStats, WorkoutRecord, YearSummary


def _workout(day, km, seconds):
    return WorkoutRecord(date=day, distance_km=km, duration_seconds=seconds)


class GetOrCreateBucketTests(unittest.TestCase):
    def test_inserts_zeroed_bucket_once(self):
        buckets = {}
        first = get_or_create_bucket(buckets, "2023-01")
        first.count += 1
        second = get_or_create_bucket(buckets, "2023-01")

        self.assertIs(first, second)
        self.assertEqual(buckets, {"2023-01": BucketStats(count=1)})


class FoldTests(unittest.TestCase):
    def test_fold_updates_totals_and_both_buckets(self):
        summary = YearSummary(year=2023)
        record = _workout(date(2023, 1, 2), 5.0, 1500)  # Monday

        result = fold(summary, record)

        self.assertIs(result, summary)
        self.assertEqual(summary.workout_days, 1)
        self.assertEqual(summary.total_distance_km, 5.0)
        self.assertEqual(summary.total_time_seconds, 1500)
        self.assertEqual(summary.monthly["2023-01"], BucketStats(1, 5.0, 1500))
        self.assertEqual(summary.weekday, {0: BucketStats(1, 5.0, 1500)})
        self.assertEqual(summary.workouts, [record])

    def test_sunday_is_index_six(self):
        summary = fold(YearSummary(year=2023), _workout(date(2023, 1, 8), 1.0, 60))
        self.assertEqual(list(summary.weekday), [6])

    def test_duplicates_are_counted_twice(self):
        record = _workout(date(2023, 3, 3), 2.0, 600)
        summary = aggregate(2023, [record, record])
        self.assertEqual(summary.workout_days, 2)
        self.assertEqual(summary.monthly["2023-03"].count, 2)
        self.assertEqual(len(summary.workouts), 2)

    def test_bucket_counts_match_workout_days(self):
        records = [
            _workout(date(2023, 1, 5), 5.0, 1800),
            _workout(date(2023, 1, 20), 8.0, 3000),
            _workout(date(2023, 2, 10), 10.0, 3600),
            _workout(date(2023, 7, 16), 0.0, 0),
            _workout(date(2023, 12, 31), 21.1, 7200),
        ]
        summary = aggregate(2023, records)

        self.assertEqual(summary.workout_days, 5)
        self.assertEqual(sum(b.count for b in summary.monthly.values()), 5)
        self.assertEqual(sum(b.count for b in summary.weekday.values()), 5)
        self.assertAlmostEqual(
            sum(b.distance_km for b in summary.monthly.values()), summary.total_distance_km
        )
        self.assertEqual(
            sum(b.time_seconds for b in summary.weekday.values()), summary.total_time_seconds
        )

    def test_empty_fold(self):
        summary = aggregate(2023, [])
        self.assertEqual(summary.workout_days, 0)
        self.assertEqual(summary.monthly, {})
        self.assertEqual(summary.weekday, {})


if __name__ == "__main__":
    unittest.main()
