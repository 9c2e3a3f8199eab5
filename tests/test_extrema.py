import unittest

import numpy as np

from core.extrema import ExtremaTracker


class TestExtremaTracker(unittest.TestCase):
    def test_no_samples_means_no_bound(self):
        tracker = ExtremaTracker()
        self.assertIsNone(tracker.bounds)
        self.assertIsNone(tracker.minimum)
        self.assertIsNone(tracker.maximum)

    def test_running_bounds(self):
        tracker = ExtremaTracker()
        for v in (3.0, -1.0, 2.5, 7.0):
            tracker.update(v)
        self.assertEqual(tracker.bounds, (-1.0, 7.0))
        self.assertEqual(tracker.count, 4)

    def test_single_sample(self):
        tracker = ExtremaTracker([1e12])
        self.assertEqual(tracker.bounds, (1e12, 1e12))

    def test_large_values_not_clipped_by_sentinel(self):
        tracker = ExtremaTracker([-5e10, 5e10])
        self.assertEqual(tracker.bounds, (-5e10, 5e10))

    def test_non_finite_skipped(self):
        tracker = ExtremaTracker([np.nan, np.inf, 2.0, -np.inf])
        self.assertEqual(tracker.bounds, (2.0, 2.0))
        self.assertEqual(tracker.count, 1)

        tracker = ExtremaTracker([np.nan, np.nan])
        self.assertIsNone(tracker.bounds)


if __name__ == "__main__":
    unittest.main()
