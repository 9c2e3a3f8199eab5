import math
import unittest

import numpy as np

from config import FREQUENCY_UNITS
from core.complex_number import Complex
from core.exceptions import InvalidOptionError
from core.frequency_response import (
    SweepOptions,
    compute_frequency_response,
    evaluate_series,
    from_rad_per_sample,
    generate_sweep,
    to_rad_per_sample,
)


class TestSweep(unittest.TestCase):
    """
    Unit tests for unit conversion and the geometric frequency sweep.
    """

    def test_cyc_per_sec_conversion(self):
        f0 = to_rad_per_sample(100.0, "cyc/sec", 44100.0)
        self.assertAlmostEqual(f0, 0.014247, delta=1e-6)

    def test_other_conversions(self):
        self.assertEqual(to_rad_per_sample(0.5, "rad/samp", 8000.0), 0.5)
        self.assertAlmostEqual(to_rad_per_sample(0.25, "cyc/samp", 8000.0), math.pi / 2)
        self.assertAlmostEqual(to_rad_per_sample(800.0, "rad/sec", 8000.0), 0.1)

    def test_round_trip_units(self):
        for unit in FREQUENCY_UNITS:
            back = from_rad_per_sample(to_rad_per_sample(3.0, unit, 1000.0), unit, 1000.0)
            self.assertAlmostEqual(back, 3.0)

    def test_sweep_length_and_span(self):
        for decades, ppd in ((2, 300), (3, 200), (4, 150)):
            opts = SweepOptions(decades, "rad/samp")
            self.assertEqual(opts.points_per_decade, ppd)
            freqs = generate_sweep(0.001, ppd)
            self.assertEqual(len(freqs), 601)
            self.assertTrue(np.all(np.diff(freqs) > 0))
            self.assertAlmostEqual(freqs[-1] / freqs[0], 10.0**decades, delta=1e-6 * 10**decades)

    def test_invalid_options(self):
        with self.assertRaises(InvalidOptionError):
            SweepOptions(5, "rad/samp")
        with self.assertRaises(InvalidOptionError):
            SweepOptions("two", "rad/samp")
        with self.assertRaises(InvalidOptionError):
            SweepOptions(2, "Hz")

    def test_decade_count_from_text(self):
        self.assertEqual(SweepOptions("3", "cyc/sec").decade_count, 3)


class TestFrequencyResponse(unittest.TestCase):
    def setUp(self):
        self.num = [0.00439456, 0.00878912, 0.00439456]
        self.den = [1.0, -1.734834, 0.752412]

    def test_evaluate_series_incremental_power(self):
        z = Complex(0.0, 1.0)
        value = evaluate_series([1.0, 2.0, 3.0], z)
        # 1 + 2j + 3j^2
        self.assertEqual(value, Complex(-2.0, 2.0))

    def test_always_601_rows(self):
        for unit in FREQUENCY_UNITS:
            for decades in (2, 3, 4):
                res = compute_frequency_response(
                    self.num, self.den, 0.01, SweepOptions(decades, unit), 44100.0
                )
                self.assertEqual(len(res), 601)
                self.assertEqual(len(res.rows()), 601)

    def test_unity_gain(self):
        res = compute_frequency_response([1.0], [1.0], 0.01, SweepOptions(), 1.0)
        for v in res.response:
            self.assertEqual(v, Complex(1.0, 0.0))
        self.assertEqual(res.real_bounds, (1.0, 1.0))
        self.assertEqual(res.imag_bounds, (0.0, 0.0))

    def test_lowpass_dc_gain(self):
        res = compute_frequency_response(
            self.num, self.den, 1e-6, SweepOptions(2, "rad/samp"), 1.0
        )
        dc = sum(self.num) / sum(self.den)
        self.assertAlmostEqual(res.response[0].real, dc, places=4)

    def test_matches_numpy_evaluation(self):
        res = compute_frequency_response(
            self.num, self.den, 0.01, SweepOptions(3, "rad/samp"), 1.0
        )
        z_inv = np.exp(-1j * res.frequencies)
        expected = np.polyval(self.num[::-1], z_inv) / np.polyval(self.den[::-1], z_inv)
        np.testing.assert_allclose(res.as_array(), expected, rtol=1e-9, atol=1e-12)

    def test_units_only_relabel(self):
        rate = 44100.0
        base = compute_frequency_response(
            self.num, self.den, 0.01, SweepOptions(2, "rad/samp"), rate
        )
        for unit in FREQUENCY_UNITS:
            start = from_rad_per_sample(0.01, unit, rate)
            res = compute_frequency_response(
                self.num, self.den, start, SweepOptions(2, unit), rate
            )
            np.testing.assert_allclose(res.as_array(), base.as_array(), rtol=1e-9)
            np.testing.assert_allclose(res.frequencies, base.frequencies, rtol=1e-12)
            np.testing.assert_allclose(res.display_frequencies()[0], start, rtol=1e-12)

    def test_empty_coefficients_give_empty_result(self):
        res = compute_frequency_response([], self.den, 0.01, SweepOptions(), 1.0)
        self.assertTrue(res.is_empty)
        self.assertIsNone(res.real_bounds)
        self.assertEqual(len(res.frequencies), 601)

        res = compute_frequency_response(self.num, [], 0.01, SweepOptions(), 1.0)
        self.assertTrue(res.is_empty)

    def test_zero_denominator_sample_is_nan_and_sweep_continues(self):
        res = compute_frequency_response([1.0], [0.0], 0.01, SweepOptions(), 1.0)
        self.assertEqual(len(res), 601)
        for v in res.response:
            self.assertTrue(math.isnan(v.real) and math.isnan(v.imag))
        self.assertIsNone(res.real_bounds)
        self.assertIsNone(res.imag_bounds)

    def test_idempotent(self):
        opts = SweepOptions(4, "cyc/sec")
        a = compute_frequency_response(self.num, self.den, 100.0, opts, 44100.0)
        b = compute_frequency_response(self.num, self.den, 100.0, opts, 44100.0)
        self.assertEqual(a.response, b.response)
        np.testing.assert_array_equal(a.frequencies, b.frequencies)

    def test_extrema_track_parts(self):
        res = compute_frequency_response(
            self.num, self.den, 0.001, SweepOptions(3, "rad/samp"), 1.0
        )
        arr = res.as_array()
        self.assertEqual(res.max_real, arr.real.max())
        self.assertEqual(res.min_real, arr.real.min())
        self.assertEqual(res.max_imag, arr.imag.max())
        self.assertEqual(res.min_imag, arr.imag.min())

    def test_nyquist_index(self):
        res = compute_frequency_response([1.0], [1.0], 0.01, SweepOptions(3), 1.0)
        idx = res.nyquist_index()
        self.assertIsNotNone(idx)
        self.assertGreaterEqual(res.frequencies[idx], math.pi)
        self.assertLess(res.frequencies[idx - 1], math.pi)

        res = compute_frequency_response([1.0], [1.0], 1e-6, SweepOptions(2), 1.0)
        self.assertIsNone(res.nyquist_index())

    def test_gain_and_phase(self):
        res = compute_frequency_response([2.0], [1.0], 0.01, SweepOptions(), 1.0)
        np.testing.assert_allclose(res.gain_db(), 20 * np.log10(2.0))
        np.testing.assert_allclose(res.phase_deg(), 0.0)


if __name__ == "__main__":
    unittest.main()
