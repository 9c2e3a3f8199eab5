import math

import numpy as np

from config import FREQUENCY_UNITS, SWEEP_PARAMS
from core import complex_number as cn
from core.complex_number import Complex
from core.exceptions import InvalidOptionError
from core.extrema import ExtremaTracker

NUM_POINTS = SWEEP_PARAMS["num_points"]


class SweepOptions:
    """
    Explicit sweep configuration.

    Args:
        decade_count (int): Number of decades swept (2, 3 or 4).
        frequency_unit (str): Unit of the start frequency and of the table's
            first column, one of "rad/samp", "cyc/samp", "rad/sec", "cyc/sec".
    """

    def __init__(self, decade_count=2, frequency_unit="rad/samp"):
        try:
            decade_count = int(decade_count)
        except (TypeError, ValueError):
            raise InvalidOptionError(
                f"Decade count must be 2, 3 or 4: {decade_count!r}"
            ) from None
        if decade_count not in SWEEP_PARAMS["decade_resolution"]:
            raise InvalidOptionError(f"Decade count must be 2, 3 or 4: {decade_count}")
        if frequency_unit not in FREQUENCY_UNITS:
            raise InvalidOptionError(
                f"Unknown frequency unit '{frequency_unit}', "
                f"expected one of {', '.join(FREQUENCY_UNITS)}"
            )
        self.decade_count = decade_count
        self.frequency_unit = frequency_unit

    @property
    def points_per_decade(self):
        return SWEEP_PARAMS["decade_resolution"][self.decade_count]

    def __eq__(self, other):
        if not isinstance(other, SweepOptions):
            return NotImplemented
        return (self.decade_count, self.frequency_unit) == (
            other.decade_count,
            other.frequency_unit,
        )

    def __repr__(self):
        return (
            f"SweepOptions(decade_count={self.decade_count}, "
            f"frequency_unit='{self.frequency_unit}')"
        )


def to_rad_per_sample(value, unit, sample_rate):
    """Converts a frequency in `unit` to radians/sample."""
    if unit == "cyc/samp":
        return value * (2.0 * math.pi)
    if unit == "rad/sec":
        return value / sample_rate
    if unit == "cyc/sec":
        return value / (sample_rate / 2.0 / math.pi)
    return value


def from_rad_per_sample(value, unit, sample_rate):
    """Inverse of to_rad_per_sample; works on scalars and numpy arrays."""
    if unit == "cyc/samp":
        return value / (2.0 * math.pi)
    if unit == "rad/sec":
        return value * sample_rate
    if unit == "cyc/sec":
        return value * (sample_rate / 2.0 / math.pi)
    return value


def generate_sweep(start, points_per_decade, num_points=NUM_POINTS):
    """
    Geometric sweep: f[0] = start, f[i] = f[i-1] * 10^(1/points_per_decade).
    Each point is derived from its predecessor so the sequence matches a
    running product exactly.
    """
    ratio = math.pow(10.0, 1.0 / points_per_decade)
    freqs = np.empty(num_points, dtype=float)
    freqs[0] = start
    for i in range(1, num_points):
        freqs[i] = ratio * freqs[i - 1]
    return freqs


def evaluate_series(coeffs, z_inv):
    """Sum of coeffs[k] * z_inv^k with an incrementally updated power."""
    total = Complex(0.0, 0.0)
    power = Complex(1.0, 0.0)
    for c in coeffs:
        total = total + Complex(c, 0.0) * power
        power = power * z_inv
    return total


def evaluate_on_unit_circle(num, den, freq):
    """H(e^{jw}) for one frequency in rad/sample; a (0, 0) denominator gives NaN."""
    z_inv = cn.exp(Complex(0.0, -freq))
    return cn.divide(evaluate_series(num, z_inv), evaluate_series(den, z_inv))


class FrequencyResponseResult:
    """
    Complex response over a geometric sweep.

    Attributes:
        frequencies (np.ndarray): Sweep in rad/sample.
        response (tuple[Complex]): One value per frequency, empty when the
            result is empty.
        real_bounds / imag_bounds: (min, max) of the real / imaginary parts,
            or None when no finite value exists.
        frequency_unit, sample_rate: Used to relabel the frequency axis.
    """

    def __init__(
        self,
        frequencies,
        response,
        real_bounds,
        imag_bounds,
        frequency_unit="rad/samp",
        sample_rate=1.0,
    ):
        self.frequencies = frequencies
        self.response = tuple(response)
        self.real_bounds = real_bounds
        self.imag_bounds = imag_bounds
        self.frequency_unit = frequency_unit
        self.sample_rate = sample_rate

    @classmethod
    def empty(cls, frequencies, frequency_unit="rad/samp", sample_rate=1.0):
        return cls(frequencies, (), None, None, frequency_unit, sample_rate)

    @property
    def is_empty(self):
        return len(self.response) == 0

    def __len__(self):
        return len(self.response)

    @property
    def max_real(self):
        return None if self.real_bounds is None else self.real_bounds[1]

    @property
    def min_real(self):
        return None if self.real_bounds is None else self.real_bounds[0]

    @property
    def max_imag(self):
        return None if self.imag_bounds is None else self.imag_bounds[1]

    @property
    def min_imag(self):
        return None if self.imag_bounds is None else self.imag_bounds[0]

    def display_frequencies(self):
        """Sweep expressed in the unit the start frequency was given in."""
        return from_rad_per_sample(
            self.frequencies, self.frequency_unit, self.sample_rate
        )

    def as_array(self):
        return np.array([complex(v) for v in self.response], dtype=complex)

    def gain_db(self):
        """20*log10|H|; a zero magnitude gives -inf, NaN stays NaN."""
        mags = np.array([v.modulus() for v in self.response], dtype=float)
        with np.errstate(divide="ignore", invalid="ignore"):
            return 20.0 * np.log10(mags)

    def phase_deg(self):
        return np.degrees(np.array([v.argument() for v in self.response], dtype=float))

    def nyquist_index(self):
        """First sweep index at or past pi rad/sample, or None."""
        past = np.nonzero(self.frequencies >= math.pi)[0]
        return int(past[0]) if past.size > 0 else None

    def rows(self):
        """(frequency in display unit, Complex) pairs."""
        return list(zip(self.display_frequencies().tolist(), self.response))


def compute_frequency_response(num, den, start_frequency, options, sample_rate=1.0):
    """
    Evaluates N(z^-1)/D(z^-1) on the unit circle over a 601 point sweep.

    Args:
        num, den: Coefficients in ascending powers of z^-1.
        start_frequency (float): First frequency in options.frequency_unit.
        options (SweepOptions): Decade count and unit.
        sample_rate (float): Samples per second, used by the per-second units.

    Returns:
        FrequencyResponseResult: Empty when num or den has no coefficients.
    """
    start = to_rad_per_sample(start_frequency, options.frequency_unit, sample_rate)
    freqs = generate_sweep(start, options.points_per_decade)

    num = np.asarray(num, dtype=float)
    den = np.asarray(den, dtype=float)
    if num.size == 0 or den.size == 0:
        return FrequencyResponseResult.empty(
            freqs, options.frequency_unit, sample_rate
        )

    num_list = num.tolist()
    den_list = den.tolist()

    real_tracker = ExtremaTracker()
    imag_tracker = ExtremaTracker()
    response = []
    for f in freqs:
        value = evaluate_on_unit_circle(num_list, den_list, float(f))
        response.append(value)
        real_tracker.update(value.real)
        imag_tracker.update(value.imag)

    return FrequencyResponseResult(
        freqs,
        response,
        real_tracker.bounds,
        imag_tracker.bounds,
        options.frequency_unit,
        sample_rate,
    )
