import numpy as np
from numba import njit

from config import TIME_RESPONSE_PARAMS
from core.extrema import ExtremaTracker

NUM_SAMPLES = TIME_RESPONSE_PARAMS["num_samples"]
EXTREMA_WINDOW = TIME_RESPONSE_PARAMS["extrema_window"]


@njit
def direct_form_one(num, den, x):
    """
    Direct Form I recursion normalized by den[0]:
        y[n] = (sum_k num[k] x[n-k] - sum_{k>=1} den[k] y[n-k]) / den[0]
    Taps reaching before n = 0 contribute nothing.
    """
    n_samples = len(x)
    y = np.zeros(n_samples)
    for n in range(n_samples):
        acc = 0.0
        for k in range(len(num)):
            if n - k < 0:
                break
            acc += num[k] * x[n - k] / den[0]
        for k in range(1, len(den)):
            if n - k < 0:
                break
            acc -= den[k] * y[n - k] / den[0]
        y[n] = acc
    return y


def unit_impulse(n_samples=NUM_SAMPLES):
    x = np.zeros(n_samples)
    x[0] = 1.0
    return x


def unit_step(n_samples=NUM_SAMPLES):
    return np.ones(n_samples)


class TimeResponseResult:
    """
    Impulse and step responses with their plot bounds.

    The bounds cover samples [0, 500) only; the last samples of the
    512 long sequences are never part of the scaling.
    """

    def __init__(self, impulse, step, impulse_bounds, step_bounds):
        self.impulse = impulse
        self.step = step
        self.impulse_bounds = impulse_bounds
        self.step_bounds = step_bounds

    @classmethod
    def empty(cls):
        return cls(np.empty(0), np.empty(0), None, None)

    @property
    def is_empty(self):
        return self.impulse.size == 0

    def __len__(self):
        return self.impulse.size

    @property
    def max_impulse(self):
        return None if self.impulse_bounds is None else self.impulse_bounds[1]

    @property
    def min_impulse(self):
        return None if self.impulse_bounds is None else self.impulse_bounds[0]

    @property
    def max_step(self):
        return None if self.step_bounds is None else self.step_bounds[1]

    @property
    def min_step(self):
        return None if self.step_bounds is None else self.step_bounds[0]

    def times(self, sample_rate):
        return np.arange(self.impulse.size) / sample_rate

    def rows(self, sample_rate):
        """(time in seconds, impulse, step) triples."""
        return list(
            zip(
                self.times(sample_rate).tolist(),
                self.impulse.tolist(),
                self.step.tolist(),
            )
        )


def compute_time_response(num, den):
    """
    Runs the recursion for a unit impulse and a unit step.

    Returns:
        TimeResponseResult: Empty when num or den has no coefficients or
        den[0] is zero.
    """
    num = np.asarray(num, dtype=float)
    den = np.asarray(den, dtype=float)
    if num.size == 0 or den.size == 0 or den[0] == 0.0:
        return TimeResponseResult.empty()

    impulse = direct_form_one(num, den, unit_impulse())
    step = direct_form_one(num, den, unit_step())

    impulse_tracker = ExtremaTracker(impulse[:EXTREMA_WINDOW])
    step_tracker = ExtremaTracker(step[:EXTREMA_WINDOW])

    return TimeResponseResult(
        impulse, step, impulse_tracker.bounds, step_tracker.bounds
    )
