import numpy as np

from core.frequency_response import compute_frequency_response
from core.polynomial import format_coefficients
from core.time_response import compute_time_response


class ZTransferFunction:
    """
    Representation of a discrete-time SISO Transfer Function.
    H(z) = Num(z^-1) / Den(z^-1), coefficients in ascending powers of z^-1.
    """

    def __init__(self, num, den):
        self.num = np.array(num, dtype=float)
        self.den = np.array(den, dtype=float)

    def __repr__(self):
        """
        String representation of the transfer function.
        """
        return (
            f"ZTF(Num=[{format_coefficients(self.num)}], "
            f"Den=[{format_coefficients(self.den)}])"
        )

    def frequency_response(self, start_frequency, options, sample_rate=1.0):
        return compute_frequency_response(
            self.num, self.den, start_frequency, options, sample_rate
        )

    def time_response(self):
        return compute_time_response(self.num, self.den)
