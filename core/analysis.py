from core.exceptions import (
    ParseError,
    ZeroDenominatorError,
    ZeroFrequencyError,
    ZeroSampleRateError,
)
from core.frequency_response import SweepOptions
from core.polynomial import parse_number, parse_polynomial_product
from core.transfer_function import ZTransferFunction


class AnalysisResult:
    """
    Everything one compute call produces. Built fresh per call and never
    modified afterwards, so it can be handed between threads by reference.
    """

    def __init__(self, tf, options, start_frequency, sample_rate, frequency, time):
        self.tf = tf
        self.options = options
        self.start_frequency = start_frequency
        self.sample_rate = sample_rate
        self.frequency = frequency
        self.time = time

    def __repr__(self):
        return (
            f"AnalysisResult({self.tf!r}, start={self.start_frequency} "
            f"{self.options.frequency_unit}, rate={self.sample_rate})"
        )


def _parse_coefficients(text, label):
    try:
        return parse_polynomial_product(text)
    except ParseError as e:
        raise ParseError(
            f"Couldn't parse {label}: {text}", text=text, token=e.token
        ) from e


def parse_scalar(value, label):
    """Accepts a number or its text form."""
    if isinstance(value, str):
        try:
            return parse_number(value)
        except ValueError:
            raise ParseError(f"Couldn't parse {label}: {value}", text=value) from None
    return float(value)


def validate_denominator(den, text=None):
    """Refuses [0] and any denominator whose index-0 divisor is zero."""
    shown = text if text is not None else ", ".join(str(c) for c in den)
    if len(den) == 1 and den[0] == 0.0:
        raise ZeroDenominatorError(f"Denominator can't be zero: {shown}")
    if len(den) > 0 and den[0] == 0.0:
        raise ZeroDenominatorError(f"Denominator's first coefficient can't be zero: {shown}")


def analyze(
    numerator_text,
    denominator_text,
    start_frequency,
    sample_rate,
    options=None,
):
    """
    Validates all inputs, then computes the frequency and time responses.

    Checks run in order (numerator, denominator, start frequency, sample rate)
    and the first failure is raised before any engine runs.

    Args:
        numerator_text, denominator_text (str): Coefficient text.
        start_frequency (float | str): Nonzero, in options.frequency_unit.
        sample_rate (float | str): Nonzero samples per second.
        options (SweepOptions): Defaults to 2 decades in rad/samp.

    Returns:
        AnalysisResult

    Raises:
        ParseError, ZeroDenominatorError, ZeroFrequencyError,
        ZeroSampleRateError
    """
    num = _parse_coefficients(numerator_text, "numerator")
    den = _parse_coefficients(denominator_text, "denominator")
    validate_denominator(den, denominator_text)

    start = parse_scalar(start_frequency, "start freq")
    if start == 0.0:
        raise ZeroFrequencyError(f"Start freq can't be zero: {start_frequency}")

    rate = parse_scalar(sample_rate, "sample rate")
    if rate == 0.0:
        raise ZeroSampleRateError(f"Sample rate can't be zero: {sample_rate}")

    if options is None:
        options = SweepOptions()

    tf = ZTransferFunction(num, den)
    return AnalysisResult(
        tf,
        options,
        start,
        rate,
        tf.frequency_response(start, options, rate),
        tf.time_response(),
    )
