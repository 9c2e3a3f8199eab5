class BodeZError(Exception):
    """Base class for all exceptions in BodeZ."""

    pass


class ParseError(ValueError, BodeZError):
    """
    Raised when a coefficient or numeric field cannot be read as a number.
    The offending text is kept on the exception for reporting.
    Inherits from ValueError so callers catching float() failures still work.
    """

    def __init__(self, message, text=None, token=None):
        super().__init__(message)
        self.text = text
        self.token = token


class ZeroDenominatorError(ZeroDivisionError, BodeZError):
    """
    Raised when the denominator resolves to [0] or its index-0 coefficient
    (the recursion divisor) is zero.
    """

    pass


class ZeroFrequencyError(ValueError, BodeZError):
    """
    Raised when the sweep start frequency is zero.
    """

    pass


class ZeroSampleRateError(ValueError, BodeZError):
    """
    Raised when the sample rate is zero.
    """

    pass


class InvalidOptionError(ValueError, BodeZError):
    """
    Raised when a sweep option is not recognized (e.g., 5 decades, unknown unit).
    """

    pass
