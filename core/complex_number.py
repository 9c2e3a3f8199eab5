import math


class Complex:
    """
    Immutable complex value used by the frequency response engine.

    Every operation returns a new instance. Division by a zero-modulus value
    yields NaN components instead of raising, so a single singular frequency
    does not abort a sweep.
    """

    __slots__ = ("_re", "_im")

    def __init__(self, real=0.0, imag=0.0):
        object.__setattr__(self, "_re", float(real))
        object.__setattr__(self, "_im", float(imag))

    def __setattr__(self, name, value):
        raise AttributeError("Complex values are immutable")

    @property
    def real(self):
        return self._re

    @property
    def imag(self):
        return self._im

    @classmethod
    def from_complex(cls, value):
        value = complex(value)
        return cls(value.real, value.imag)

    def __complex__(self):
        return complex(self._re, self._im)

    def __iter__(self):
        yield self._re
        yield self._im

    def __eq__(self, other):
        if isinstance(other, Complex):
            return self._re == other._re and self._im == other._im
        if isinstance(other, (int, float, complex)):
            return complex(self) == other
        return NotImplemented

    def __hash__(self):
        return hash((self._re, self._im))

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self):
        return format_scientific(self._re, signed=True) + (
            format_scientific(self._im, signed=True) + "i"
        )

    def __add__(self, other):
        return add(self, _coerce(other))

    __radd__ = __add__

    def __mul__(self, other):
        return multiply(self, _coerce(other))

    __rmul__ = __mul__

    def __truediv__(self, other):
        return divide(self, _coerce(other))

    def __rtruediv__(self, other):
        return divide(_coerce(other), self)

    def __neg__(self):
        return Complex(-self._re, -self._im)

    def __sub__(self, other):
        return add(self, -_coerce(other))

    def conjugate(self):
        return Complex(self._re, -self._im)

    def modulus(self):
        return modulus(self)

    def argument(self):
        return argument(self)

    def is_finite(self):
        return math.isfinite(self._re) and math.isfinite(self._im)


def _coerce(value):
    if isinstance(value, Complex):
        return value
    return Complex.from_complex(value)


def add(a, b):
    return Complex(a.real + b.real, a.imag + b.imag)


def multiply(a, b):
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def divide(a, b):
    """Rationalizes a / b with b's squared modulus; a zero modulus gives NaN."""
    den = b.real * b.real + b.imag * b.imag
    if den == 0.0:
        return Complex(math.nan, math.nan)
    return Complex(
        (a.real * b.real + a.imag * b.imag) / den,
        (b.real * a.imag - b.imag * a.real) / den,
    )


def modulus(a):
    return math.sqrt(a.real * a.real + a.imag * a.imag)


def argument(a):
    """Phase angle in radians, range (-pi, pi]."""
    angle = math.atan2(a.imag, a.real)
    # atan2(-0.0, x<0) lands on -pi
    if angle == -math.pi:
        return math.pi
    return angle


def exp(a):
    scale = math.exp(a.real)
    return Complex(scale * math.cos(a.imag), scale * math.sin(a.imag))


def format_scientific(value, signed=False):
    """
    Scientific notation with 6 digits after the point and an unpadded exponent,
    e.g. 0.0123456 -> '1.234560E-2'. With signed=True a leading '+' is kept.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        if value < 0:
            return "-Infinity"
        return "+Infinity" if signed else "Infinity"

    text = f"{value:+.6E}" if signed else f"{value:.6E}"
    mantissa, exponent = text.split("E")
    return f"{mantissa}E{int(exponent)}"
