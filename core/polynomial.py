import re

import numpy as np
from numba import njit

from core.exceptions import ParseError

FACTOR_SEPARATOR = ";"

_TOKEN_SPLIT = re.compile(r"[,\s]+")
# decimal or scientific literal, plus the NaN / Infinity spellings; no "inf" or "1_000"
_NUMBER = re.compile(r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_OPEN_BRACKETS = str.maketrans({"(": " ", "[": " "})
_CLOSE_BRACKETS = str.maketrans({")": FACTOR_SEPARATOR, "]": FACTOR_SEPARATOR})


@njit
def _convolve(a, b):
    out = np.zeros(len(a) + len(b) - 1)
    for i in range(len(a)):
        for j in range(len(b)):
            out[i + j] += a[i] * b[j]
    return out


def parse_number(token: str) -> float:
    """Reads one numeric token; raises ValueError outside the accepted grammar."""
    token = token.strip()
    if not _NUMBER.fullmatch(token):
        raise ValueError(f"not a number: '{token}'")
    return float(token)


def parse_polynomial(text: str) -> np.ndarray:
    """
    Parses a comma and/or whitespace separated coefficient list.

    Args:
        text: e.g. "1, -1.734834, 0.752412".

    Returns:
        np.ndarray: Coefficients in ascending powers of z^-1.

    Raises:
        ParseError: If any token is not a number.
    """
    tokens = [tok for tok in _TOKEN_SPLIT.split(text.strip()) if tok]
    coeffs = np.empty(len(tokens), dtype=float)
    for i, tok in enumerate(tokens):
        try:
            coeffs[i] = parse_number(tok)
        except ValueError:
            raise ParseError(
                f"Couldn't parse coefficient '{tok}' in: {text}", text=text, token=tok
            ) from None
    return coeffs


def parse_polynomial_product(text: str) -> np.ndarray:
    """
    Parses a product of bracketed factors such as "0.00439456;(1,2,1)[1,1]".

    Opening brackets are dropped and closing brackets end a factor, so
    "(1,1)(1,-1)" is read as "1,1;1,-1". Each factor is parsed and the
    factors are convolved left to right, starting from the identity [1].
    Empty input yields [1].
    """
    normalized = text.translate(_OPEN_BRACKETS).translate(_CLOSE_BRACKETS)

    return multiply_all(
        parse_polynomial(factor)
        for factor in normalized.split(FACTOR_SEPARATOR)
        if factor.strip()
    )


def multiply(a, b) -> np.ndarray:
    """Discrete convolution, len(c) = len(a) + len(b) - 1."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.size == 0 or b.size == 0:
        return np.empty(0)
    return _convolve(a, b)


def multiply_all(factors) -> np.ndarray:
    result = np.ones(1)
    for factor in factors:
        result = multiply(result, factor)
    return result


def format_coefficients(coeffs) -> str:
    """Console echo of a coefficient array, up to 6 decimals, no trailing zeros."""
    parts = []
    for c in coeffs:
        text = f"{c:.6f}".rstrip("0").rstrip(".")
        parts.append("0" if text in ("", "-0") else text)
    return ", ".join(parts)
