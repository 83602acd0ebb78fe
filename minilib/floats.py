"""Fixed-point, scientific and shortest-form rendering of floating values.

Fractional digits are computed in single precision and the fraction is
rounded on one extra digit, so results follow that arithmetic rather than
correctly rounded decimal output.
"""

import math
import struct

from .numbers import format_int, format_int_via_float, nbr_len, power

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _f32(value):
    """Round ``value`` to single precision, overflowing to infinity."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_int(value):
    """Truncate to a 32-bit int; NaN and out-of-range values give INT_MIN."""
    if math.isnan(value) or math.isinf(value):
        return _INT_MIN
    whole = int(value)
    if not _INT_MIN <= whole <= _INT_MAX:
        return _INT_MIN
    return whole


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _trunc_mod(a, b):
    return a - b * _trunc_div(a, b)


def _digits(number, approximate):
    return format_int_via_float(number) if approximate else format_int(number)


def _fixed(value, n, approximate):
    """Render a non-negative value with ``n`` fractional digits."""
    f = _f32(value)
    whole = _to_int(f)
    fraction = _f32(f - _f32(whole))
    index = _to_int(_f32(fraction * _f32(power(n + 1))))
    rest = _trunc_mod(index, 10)
    index = _trunc_div(index - rest, 10) + (1 if rest >= 5 else 0)
    if index >= 1000000:
        f = _f32(f + 0.000001)
        index = 0
    parts = [_digits(_to_int(f), approximate), "."]
    while index < power(n - 1) and n > 1:
        parts.append("0")
        n -= 1
    parts.append(_digits(index, approximate))
    return "".join(parts)


def format_fixed(value, precision=6, approximate=False):
    """Render ``value`` in fixed-point notation with ``precision`` decimals.

    With ``approximate`` the digits of each integer part are produced
    through single-precision arithmetic.
    """
    f = _f32(float(value))
    sign = ""
    if f < 0:
        f = -f
        sign = "-"
    return sign + _fixed(f, precision, approximate)


def format_scientific(value, precision=6, upper=False, approximate=False):
    """Render ``value`` as a mantissa, ``e`` or ``E`` and a signed exponent.

    Raises OverflowError for infinite values.
    """
    f = float(value)
    if math.isinf(f):
        raise OverflowError("cannot render an infinite value in scientific form")
    sign = ""
    if f < 0:
        f = -f
        sign = "-"
    count = 0
    if 0 < f < 1:
        while f < 1:
            f *= 10
            count += 1
        exponent_sign = "-"
    else:
        while f > 10:
            f /= 10
            count += 1
        exponent_sign = "+"
    return "".join(
        (
            sign,
            _fixed(f, precision, approximate),
            "E" if upper else "e",
            exponent_sign,
            "0" if count < 10 else "",
            _digits(count, approximate),
        )
    )


def format_general(value, precision=6, upper=False, approximate=False):
    """Render ``value`` in fixed form when it fits in ``precision`` digits.

    Otherwise the scientific form with one digit fewer is used. Negative
    values too large for the fixed form give an empty string.
    """
    f = _f32(float(value))
    whole = _to_int(f)
    reduced = whole
    for _ in range(max(precision, 0)):
        if reduced == 0:
            break
        reduced = _trunc_div(reduced, 10)
    if reduced == 0:
        digits = precision - nbr_len(whole)
        sign = ""
        if f < 0:
            f = -f
            sign = "-"
        return sign + _fixed(f, digits, approximate)
    if reduced > 0:
        return format_scientific(f, precision - 1, upper, approximate)
    return ""