"""Integer helpers: parsing, digit counting and base conversion.

Values are treated the way fixed-width machine integers would treat them:
signed results wrap to 32 or 64 bits and unsigned ones to 32 bits.
"""

import struct
from itertools import takewhile

_UPPER_DIGITS = "0123456789ABCDEF"
_LOWER_DIGITS = "0123456789abcdef"


def _wrap(value, bits, signed=True):
    """Reduce ``value`` to a ``bits``-wide integer."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def _f32(value):
    """Round ``value`` to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def power(i):
    """Return 10 raised to ``i`` as a 32-bit int; anything below 1 gives 10."""
    return _wrap(10 ** max(i, 1), 32)


def nbr_len(nbr):
    """Count the decimal digits of a positive number; 0 for zero or less."""
    return len(str(nbr)) if nbr > 0 else 0


def is_negative(n):
    """Tell whether ``n`` is below zero."""
    return n < 0


def parse_int(text):
    """Extract a number from ``text``.

    Scanning starts at the first character between ``0`` and ``:``, then
    takes the run of digits ``1``-``9`` that follows. A ``0`` ends the run,
    so ``"100"`` gives 1. Text without such a run gives 0.
    """
    start = next((i for i, ch in enumerate(text) if "0" <= ch <= ":"), None)
    if start is None:
        return 0
    run = "".join(takewhile(lambda ch: "1" <= ch <= "9", text[start:]))
    return _wrap(int(run), 32) if run else 0


def int_to_str(nb):
    """Return the decimal text of a 64-bit signed integer."""
    return str(_wrap(nb, 64))


def format_int(nbr):
    """Return the decimal text of a 32-bit signed integer."""
    return str(_wrap(nbr, 32))


def format_int_via_float(nbr):
    """Return decimal text for ``nbr`` built digit by digit in single precision.

    The digits come from scaling the value below 1 as a single-precision
    float and peeling off one digit at a time, so large values lose
    precision and negative values yield characters other than digits.
    """
    nbr = _wrap(nbr, 32)
    value = _f32(nbr)
    sign = ""
    if is_negative(nbr):
        sign = "-"
        nbr = _wrap(-nbr, 32)
    if nbr == 0:
        return sign + "0"
    length = nbr_len(nbr)
    value = _f32(value / _f32(power(length)))
    digits = []
    for _ in range(length):
        scaled = _f32(value * 10)
        digit = int(scaled)
        value = _f32(scaled - digit)
        digits.append(chr(digit + 48))
    return sign + "".join(digits)


def format_unsigned(nb):
    """Return the decimal text of ``nb`` read as a 32-bit unsigned integer."""
    return str(_wrap(nb, 32, signed=False))


def format_base(nbr, base, upper):
    """Write ``nbr`` in ``base`` (2 to 16).

    Upper-case output reads the value as a 32-bit int, lower-case output as
    a 64-bit one. Negative values produce an empty string.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    nbr = _wrap(nbr, 32 if upper else 64)
    if nbr == 0:
        return "0"
    if nbr < 0:
        return ""
    table = _UPPER_DIGITS if upper else _LOWER_DIGITS
    digits = []
    while nbr:
        nbr, rest = divmod(nbr, base)
        digits.append(table[rest])
    return "".join(reversed(digits))


def format_pointer(address):
    """Return ``address`` as lower-case hexadecimal prefixed with ``0x``."""
    return "0x" + format_base(address, 16, upper=False)