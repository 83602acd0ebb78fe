"""A small printf family: rendering to text, to standard output or to a descriptor."""

import operator
import os
import sys
from enum import Enum

from .floats import format_fixed, format_general, format_scientific
from .numbers import (
    format_base,
    format_int,
    format_int_via_float,
    format_pointer,
    format_unsigned,
    parse_int,
)


class Dialect(Enum):
    """The conversions a formatter knows; the value lists their letters.

    The descriptor dialect also knows ``p`` and ``b`` and builds its
    decimal digits through single-precision arithmetic.
    """

    STANDARD = "sdicoxXufFeEgG"
    DESCRIPTOR = "sdicoxXufFpeEgGb"

    @property
    def approximate(self):
        return self is Dialect.DESCRIPTOR


def count_space(spec):
    """Return the number of spaces at the start of ``spec``."""
    return len(spec) - len(spec.lstrip(" "))


def cut_format(text):
    """Return ``text`` up to and including its first letter or ``%``.

    Text holding neither is returned whole.
    """
    for index, ch in enumerate(text):
        if ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "%":
            return text[: index + 1]
    return text


def _take(pending):
    try:
        return next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _string(value, precision):
    if value is None:
        return ""
    text = str(value).split("\0", 1)[0]
    if precision == -1:
        return text
    return text[:precision] if precision >= 0 else ""


def _char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _convert(conversion, pending, precision, dialect):
    if conversion not in dialect.value:
        return "%"
    value = _take(pending)
    approximate = dialect.approximate
    real_precision = 6 if precision == -1 else precision
    if conversion == "s":
        return _string(value, precision)
    if conversion in "di":
        number = operator.index(value)
        return format_int_via_float(number) if approximate else format_int(number)
    if conversion == "c":
        return _char(value)
    if conversion == "o":
        return format_base(operator.index(value), 8, upper=False)
    if conversion == "x":
        return format_base(operator.index(value), 16, upper=False)
    if conversion == "X":
        return format_base(operator.index(value), 16, upper=True)
    if conversion == "b":
        return format_base(operator.index(value), 2, upper=False)
    if conversion == "u":
        return format_unsigned(operator.index(value))
    if conversion == "p":
        return format_pointer(operator.index(value))
    if conversion in "fF":
        return format_fixed(float(value), real_precision, approximate)
    if conversion in "eE":
        return format_scientific(
            float(value), real_precision, conversion == "E", approximate
        )
    return format_general(float(value), real_precision, conversion == "G", approximate)


def _directive(spec, pending, dialect):
    """Render one directive; return the text and the extra characters used."""
    used = count_space(spec)
    prefix = " " if used else ""
    precision = -1
    if spec[used : used + 1] == "." and len(spec) > used + 1:
        precision = parse_int(spec[used + 1 :])
        if len(spec) > used + 2:
            used += 2
        else:
            return prefix, used
    return prefix + _convert(spec[-1], pending, precision, dialect), used


def render(fmt, args, dialect=Dialect.STANDARD):
    """Render ``fmt`` with ``args`` and return the text.

    Raises TypeError when ``fmt`` is None or the arguments run out.
    """
    if fmt is None:
        raise TypeError("format must be a string, not None")
    pending = iter(args)
    out = []
    pos = 0
    while pos < len(fmt):
        if fmt[pos] == "%" and pos + 1 < len(fmt):
            spec = cut_format(fmt[pos + 1 :])
            text, used = _directive(spec, pending, dialect)
            out.append(text)
            pos += used + 2
        else:
            out.append(fmt[pos])
            pos += 1
    return "".join(out)


def sformat(fmt, *args):
    """Render with the standard dialect."""
    return render(fmt, args, Dialect.STANDARD)


def dformat(fmt, *args):
    """Render with the descriptor dialect."""
    return render(fmt, args, Dialect.DESCRIPTOR)


def printf(fmt, *args):
    """Write the rendered text to standard output; return its length."""
    text = sformat(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def dprintf(fd, fmt, *args):
    """Write the rendered text to file descriptor ``fd``; return its length."""
    text = dformat(fmt, *args)
    for stream in (sys.stdout, sys.stderr):
        stream.flush()
    data = memoryview(text.encode("utf-8"))
    while data:
        written = os.write(fd, data)
        data = data[written:]
    return len(text)


def print_lines(lines):
    """Print each string of ``lines`` on its own line."""
    for line in lines:
        printf("%s\n", line)