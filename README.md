# minilib

A small toolkit of string helpers, integer and float formatters, and a
printf-style formatter with its own conversion rules.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

`minilib.printf` renders format strings with the conversions
`s d i c o x X u f F e E g G`. The descriptor dialect also knows `p` and
`b`, and builds the decimal digits of `%d`, `%i` and float parts through
single-precision arithmetic.

```python
from minilib.printf import sformat, dformat, printf, dprintf, print_lines

text = sformat("Hello %s %c", "World", "!")    # "Hello World !"
dformat("%p %b", 4096, 5)                      # "0x1000 101"
printf("%d items\n", 3)                         # written to standard output
dprintf(2, "%s output --> %i\n", "Error", 2)    # written to file descriptor 2
print_lines(["one", "two"])                     # each on its own line
```

- `sformat` and `dformat` return the text; `printf` and `dprintf` write it
  and return its length.
- `render(fmt, args, dialect)` takes the arguments as a sequence together
  with a `Dialect` (`Dialect.STANDARD` or `Dialect.DESCRIPTOR`).
- A single-digit precision such as `%.3f` or `%.2s` is honoured; floats
  default to 6 decimals.
- One or more spaces after `%` emit a single space.
- A conversion letter the dialect does not know gives `%` and uses no
  argument.
- A `None` format, or running out of arguments, raises `TypeError`.
- `count_space` and `cut_format` expose how a directive is read.

Field widths, flags and length modifiers are not supported.

## Numbers

```python
from minilib.numbers import parse_int, int_to_str, format_base, format_pointer

parse_int("abc42def")       # 42
int_to_str(-17)             # "-17"
format_base(255, 16, True)  # "FF"
format_pointer(4096)        # "0x1000"
```

Values wrap the way fixed-width integers do. `format_base` raises
`ValueError` for a base outside 2 to 16 and gives an empty string for
negative values. `parse_int` stops at the first `0` after the digits
start, so `"100"` gives 1. Also available: `power`, `nbr_len`,
`is_negative`, `format_int`, `format_int_via_float` and `format_unsigned`.

## Floats

```python
from minilib.floats import format_fixed, format_scientific, format_general
```

`format_fixed`, `format_scientific` and `format_general` produce the `%f`,
`%e`/`%E` and `%g`/`%G` renderings used by the formatter. Fractions are
computed in single precision, so the digits follow that arithmetic rather
than correctly rounded decimal output. `format_scientific` raises
`OverflowError` for infinite values.

## Strings

```python
from minilib.strings import split_words, capitalize, compare, reverse

split_words("  hello   world ", " ")  # ["hello", "world"]
capitalize("hELLO wORLD")             # "Hello World"
compare("abc", "abd")                 # -1
reverse("abc")                        # "cba"
```

`lowercase`, `compare_n` and `clean` are also available.

## Command line

```
minilib
```

prints a greeting on standard output and a sample error line on standard
error.