import pytest

from minilib.numbers import (
    format_base,
    format_int,
    format_int_via_float,
    format_pointer,
    format_unsigned,
    int_to_str,
    is_negative,
    nbr_len,
    parse_int,
    power,
)


def test_power_floor_is_ten():
    assert power(0) == 10
    assert power(1) == 10
    assert power(-3) == 10


@pytest.mark.parametrize("i", range(2, 10))
def test_power_matches_powers_of_ten_in_range(i):
    assert power(i) == 10**i


def test_power_wraps_past_32_bits():
    assert power(10) < 2**31
    assert power(10) < 10**10


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 123456, 2147483647])
def test_nbr_len_counts_digits(n):
    assert nbr_len(n) == len(str(n))


@pytest.mark.parametrize("n", [0, -1, -500])
def test_nbr_len_non_positive_is_zero(n):
    assert nbr_len(n) == 0


def test_is_negative():
    assert is_negative(-1) is True
    assert is_negative(0) is False
    assert is_negative(3) is False


def test_parse_int_precision_spec():
    assert parse_int("2f") == 2


def test_parse_int_skips_leading_text():
    assert parse_int("x37y") == 37


def test_parse_int_zero_ends_run():
    assert parse_int("100") == 1


@pytest.mark.parametrize("text", ["", "abc", "0", ":5"])
def test_parse_int_without_run_is_zero(text):
    assert parse_int(text) == 0


@pytest.mark.parametrize("n", [0, 7, -7, 1234567890, -9876543210, 2**62])
def test_int_to_str_round_trip(n):
    assert int(int_to_str(n)) == n


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647])
def test_format_int_in_range(n):
    assert format_int(n) == str(n)


def test_format_int_wraps_to_32_bits():
    assert format_int(2**32 + 5) == "5"


def test_format_int_via_float_small_values():
    assert format_int_via_float(0) == "0"
    assert format_int_via_float(2) == "2"


@pytest.mark.parametrize("n", [1, 5, 13, 250, 9999, 123456])
def test_format_int_via_float_keeps_digit_count(n):
    result = format_int_via_float(n)
    assert len(result) == nbr_len(n)
    assert result[0] in "0123456789"


def test_format_int_via_float_negative_has_sign():
    assert format_int_via_float(-7).startswith("-")


def test_format_unsigned():
    assert format_unsigned(123) == "123"
    assert format_unsigned(-1) == str(2**32 - 1)


@pytest.mark.parametrize("base", [2, 8, 10, 16])
@pytest.mark.parametrize("n", [1, 15, 255, 4096, 2147483647])
@pytest.mark.parametrize("upper", [True, False])
def test_format_base_round_trip(n, base, upper):
    assert int(format_base(n, base, upper), base) == n


def test_format_base_case():
    upper = format_base(48879, 16, True)
    lower = format_base(48879, 16, False)
    assert upper == upper.upper()
    assert lower == lower.lower()
    assert upper.lower() == lower


def test_format_base_zero_and_negative():
    assert format_base(0, 16, True) == "0"
    assert format_base(-5, 16, False) == ""
    assert format_base(-5, 8, True) == ""


@pytest.mark.parametrize("base", [0, 1, 17, 36])
def test_format_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        format_base(10, base, False)


def test_format_base_upper_wraps_to_32_bits():
    assert format_base(2**32 + 10, 16, True) == "A"


def test_format_pointer():
    text = format_pointer(3054)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 3054