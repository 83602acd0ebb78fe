import pytest

from minilib.strings import (
    capitalize,
    clean,
    compare,
    compare_n,
    lowercase,
    reverse,
    split_words,
)


def test_split_words_on_spaces():
    assert split_words("  hello   world ", " ") == ["hello", "world"]


def test_split_words_several_delimiters():
    assert split_words("a,b;;c", ",;") == ["a", "b", "c"]


def test_split_words_only_delimiters():
    assert split_words(" ,, ", ", ") == []
    assert split_words("", " ") == []


def test_split_words_without_delimiters_keeps_text():
    assert split_words("abc def", "") == ["abc def"]
    assert split_words("abc def", None) == ["abc def"]


@pytest.mark.parametrize("text", ["one two three", "x", "tab\tand space"])
def test_split_words_join_round_trip(text):
    words = split_words(text, " \t")
    assert " ".join(words) == " ".join(text.split())


def test_lowercase_ascii_only():
    assert lowercase("HeLLo World 42") == "hello world 42"
    assert lowercase("ÉCOLE") == "École"


def test_capitalize_words():
    assert capitalize("hey, you ARE cool") == "Hey, You Are Cool"


def test_capitalize_single_letters_stay_low():
    assert capitalize("a b c") == "A b c"


def test_capitalize_after_digit_stays_low():
    assert capitalize("42words") == "42words"


def test_capitalize_empty():
    assert capitalize("") == ""


def test_compare_values():
    assert compare("abc", "abc") == 0
    assert compare("abc", "abd") == -1
    assert compare("abd", "abc") == 1
    assert compare("ab", "abc") == -1


@pytest.mark.parametrize("a,b", [("x", "y"), ("hello", "help"), ("", "z")])
def test_compare_antisymmetric(a, b):
    assert compare(a, b) == -compare(b, a)


def test_compare_n_limits_length():
    assert compare_n("abcX", "abcY", 3) == 0
    assert compare_n("abcX", "abcY", 4) == -1
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_negative_compares_all():
    assert compare_n("abcX", "abcY", -1) == -1


@pytest.mark.parametrize("text", ["", "a", "abc", "racecar", "hello world"])
def test_reverse_round_trip(text):
    assert reverse(reverse(text)) == text
    assert len(reverse(text)) == len(text)


def test_reverse_value():
    assert reverse("abc") == "cba"


def test_clean_single_separator():
    assert clean("a-b-c", "-") == "abc"


def test_clean_no_separators_in_text():
    assert clean("abc", "-") == "abc"


def test_clean_several_separators_repeat_kept():
    assert clean("ab", "xy") == "aabb"


def test_clean_empty_separators_drops_all():
    assert clean("abc", "") == ""