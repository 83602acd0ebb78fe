"""String helpers: splitting, case changes, comparison and cleaning."""

from itertools import groupby

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _is_letter(ch):
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_digit(ch):
    return "0" <= ch <= "9"


def split_words(text, delimiters):
    """Split ``text`` on any character of ``delimiters``, dropping empty words.

    With no delimiters the whole text is one word.
    """
    if not text:
        return []
    delims = set(delimiters or "")
    return [
        "".join(group)
        for is_delim, group in groupby(text, key=lambda ch: ch in delims)
        if not is_delim
    ]


def lowercase(text):
    """Lower-case the ASCII letters of ``text``, leaving the rest alone."""
    return text.translate(_ASCII_LOWER)


def capitalize(text):
    """Lower-case ``text`` and upper-case the start of each word.

    The first character is always raised. Elsewhere a letter is raised when
    it follows neither a letter nor a digit and is itself followed by a
    letter, so single-letter words after the first stay lower-case.
    """
    chars = list(lowercase(text))
    if chars and "a" <= chars[0] <= "z":
        chars[0] = chars[0].upper()
    for i in range(1, len(chars)):
        before = chars[i - 1]
        after = chars[i + 1] if i + 1 < len(chars) else ""
        if (
            not _is_letter(before)
            and not _is_digit(before)
            and _is_letter(chars[i])
            and after
            and _is_letter(after)
        ):
            chars[i] = chars[i].upper()
    return "".join(chars)


def compare(s1, s2):
    """Return -1, 0 or 1 as ``s1`` sorts before, equal to or after ``s2``."""
    return (s1 > s2) - (s1 < s2)


def compare_n(s1, s2, n):
    """Compare at most the first ``n`` characters; a negative ``n`` means all."""
    if n < 0:
        return compare(s1, s2)
    return compare(s1[:n], s2[:n])


def reverse(text):
    """Return ``text`` reversed."""
    return text[::-1]


def clean(text, separators):
    """Drop separator characters from ``text``.

    Each character is emitted once for every separator it differs from, so
    with a single separator this simply removes it, while several
    separators repeat the kept characters.
    """
    return "".join(
        ch * sum(sep != ch for sep in separators) for ch in text
    )