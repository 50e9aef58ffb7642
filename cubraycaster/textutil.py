"""Small text helpers used by the map file parser."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

_ATOI_BLANKS = frozenset("\t\n\v\f\r ")


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream one at a time, newline included.

    The last line is yielded as it is, with or without a trailing newline.
    """
    yield from iter(stream.readline, "")


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` to an int.

    Leading blanks (tab, newline, vertical tab, form feed, carriage return,
    space) are skipped, one optional sign is accepted, and conversion stops
    at the first character that is not an ASCII digit. A string with no
    digits converts to 0.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_BLANKS:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < length and "0" <= text[end] <= "9":
        end += 1
    digits = text[pos:end]
    return sign * int(digits) if digits else 0


def count_words(text: str, sep: str) -> int:
    """Count the words of ``text`` separated by ``sep``.

    Separators and newlines in front of a word are skipped; once a word has
    started it runs until the next separator.
    """
    words = 0
    pos = 0
    length = len(text)
    while pos < length:
        while pos < length and text[pos] in (sep, "\n"):
            pos += 1
        if pos < length:
            words += 1
        while pos < length and text[pos] != sep:
            pos += 1
    return words


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces.

    When :func:`count_words` finds no word at all, the result is empty.
    """
    if count_words(text, sep) == 0:
        return []
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def tail_matches(text: str, suffix: str, n: int) -> bool:
    """Tell whether the last ``n`` characters of both strings are equal.

    Strings shorter than ``n`` never match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if len(text) < n or len(suffix) < n:
        return False
    return text[len(text) - n:] == suffix[len(suffix) - n:]


def starts_with(text: str, prefix: str) -> bool:
    """Tell whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def after_char(text: str, char: str) -> str | None:
    """Return what follows the first ``char`` in ``text``, or None if absent.

    An empty ``char`` stands for the end of the string and gives "".
    """
    if len(char) > 1:
        raise ValueError("char must be a single character")
    if not char:
        return ""
    index = text.find(char)
    if index < 0:
        return None
    return text[index + 1:]


def is_printable(char: str) -> bool:
    """Tell whether ``char`` is a printable ASCII character (space to '~')."""
    return len(char) == 1 and 32 <= ord(char) <= 126


def is_digit(char: str) -> bool:
    """Tell whether ``char`` is an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"