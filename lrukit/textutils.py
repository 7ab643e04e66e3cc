"""Small text helpers: integer formatting, decimal parsing and fixed-width input."""

from __future__ import annotations

from typing import NamedTuple, TextIO

__all__ = ["PaddedRead", "int_to_string", "string_to_double", "read_padded", "pad_to_length"]

_DIGITS = "0123456789"


class PaddedRead(NamedTuple):
    """Result of :func:`read_padded`."""

    text: str
    complete: bool


def int_to_string(number: int) -> str:
    """Return the decimal representation of ``number``."""
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    return sign + str(abs(number))


def string_to_double(text: str) -> float:
    """Parse an unsigned decimal number made only of digits and dots.

    Digits before the first dot form the integer part; every digit after
    any dot belongs to the fractional part.  Any other character raises
    ``ValueError``.  An empty string yields ``0.0``.
    """
    integer_digits: list[str] = []
    fraction_digits: list[str] = []
    target = integer_digits
    for char in text:
        if char == ".":
            target = fraction_digits
            continue
        if char not in _DIGITS:
            raise ValueError(f"invalid character {char!r} in {text!r}")
        target.append(char)

    integer_part = 0.0
    for digit in integer_digits:
        integer_part = integer_part * 10 + int(digit)

    weight = 1.0
    fraction_part = 0.0
    for digit in fraction_digits:
        weight *= 0.1
        fraction_part += int(digit) * weight

    return integer_part + fraction_part


def read_padded(stream: TextIO, size: int) -> PaddedRead:
    """Read at most ``size`` characters of one line from ``stream``.

    Reading stops at a newline (which is consumed) or at end of input; the
    text is then padded with spaces up to ``size`` and ``complete`` is true.
    If ``size`` characters are read first, the rest of the line is left in
    the stream and ``complete`` is false.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    chars: list[str] = []
    while len(chars) < size:
        char = stream.read(1)
        if char == "" or char == "\n":
            return PaddedRead("".join(chars).ljust(size), True)
        chars.append(char)
    return PaddedRead("".join(chars), False)


def pad_to_length(text: str, size: int) -> str:
    """Pad ``text`` with trailing spaces to exactly ``size`` characters."""
    if len(text) > size:
        raise ValueError(f"text of length {len(text)} does not fit in {size} characters")
    return text.ljust(size)