"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]

_LONG_MAX = 2**63 - 1
_INT_BITS = 32


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _map_case(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _map_case(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _map_case(c, "A", "Z", 32)


def _is_space(ch: str) -> bool:
    return ch == " " or 9 <= ord(ch) <= 13


def _wrap_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def c_atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C routine does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. If the accumulated value overflows a
    64-bit long, -1 is returned for a positive number and 0 for a negative
    one. The result is then narrowed to a 32-bit int.
    """
    pos = 0
    length = len(text)
    while pos < length and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        if result > _LONG_MAX:
            return -1 if sign == 1 else 0
        pos += 1
    return _wrap_int32(result * sign)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = []
    magnitude = abs(n)
    while True:
        digits.append(chr(ord("0") + magnitude % 10))
        magnitude //= 10
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))