"""A small formatted-output facility with C-style conversions.

Supported conversions are ``%c``, ``%s``, ``%p``, ``%d``, ``%i``, ``%u``,
``%x`` and ``%X``. Any other character after ``%`` is written as itself, so
``%%`` gives a percent sign. A ``%`` at the very end of the format writes a
NUL character and ends the output.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO, Union

from cubescape.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_SIZE_MASK = 0xFFFFFFFFFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_NUL = "\0"


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _wrap_int32(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def _digits(value: int, alphabet: str) -> str:
    base = len(alphabet)
    out = []
    while True:
        value, rest = divmod(value, base)
        out.append(alphabet[rest])
        if value == 0:
            break
    return "".join(reversed(out))


def format_number(n: int) -> str:
    """Signed decimal of ``n`` taken as a 32-bit int."""
    return itoa(_wrap_int32(_as_int(n)))


def format_unsigned(n: int) -> str:
    """Decimal of ``n`` taken as a 32-bit unsigned int."""
    return _digits(_as_int(n) & _UINT_MASK, _LOWER_DIGITS[:10])


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal of ``n`` taken as a 32-bit unsigned int."""
    alphabet = _UPPER_DIGITS if upper else _LOWER_DIGITS
    return _digits(_as_int(n) & _UINT_MASK, alphabet)


def format_address(address: Optional[int]) -> str:
    """A pointer-sized value as ``0x`` followed by lower-case hex digits."""
    value = 0 if address is None else _as_int(address) & _SIZE_MASK
    return "0x" + _digits(value, _LOWER_DIGITS)


def format_string(text: Optional[str]) -> str:
    """The text itself, or ``(null)`` for a missing string."""
    return "(null)" if text is None else text


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _take(values: Iterator[Any], conversion: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{conversion}") from None


def _convert(conversion: str, values: Iterator[Any]) -> str:
    if conversion == "c":
        return _format_char(_take(values, conversion))
    if conversion == "s":
        return format_string(_take(values, conversion))
    if conversion == "p":
        return format_address(_take(values, conversion))
    if conversion in ("d", "i"):
        return format_number(_take(values, conversion))
    if conversion == "u":
        return format_unsigned(_take(values, conversion))
    if conversion == "x":
        return format_hex(_take(values, conversion), upper=False)
    if conversion == "X":
        return format_hex(_take(values, conversion), upper=True)
    return conversion


def render(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text."""
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, _NUL)
        pieces.append(_convert(conversion, values))
        if conversion == _NUL:
            break
    return "".join(pieces)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream``; return the characters written."""
    text = render(fmt, *args)
    stream.write(text)
    return len(text)