"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_WHITESPACE = frozenset(range(9, 14)) | {32}


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _to_c_int(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value & (1 << (_INT_BITS - 1)):
        value -= 1 << _INT_BITS
    return value


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert_case(c: int | str, low: str, high: str, offset: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; other values are returned unchanged.

    A string argument gives a string back, an integer gives an integer.
    """
    return _convert_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; other values are returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text without digits gives 0. The result
    wraps to a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and ord(text[position]) in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    start = position
    while position < length and "0" <= text[position] <= "9":
        position += 1
    digits = text[start:position]
    value = int(digits) if digits else 0
    return _to_c_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(int(n))