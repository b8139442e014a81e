"""String searching, comparison, slicing, splitting and bounded copying."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def find_char(text: str, char: str) -> int | None:
    """Return the index of the first ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the code points of the first differing pair,
    the end of a string counting as code point 0, or 0 when they match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly within the first ``length`` characters of ``haystack``.

    Returns the start index or ``None``. An empty needle is found at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(needle) > length:
        return None
    if not needle:
        return 0
    limit = min(length, len(haystack))
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined together."""
    return first + second


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    _check_char(separator)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(text: str, func: Callable[[int, str], str | None]) -> str:
    """Call ``func(index, char)`` for each character in turn.

    A string returned by ``func`` replaces that character; ``None`` keeps it.
    The resulting text is returned.
    """
    result = []
    for index, char in enumerate(text):
        replacement = func(index, char)
        result.append(char if replacement is None else replacement)
    return "".join(result)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``; a copy shorter
    than that length means the text was truncated.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed the length of ``dst`` nothing is appended
    and the length returned is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)