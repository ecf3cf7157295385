"""String helpers with C-library semantics expressed on Python strings and buffers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]

_WHITESPACE = " \t\r\v\f\n"
_DIGITS = "0123456789"


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _cstrlen(buf: ReadableBuffer, limit: Optional[int] = None) -> int:
    """Length up to the first NUL byte, looking at no more than ``limit`` bytes."""
    data = bytes(buf if limit is None else buf[:limit])
    index = data.find(b"\0")
    return len(data) if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest and rest[0] not in _DIGITS:
        if rest[0] == "-":
            sign = -1
        elif rest[0] != "+":
            return 0
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits += ch
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(int(n))


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; a NUL matches the end of the string."""
    if _char(c) == "\0":
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; a NUL matches the end of the string."""
    if _char(c) == "\0":
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    _check_non_negative("n", n)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` beginning at ``start``."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    _char(sep)
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` for each element; a non-None result replaces it in place."""
    for i, ch in enumerate(list(s)):
        replacement = func(i, ch)
        if replacement is not None:
            s[i] = replacement


def strlcpy(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Copy ``src`` into ``dest`` NUL-terminated within ``size`` bytes; return len(src)."""
    _check_non_negative("size", size)
    src_len = _cstrlen(src)
    if size > 0:
        count = min(size - 1, src_len)
        if count >= len(dest):
            raise ValueError(f"destination of {len(dest)} bytes cannot hold {count + 1}")
        dest[:count] = bytes(src[:count])
        dest[count] = 0
    return src_len


def strlcat(dest: bytearray, src: ReadableBuffer, size: int) -> int:
    """Append ``src`` to the string in ``dest`` within ``size`` bytes; return the length tried."""
    _check_non_negative("size", size)
    start = _cstrlen(dest, size)
    src_len = _cstrlen(src)
    count = max(0, min(src_len, size - start - 1))
    if start < size:
        if start + count >= len(dest):
            raise ValueError(
                f"destination of {len(dest)} bytes cannot hold {start + count + 1}"
            )
        dest[start:start + count] = bytes(src[:count])
        dest[start + count] = 0
    return start + src_len