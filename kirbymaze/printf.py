"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

SPECIFIERS = "cs%dipxXu"

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "0x0"


def itoa_base(num: int, digits: str) -> str:
    """Represent the non-negative ``num`` in the base given by the symbols in ``digits``."""
    base = len(digits)
    if base < 2:
        raise ValueError(f"a base needs at least two digits, got {digits!r}")
    if num < 0:
        raise ValueError(f"number must not be negative, got {num}")
    symbols = []
    while True:
        num, remainder = divmod(num, base)
        symbols.append(digits[remainder])
        if num == 0:
            break
    return "".join(reversed(symbols))


def is_specifier(c: str) -> bool:
    """True if ``c`` is a conversion character understood after '%'."""
    return len(c) == 1 and c in SPECIFIERS


def _as_int32(value: Any) -> int:
    number = int(value) & _UINT32_MASK
    return number - (1 << 32) if number >= (1 << 31) else number


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = int(value) & _ULONG_MASK
    if address == 0:
        return _NULL_POINTER
    return "0x" + itoa_base(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _as_char(value)
    if spec == "s":
        return _NULL_STRING if value is None else str(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "p":
        return _as_pointer(value)
    if spec == "u":
        return itoa_base(int(value) & _UINT32_MASK, _DECIMAL)
    if spec == "x":
        return itoa_base(int(value) & _UINT32_MASK, _HEX_LOWER)
    return itoa_base(int(value) & _UINT32_MASK, _HEX_UPPER)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            # A lone '%' at the end of the format produces nothing.
            return
        yield _convert(spec, remaining) if is_specifier(spec) else spec


def render_format(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    An unknown conversion character after '%' is emitted as itself.
    Raises TypeError when there are fewer arguments than conversions.
    """
    return "".join(_pieces(fmt, args))


def print_format(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered format to ``stream`` (stdout by default); return characters written."""
    text = render_format(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)