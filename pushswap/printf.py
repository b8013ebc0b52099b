"""A small printf-style formatter supporting %c %s %d %i %p %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def _to_uint32(value: int) -> int:
    return value & _UINT32_MASK


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(int(value), "x")


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdipuxX":
        return ""
    value = _next_arg(values, spec)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "p":
        return _format_pointer(value)
    if spec == "u":
        return str(_to_uint32(int(value)))
    # Both hexadecimal conversions print upper-case digits.
    return format(_to_uint32(int(value)), "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    if fmt is None:
        raise TypeError("format string must not be None")
    out: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)