"""Integer-to-text conversion, a small format language and quoted byte representations."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Union

from xdccfetch.dynstring import DynString

_INT32 = (-(1 << 31), (1 << 31) - 1)
_UINT32 = (0, (1 << 32) - 1)
_INT64 = (-(1 << 63), (1 << 63) - 1)
_UINT64 = (0, (1 << 64) - 1)

_RANGES = {
    "i": _INT32,
    "I": _INT64,
    "u": _UINT32,
    "U": _UINT64,
}

_CONVERSION_PATTERN = re.compile(rb"(%.?)", re.DOTALL)

_REPR_ESCAPES = {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
    0x07: "\\a",
    0x08: "\\b",
    ord("\\"): "\\\\",
    ord('"'): '\\"',
}

TextLike = Union[bytes, bytearray, memoryview, str, DynString]


def _check_int(value: object, bounds: tuple[int, int], what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} requires an integer, got {type(value).__name__}")
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{value} is outside the range of {what}")
    return value


def ll2str(value: int) -> str:
    """Decimal text of a signed 64-bit integer."""
    return str(_check_int(value, _INT64, "a signed 64-bit integer"))


def ull2str(value: int) -> str:
    """Decimal text of an unsigned 64-bit integer."""
    return str(_check_int(value, _UINT64, "an unsigned 64-bit integer"))


def _to_bytes(value: object, conv: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, DynString):
        return bytes(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"%{conv} requires a string, got {type(value).__name__}")


def _next_arg(args: Iterator[object], conv: str) -> object:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{conv}") from None


def cat_fmt(prefix: TextLike, fmt: str | bytes, *args: object) -> DynString:
    """Append ``fmt`` rendered with ``args`` to ``prefix`` and return the result.

    Supported conversions: ``%s`` and ``%S`` (strings), ``%i`` (32-bit signed),
    ``%I`` (64-bit signed), ``%u`` (32-bit unsigned), ``%U`` (64-bit unsigned).
    Any other character after ``%`` is emitted verbatim, so ``%%`` yields ``%``.
    A DynString prefix is extended in place; anything else is copied first.
    """
    target = prefix if isinstance(prefix, DynString) else DynString(prefix)
    spec = fmt.encode("utf-8") if isinstance(fmt, str) else bytes(fmt)
    target.make_room_for(len(target) + len(spec) * 2)

    pending = iter(args)
    out = bytearray()
    for piece in _CONVERSION_PATTERN.split(spec):
        if not piece.startswith(b"%"):
            out += piece
            continue
        if len(piece) == 1:
            raise ValueError("format ends with a lone '%'")
        conv = chr(piece[1])
        if conv in ("s", "S"):
            out += _to_bytes(_next_arg(pending, conv), conv)
        elif conv in _RANGES:
            value = _check_int(_next_arg(pending, conv), _RANGES[conv], f"%{conv}")
            out += str(value).encode("ascii")
        else:
            out += piece[1:]
    return target.cat(bytes(out))


def cat_repr(data: bytes | bytearray | memoryview | str) -> str:
    """Quoted, escaped representation of ``data`` with only printable ASCII."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    parts = ['"']
    for byte in raw:
        if byte in _REPR_ESCAPES:
            parts.append(_REPR_ESCAPES[byte])
        elif 0x20 <= byte < 0x7F:
            parts.append(chr(byte))
        else:
            parts.append(f"\\x{byte:02x}")
    parts.append('"')
    return "".join(parts)