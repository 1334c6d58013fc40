"""Character-level operations on text and byte strings: mapping, joining, membership."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from xdccfetch.dynstring import DynString

TextOrBytes = Union[str, bytes, bytearray, memoryview, DynString]


def _as_bytes(value: TextOrBytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def map_chars(data: TextOrBytes, from_chars: TextOrBytes, to_chars: TextOrBytes):
    """Replace every character found in ``from_chars`` by the one at the same
    position in ``to_chars``.

    When a character occurs several times in ``from_chars`` its first
    occurrence decides. A str input gives a str result, anything else bytes.
    """
    if isinstance(data, str):
        if not isinstance(from_chars, str) or not isinstance(to_chars, str):
            raise TypeError("mapping a str needs str character sets")
        source, target = from_chars, to_chars
    else:
        source, target = _as_bytes(from_chars), _as_bytes(to_chars)
    if len(source) != len(target):
        raise ValueError("from_chars and to_chars must have the same length")

    mapping: dict = {}
    for src, dst in zip(source, target):
        mapping.setdefault(src, dst)

    if isinstance(data, str):
        return "".join(mapping.get(ch, ch) for ch in data)
    return bytes(mapping.get(byte, byte) for byte in _as_bytes(data))


def join(parts: Iterable[TextOrBytes], sep: TextOrBytes):
    """Join ``parts`` with ``sep`` between consecutive items.

    If the separator and every part are str the result is str; otherwise
    everything is taken as bytes and the result is bytes.
    """
    items = list(parts)
    if isinstance(sep, str) and all(isinstance(item, str) for item in items):
        return sep.join(items)
    return _as_bytes(sep).join(_as_bytes(item) for item in items)


def contains_any(data: TextOrBytes, chars: TextOrBytes) -> bool:
    """True if any character of ``chars`` occurs in ``data``."""
    if isinstance(data, str) and isinstance(chars, str):
        wanted = set(chars)
        return any(ch in wanted for ch in data)
    wanted_bytes = set(_as_bytes(chars))
    return any(byte in wanted_bytes for byte in _as_bytes(data))