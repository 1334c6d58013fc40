"""Growable binary-safe byte strings with explicit capacity bookkeeping.

The string keeps track of its used length, its allocated capacity and the
size class of the header that would describe it. Capacity grows in the same
steps as the classic dynamic-string scheme: small strings double, large
ones grow by a fixed preallocation step.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

MAX_PREALLOC = 1024 * 1024

BytesLike = Union[bytes, bytearray, memoryview, str, "DynString"]


class HeaderType(IntEnum):
    """Size class of the header that stores length and capacity."""

    TYPE_5 = 0
    TYPE_8 = 1
    TYPE_16 = 2
    TYPE_32 = 3
    TYPE_64 = 4


_HEADER_SIZES = {
    HeaderType.TYPE_5: 1,
    HeaderType.TYPE_8: 3,
    HeaderType.TYPE_16: 5,
    HeaderType.TYPE_32: 9,
    HeaderType.TYPE_64: 17,
}


def required_header_type(size: int) -> HeaderType:
    """Return the smallest header type able to describe a string of ``size`` bytes."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size < 1 << 5:
        return HeaderType.TYPE_5
    if size < 1 << 8:
        return HeaderType.TYPE_8
    if size < 1 << 16:
        return HeaderType.TYPE_16
    if size < 1 << 32:
        return HeaderType.TYPE_32
    return HeaderType.TYPE_64


def header_size(header_type: HeaderType | int) -> int:
    """Return the number of bytes a header of the given type occupies."""
    try:
        return _HEADER_SIZES[HeaderType(header_type)]
    except ValueError:
        return 0


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, DynString):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class DynString:
    """A mutable byte string that tracks spare capacity like a dynamic string."""

    __slots__ = ("_data", "_alloc", "_type")

    def __init__(self, init: BytesLike | int | None = None) -> None:
        if init is None:
            content = b""
        elif isinstance(init, int) and not isinstance(init, bool):
            if init < 0:
                raise ValueError("length must not be negative")
            content = bytes(init)
        else:
            content = _as_bytes(init)
        htype = required_header_type(len(content))
        # Empty strings are usually created to be appended to; type 5
        # cannot remember free space, so use type 8.
        if htype is HeaderType.TYPE_5 and not content:
            htype = HeaderType.TYPE_8
        self._data = bytearray(content)
        self._alloc = len(content)
        self._type = htype

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"DynString({bytes(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (DynString, bytes, bytearray, memoryview, str)):
            return bytes(self._data) == _as_bytes(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (DynString, bytes, bytearray, memoryview, str)):
            return self.compare(other) < 0
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def available(self) -> int:
        """Free bytes that can be written after the end without growing."""
        if self._type is HeaderType.TYPE_5:
            return 0
        return self._alloc - len(self._data)

    def allocated(self) -> int:
        """Capacity, excluding header and terminator."""
        if self._type is HeaderType.TYPE_5:
            return len(self._data)
        return self._alloc

    def header_type(self) -> HeaderType:
        """The header type currently describing this string."""
        return self._type

    def alloc_size(self) -> int:
        """Total allocation: header, capacity and the implicit terminator."""
        return header_size(self._type) + self.allocated() + 1

    def _sync_type5(self) -> None:
        if self._type is HeaderType.TYPE_5:
            self._alloc = len(self._data)

    def make_room_for(self, addlen: int) -> DynString:
        """Ensure at least ``addlen`` free bytes after the end; length is unchanged."""
        if addlen < 0:
            raise ValueError("addlen must not be negative")
        if self.available() >= addlen:
            return self
        newlen = len(self._data) + addlen
        if newlen < MAX_PREALLOC:
            newlen *= 2
        else:
            newlen += MAX_PREALLOC
        htype = required_header_type(newlen)
        if htype is HeaderType.TYPE_5:
            htype = HeaderType.TYPE_8
        self._type = htype
        self._alloc = newlen
        return self

    def remove_free_space(self) -> DynString:
        """Shrink capacity to the current length."""
        if self.available() == 0:
            return self
        length = len(self._data)
        htype = required_header_type(length)
        if not (self._type is htype or htype > HeaderType.TYPE_8):
            self._type = htype
        self._alloc = length
        return self

    def write_at_end(self, data: BytesLike) -> DynString:
        """Write into previously reserved free space and extend the length."""
        payload = _as_bytes(data)
        if len(payload) > self.available():
            raise ValueError(
                f"not enough free space: need {len(payload)}, have {self.available()}"
            )
        self._data.extend(payload)
        return self

    def grow_zero(self, length: int) -> DynString:
        """Grow to ``length`` bytes, padding with zero bytes; never shrinks."""
        curlen = len(self._data)
        if length <= curlen:
            return self
        self.make_room_for(length - curlen)
        self._data.extend(bytes(length - curlen))
        return self

    def cat(self, data: BytesLike) -> DynString:
        """Append ``data`` to the end."""
        payload = _as_bytes(data)
        self.make_room_for(len(payload))
        self._data.extend(payload)
        return self

    def copy_from(self, data: BytesLike) -> DynString:
        """Replace the content with ``data``, reusing capacity where possible."""
        payload = _as_bytes(data)
        if self.allocated() < len(payload):
            self.make_room_for(len(payload) - len(self._data))
        self._data[:] = payload
        self._sync_type5()
        return self

    def clear(self) -> DynString:
        """Make the string empty while keeping its capacity."""
        self._data.clear()
        self._sync_type5()
        return self

    def trim(self, charset: BytesLike) -> DynString:
        """Strip bytes found in ``charset`` from both ends.

        A NUL byte always counts as part of the set, since the set is
        treated as a terminated string whose terminator matches too.
        """
        strip = set(_as_bytes(charset))
        strip.add(0)
        data = self._data
        start, end = 0, len(data) - 1
        while start <= end and data[start] in strip:
            start += 1
        while end > start and data[end] in strip:
            end -= 1
        self._data = bytearray(data[start:end + 1]) if start <= end else bytearray()
        self._sync_type5()
        return self

    def range(self, start: int, end: int) -> DynString:
        """Keep only the inclusive range [start, end]; negatives count from the end."""
        length = len(self._data)
        if length == 0:
            return self
        if start < 0:
            start = max(length + start, 0)
        if end < 0:
            end = max(length + end, 0)
        newlen = 0 if start > end else end - start + 1
        if newlen:
            if start >= length:
                newlen = 0
            elif end >= length:
                end = length - 1
                newlen = 0 if start > end else end - start + 1
        else:
            start = 0
        self._data = bytearray(self._data[start:start + newlen])
        self._sync_type5()
        return self

    def lower(self) -> DynString:
        """Convert ASCII letters to lower case in place."""
        self._data[:] = self._data.lower()
        return self

    def upper(self) -> DynString:
        """Convert ASCII letters to upper case in place."""
        self._data[:] = self._data.upper()
        return self

    def dup(self) -> DynString:
        """Return an independent copy without spare capacity."""
        return DynString(bytes(self._data))

    def compare(self, other: BytesLike) -> int:
        """Compare byte-wise: negative, zero or positive; a longer string with a common prefix is greater."""
        mine, theirs = bytes(self._data), _as_bytes(other)
        return (mine > theirs) - (mine < theirs)