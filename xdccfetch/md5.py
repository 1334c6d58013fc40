"""MD5 message digest (RFC 1321) with bit-level finalisation support.

MD5 is cryptographically broken; it is used here only to verify that a
downloaded file matches the checksum a bot announced.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import Union

DIGEST_SIZE = 16
BLOCK_SIZE = 64

BytesLike = Union[bytes, bytearray, memoryview]

_MASK32 = 0xFFFFFFFF

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_BLOCK_WORDS = struct.Struct("<16I")
_STATE_WORDS = struct.Struct("<4I")
_BIT_COUNT = struct.Struct("<Q")


def _f(b: int, c: int, d: int) -> int:
    return ((c ^ d) & b) ^ d


def _g(b: int, c: int, d: int) -> int:
    return ((c ^ b) & d) ^ c


def _h(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _i(b: int, c: int, d: int) -> int:
    return (c ^ (b | (~d & _MASK32))) & _MASK32


_ROUNDS = (
    (_f, lambda step: step),
    (_g, lambda step: (5 * step + 1) % 16),
    (_h, lambda step: (3 * step + 5) % 16),
    (_i, lambda step: (7 * step) % 16),
)


def _rotl(x: int, n: int) -> int:
    x &= _MASK32
    return ((x << n) | (x >> (32 - n))) & _MASK32


def compress(msg: Sequence[int], val: Sequence[int]) -> tuple[int, int, int, int]:
    """Apply the MD5 compression function.

    ``msg`` holds the 16 little-endian-decoded 32-bit words of one block and
    ``val`` the four 32-bit chaining values; the new chaining values are returned.
    """
    if len(msg) != 16:
        raise ValueError("msg must hold exactly 16 words")
    if len(val) != 4:
        raise ValueError("val must hold exactly 4 words")
    words = [w & _MASK32 for w in msg]
    a, b, c, d = (v & _MASK32 for v in val)
    step = 0
    for (func, index), shifts in zip(_ROUNDS, _SHIFTS):
        for j in range(16):
            rotated = _rotl(a + func(b, c, d) + words[index(j)] + _K[step], shifts[j % 4])
            a, b, c, d = d, (b + rotated) & _MASK32, b, c
            step += 1
    return (
        (val[0] + a) & _MASK32,
        (val[1] + b) & _MASK32,
        (val[2] + c) & _MASK32,
        (val[3] + d) & _MASK32,
    )


def _check_digest(digest: BytesLike, name: str) -> bytes:
    raw = bytes(digest)
    if len(raw) < DIGEST_SIZE:
        raise ValueError(f"{name} must be at least {DIGEST_SIZE} bytes long")
    return raw[:DIGEST_SIZE]


def md5_to_string(digest: BytesLike) -> str:
    """Lower-case hexadecimal text of a 16-byte digest."""
    return _check_digest(digest, "digest").hex()


def md5_equal(hash1: BytesLike, hash2: BytesLike) -> bool:
    """True if the first 16 bytes of both digests are equal."""
    return _check_digest(hash1, "hash1") == _check_digest(hash2, "hash2")


class Md5:
    """Incremental MD5 computation."""

    __slots__ = ("_state", "_buffer", "_count")

    def __init__(self, data: BytesLike | None = None) -> None:
        self._reset()
        if data is not None:
            self.update(data)

    def _reset(self) -> None:
        self._state: tuple[int, int, int, int] = IV
        self._buffer = bytearray()
        self._count = 0

    def _process(self, block: bytes) -> None:
        self._state = compress(_BLOCK_WORDS.unpack(block), self._state)

    def update(self, data: BytesLike) -> Md5:
        """Feed more bytes into the computation."""
        if isinstance(data, str):
            raise TypeError("MD5 input must be bytes-like, not str")
        payload = bytes(data)
        self._count += len(payload)
        self._buffer += payload
        full = len(self._buffer) - len(self._buffer) % BLOCK_SIZE
        for offset in range(0, full, BLOCK_SIZE):
            self._process(bytes(self._buffer[offset:offset + BLOCK_SIZE]))
        del self._buffer[:full]
        return self

    def copy(self) -> Md5:
        """An independent clone of the running computation."""
        clone = Md5()
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._count = self._count
        return clone

    def _finish(self, ub: int, n: int) -> bytes:
        if not 0 <= n <= 7:
            raise ValueError("the number of extra bits must be between 0 and 7")
        marker = 0x80 >> n
        tail = bytearray(self._buffer)
        tail.append(((ub & -marker) | marker) & 0xFF)
        if len(tail) > BLOCK_SIZE - 8:
            tail += bytes(BLOCK_SIZE - len(tail))
            self._process(bytes(tail))
            tail = bytearray()
        tail += bytes(BLOCK_SIZE - 8 - len(tail))
        tail += _BIT_COUNT.pack(((self._count << 3) + n) & 0xFFFFFFFFFFFFFFFF)
        self._process(bytes(tail))
        return _STATE_WORDS.pack(*self._state)

    def digest(self) -> bytes:
        """The digest of everything fed so far; the computation continues."""
        return self.copy()._finish(0, 0)

    def hexdigest(self) -> str:
        """Hexadecimal text of :meth:`digest`."""
        return md5_to_string(self.digest())

    def close(self) -> bytes:
        """Finish the computation, return its digest and start over."""
        result = self._finish(0, 0)
        self._reset()
        return result

    def add_bits_and_close(self, ub: int, n: int) -> bytes:
        """Append the top ``n`` bits (0 to 7) of ``ub``, finish and start over."""
        result = self._finish(ub, n)
        self._reset()
        return result