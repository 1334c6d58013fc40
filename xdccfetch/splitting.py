"""Splitting byte strings by separators and REPL-style argument lines."""

from __future__ import annotations

from typing import Union

BytesInput = Union[bytes, bytearray, memoryview, str]

# Characters the C library classifies as white space.
_SPACE = frozenset(b" \t\n\v\f\r")
# Characters that end an unquoted token.
_TOKEN_END = frozenset(b" \n\r\t\0")

_ESCAPES = {
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
    ord("b"): ord("\b"),
    ord("a"): 0x07,
}

_QUOTE = ord('"')
_SQUOTE = ord("'")
_BACKSLASH = ord("\\")
_LOWER_X = ord("x")


def _to_bytes(data: BytesInput) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _code(c: str | int | bytes) -> int:
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError("expected a single character")
    return ord(c) if isinstance(c, str) else c[0]


def is_hex_digit(c: str | int | bytes) -> bool:
    """True if ``c`` is one of 0-9, a-f or A-F."""
    code = _code(c)
    return (
        ord("0") <= code <= ord("9")
        or ord("a") <= code <= ord("f")
        or ord("A") <= code <= ord("F")
    )


def hex_digit_to_int(c: str | int | bytes) -> int:
    """Value 0-15 of a hex digit; 0 for anything that is not one."""
    code = _code(c)
    if not is_hex_digit(code):
        return 0
    return int(chr(code), 16)


def split_len(data: BytesInput, sep: BytesInput) -> list[bytes]:
    """Split ``data`` on every occurrence of the (possibly multi-byte) ``sep``.

    Empty input yields an empty list; an empty separator is an error.
    """
    raw = _to_bytes(data)
    separator = _to_bytes(sep)
    if not separator:
        raise ValueError("separator must not be empty")
    if not raw:
        return []
    return raw.split(separator)


def split_args(line: BytesInput) -> list[bytes]:
    """Split a line into arguments with double- and single-quote support.

    Inside double quotes the escapes ``\\n``, ``\\r``, ``\\t``, ``\\b``, ``\\a``
    and ``\\xHH`` are decoded; any other escaped character stands for itself.
    Inside single quotes only ``\\'`` is an escape. Unbalanced quotes, or a
    closing quote followed by something other than white space, raise
    ``ValueError``.
    """
    buf = _to_bytes(line).split(b"\0", 1)[0]
    size = len(buf)

    def at(i: int) -> int:
        return buf[i] if i < size else 0

    tokens: list[bytes] = []
    p = 0
    while True:
        while at(p) and at(p) in _SPACE:
            p += 1
        if not at(p):
            return tokens

        in_double = in_single = done = False
        current = bytearray()
        while not done:
            c = at(p)
            if in_double:
                if (
                    c == _BACKSLASH
                    and at(p + 1) == _LOWER_X
                    and is_hex_digit(at(p + 2))
                    and is_hex_digit(at(p + 3))
                ):
                    current.append(
                        hex_digit_to_int(at(p + 2)) * 16 + hex_digit_to_int(at(p + 3))
                    )
                    p += 3
                elif c == _BACKSLASH and at(p + 1):
                    p += 1
                    escaped = at(p)
                    current.append(_ESCAPES.get(escaped, escaped))
                elif c == _QUOTE:
                    following = at(p + 1)
                    if following and following not in _SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif not c:
                    raise ValueError("unterminated double quotes")
                else:
                    current.append(c)
            elif in_single:
                if c == _BACKSLASH and at(p + 1) == _SQUOTE:
                    p += 1
                    current.append(_SQUOTE)
                elif c == _SQUOTE:
                    following = at(p + 1)
                    if following and following not in _SPACE:
                        raise ValueError("closing quote must be followed by a space")
                    done = True
                elif not c:
                    raise ValueError("unterminated single quotes")
                else:
                    current.append(c)
            elif c in _TOKEN_END:
                done = True
            elif c == _QUOTE:
                in_double = True
            elif c == _SQUOTE:
                in_single = True
            else:
                current.append(c)
            if at(p):
                p += 1
        tokens.append(bytes(current))