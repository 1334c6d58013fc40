# xdccfetch

Building blocks for a client that fetches files offered by XDCC bots on IRC.
The package has no dependencies outside the standard library.

## What is inside

- `xdccfetch.dynstring`: `DynString`, a binary-safe growable byte string with
  explicit length and free-space tracking (`cat`, `copy_from`, `trim`,
  `range`, `make_room_for`, `write_at_end`, `grow_zero`, `remove_free_space`,
  `compare` and more), plus `required_header_type` and `header_size`, which
  describe the size class a string of a given length falls into.
- `xdccfetch.textfmt`: integer-to-text helpers (`ll2str`, `ull2str`) that
  check 64-bit ranges, a small `cat_fmt` formatter that understands
  `%s %S %i %I %u %U %%`, and `cat_repr` for quoted, escaped representations
  of bytes.
- `xdccfetch.splitting`: `split_len` for splitting on a multi-byte separator,
  `split_args` for splitting a line into quoted arguments (raising
  `ValueError` on unbalanced quotes), and `is_hex_digit` / `hex_digit_to_int`.
- `xdccfetch.charops`: `map_chars`, `join` and `contains_any`.
- `xdccfetch.paths`: `absolute_path`, `complete_path` and
  `default_target_dir` for building download paths, and
  `contains_illegal_chars` for rejecting file names that contain `/` or `\`.
- `xdccfetch.messages`: `extract_md5` reads an MD5 checksum out of a bot
  notice, `is_password_accepted` spots identification replies,
  `split_login_command` splits a login command into recipient and text, and
  `is_valid_request_from_nick` checks whether a transfer offer comes from an
  expected bot.
- `xdccfetch.throttle`: `SleepThrottle`, which turns the current transfer
  speed into a sleep time (in microseconds) that keeps downloads under a
  speed limit, plus `adjustment_value` and `rand_range`.
- `xdccfetch.md5`: a pure MD5 implementation (`Md5`, with `update`, `copy`,
  `digest`, `hexdigest`, `close` and `add_bits_and_close`), the raw
  `compress` function, and `md5_to_string` / `md5_equal`.

## Installing

```
pip install xdccfetch
```

## Examples

```python
from xdccfetch.dynstring import DynString
from xdccfetch.textfmt import cat_fmt
from xdccfetch.splitting import split_args
from xdccfetch.messages import extract_md5
from xdccfetch.paths import complete_path
from xdccfetch.md5 import Md5

s = DynString(b"xxciaoyyy")
s.trim(b"xy")
assert bytes(s) == b"ciao"

assert cat_fmt(b"--", b"%u,%U--", 4294967295, 18446744073709551615) == \
    b"--4294967295,18446744073709551615--"

assert split_args('foo "bar baz"') == [b"foo", b"bar baz"]

checksum = extract_md5("md5sum: d41d8cd98f00b204e9800998ecf8427e")
assert checksum == "d41d8cd98f00b204e9800998ecf8427e"

path = complete_path("/home/me/Downloads", "file.bin", "/")
assert path == "/home/me/Downloads/file.bin"

h = Md5(b"abc")
assert h.hexdigest() == "900150983cd24fb0d6963f7d28e17f72"
```

## What it does not do

The package is a library of parts only. It does not connect to an IRC
server, join channels, send XDCC requests or receive DCC transfers, and it
provides no command-line program. Those pieces are left to the application
that uses it.

## Running the tests

```
pip install "xdccfetch[test]"
pytest
```