"""Building blocks for fetching files offered by XDCC bots: strings, parsing, paths, throttling and MD5."""

__version__ = "0.1.0"