"""Building download paths and guarding against unsafe file names."""

from __future__ import annotations

import os

ILLEGAL_FILENAME_CHARS = "/\\"
DOWNLOADS_DIR_NAME = "Downloads"


def contains_illegal_chars(filename: str) -> bool:
    """True if ``filename`` contains a forward or backward slash."""
    return any(ch in filename for ch in ILLEGAL_FILENAME_CHARS)


def absolute_path(target_dir: str, separator: str = os.sep) -> str:
    """``target_dir`` guaranteed to end with ``separator``."""
    if target_dir[-1:] == separator:
        return target_dir
    return f"{target_dir}{separator}"


def complete_path(target_dir: str, filename: str, separator: str = os.sep) -> str:
    """Path of ``filename`` inside ``target_dir``."""
    return f"{absolute_path(target_dir, separator)}{filename}"


def default_target_dir(home: str, separator: str = os.sep) -> str:
    """The default download directory below ``home``."""
    return f"{home}{separator}{DOWNLOADS_DIR_NAME}"