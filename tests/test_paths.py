import pytest

from xdccfetch.paths import (
    absolute_path,
    complete_path,
    contains_illegal_chars,
    default_target_dir,
)


@pytest.mark.parametrize("name", ["a/b.bin", "..\\evil.exe", "/", "\\"])
def test_illegal_names_detected(name):
    assert contains_illegal_chars(name) is True


@pytest.mark.parametrize("name", ["file.bin", "some name (1).mkv", ""])
def test_legal_names_pass(name):
    assert contains_illegal_chars(name) is False


def test_absolute_path_adds_separator():
    assert absolute_path("/tmp/dl", "/") == "/tmp/dl" + "/"


def test_absolute_path_keeps_existing_separator():
    assert absolute_path("/tmp/dl/", "/") == "/tmp/dl/"


def test_absolute_path_empty_dir_gets_separator():
    assert absolute_path("", "/") == "/"


def test_absolute_path_windows_separator():
    assert absolute_path("C:\\dl", "\\") == "C:\\dl\\"
    assert absolute_path("C:\\dl\\", "\\") == "C:\\dl\\"


def test_absolute_path_is_idempotent():
    once = absolute_path("/srv/files", "/")
    assert absolute_path(once, "/") == once


def test_complete_path_joins_once():
    assert complete_path("/tmp/dl", "x.bin", "/") == "/tmp/dl/x.bin"
    assert complete_path("/tmp/dl/", "x.bin", "/") == "/tmp/dl/x.bin"


def test_complete_path_ends_with_filename():
    result = complete_path("/data", "pack.tar", "/")
    assert result.endswith("/pack.tar")
    assert result.startswith("/data")


def test_default_target_dir():
    assert default_target_dir("/home/u", "/") == "/home/u/Downloads"


def test_default_target_dir_then_complete_path():
    target = default_target_dir("/home/u", "/")
    assert complete_path(target, "f", "/") == target + "/f"