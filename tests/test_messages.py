import pytest

from xdccfetch.messages import (
    extract_md5,
    is_password_accepted,
    is_valid_request_from_nick,
    split_login_command,
)

CHECKSUM = "0123456789abcdef0123456789abcdef"


def test_extract_md5sum_marker():
    assert extract_md5(f"** md5sum: {CHECKSUM} **") == CHECKSUM


def test_extract_upper_md5_marker():
    assert extract_md5(f"File MD5 {CHECKSUM}") == CHECKSUM


def test_extract_lower_md5_marker():
    assert extract_md5(f"md5 {CHECKSUM} trailing") == CHECKSUM


def test_extract_prefers_md5sum_over_md5():
    text = f"MD5 {'f' * 32} md5sum: {CHECKSUM}"
    assert extract_md5(text) == CHECKSUM


def test_extract_truncates_to_32_chars():
    result = extract_md5(f"md5sum: {CHECKSUM}EXTRA")
    assert result == CHECKSUM
    assert len(result) == 32


def test_extract_without_marker():
    assert extract_md5("Sending you pack #1") is None


@pytest.mark.parametrize(
    "message",
    [
        "Password accepted - you are now recognized.",
        "You are now identified for this nick.",
        "Hello, I recognize you.",
    ],
)
def test_password_accepted(message):
    assert is_password_accepted(message) is True


def test_password_not_accepted():
    assert is_password_accepted("Invalid password for this nick.") is False


def test_split_login_command_parts():
    command = "  NickServ identify placeholder\t"
    user, auth = split_login_command(command)
    assert len(user) == 9
    assert user + auth == command.strip(" \t")
    assert auth == "identify placeholder"


def test_split_login_command_exactly_nine():
    assert split_login_command("123456789") == ("123456789", "")


def test_split_login_command_too_short():
    with pytest.raises(ValueError):
        split_login_command("   short  ")


def test_valid_request_case_insensitive():
    assert is_valid_request_from_nick(["Bot-One", "other"], "bot-one") is True


def test_invalid_request_from_unknown_nick():
    assert is_valid_request_from_nick(["Bot-One"], "stranger") is False


def test_accept_all_nicks():
    assert is_valid_request_from_nick(["Bot-One"], "stranger", accept_all=True) is True


def test_no_downloads_rejects_even_with_accept_all():
    assert is_valid_request_from_nick(None, "Bot-One", accept_all=True) is False