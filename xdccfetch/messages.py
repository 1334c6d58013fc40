"""Interpreting IRC messages sent by bots and services."""

from __future__ import annotations

from collections.abc import Iterable

MD5_STR_SIZE = 32
LOGIN_USER_LENGTH = 9

# Marker and the offset from its start at which the checksum begins.
_MD5_MARKERS = (("md5sum", 8), ("MD5", 4), ("md5", 4))

IDENTIFIED_PHRASES = (
    "Password accepted",
    "You are now identified",
    "I recognize you",
)


def extract_md5(text: str) -> str | None:
    """Pull an MD5 checksum out of a bot notice, or None if none is announced."""
    for marker, offset in _MD5_MARKERS:
        index = text.find(marker)
        if index != -1:
            start = index + offset
            return text[start:start + MD5_STR_SIZE]
    return None


def is_password_accepted(message: str) -> bool:
    """True if ``message`` says that the identification succeeded."""
    return any(phrase in message for phrase in IDENTIFIED_PHRASES)


def split_login_command(command: str) -> tuple[str, str]:
    """Split a login command into its recipient and the message sent to it.

    The command is trimmed of spaces and tabs; its first nine characters name
    the recipient, the rest is the message. Shorter commands raise ValueError.
    """
    trimmed = command.strip(" \t")
    if len(trimmed) < LOGIN_USER_LENGTH:
        raise ValueError("the login-command is too short to be sent")
    return trimmed[:LOGIN_USER_LENGTH], trimmed[LOGIN_USER_LENGTH:]


def is_valid_request_from_nick(
    bot_nicks: Iterable[str] | None, nick: str, accept_all: bool = False
) -> bool:
    """Whether a file offer from ``nick`` should be accepted.

    Without any requested downloads nothing is accepted; otherwise either
    every nick is accepted or only the bots asked, compared case-insensitively.
    """
    if bot_nicks is None:
        return False
    if accept_all:
        return True
    wanted = nick.lower()
    return any(bot.lower() == wanted for bot in bot_nicks)