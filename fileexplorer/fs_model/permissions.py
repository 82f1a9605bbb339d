"""Conversion between permission bits, ``rwxrwxrwx`` strings, and octal modes."""

from __future__ import annotations

import stat

from ..errors import InvalidMode

SENTINEL_PERMISSIONS = "?????????"
PERMISSION_MASK = 0o777

_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)
_OCTAL_DIGITS = frozenset("01234567")


def encode(bits: int) -> str:
    """Render the owner/group/other permission bits of ``bits`` as 9 chars.

    File-type and setuid/setgid/sticky bits are ignored.
    """
    return "".join(letter if bits & flag else "-" for flag, letter in _PERMISSION_BITS)


def decode(mode: str) -> int:
    """Parse a 3-digit octal mode such as ``"755"`` into permission bits.

    Raises ``InvalidMode`` for any other length or non-octal character.
    """
    if len(mode) != 3:
        raise InvalidMode("mode should be 3 digits like 755")
    if not set(mode) <= _OCTAL_DIGITS:
        raise InvalidMode(f"invalid mode '{mode}'")
    return int(mode, 8) & PERMISSION_MASK


__all__ = [
    "SENTINEL_PERMISSIONS",
    "PERMISSION_MASK",
    "encode",
    "decode",
]
