"""Core enums, constants, and result types for mediastrings.

Enums:
    PathStyle -- Separator and drive convention applied by the path functions
                 (POSIX "/" paths or WINDOWS "C:\\" paths).

Tables:
    HEX_DIGITS, HEX_VALUES -- Uppercase output digits and lenient input decoding
                              (non-hex characters decode as 0).
    URI_LEGAL              -- Bytes percent-encoding passes through unescaped.
    SWAP_CASE              -- ASCII letter -> opposite case, everything else 0.
"""

import os
from enum import StrEnum
from typing import NamedTuple


class PathStyle(StrEnum):
    POSIX = "posix"
    WINDOWS = "windows"


HOST_STYLE: PathStyle = PathStyle.WINDOWS if os.name == "nt" else PathStyle.POSIX

SEPARATOR: dict[PathStyle, str] = {
    PathStyle.POSIX: "/",
    PathStyle.WINDOWS: "\\",
}

# Windows URIs carry an extra slash before the drive letter
URI_PREFIX: dict[PathStyle, str] = {
    PathStyle.POSIX: "file://",
    PathStyle.WINDOWS: "file:///",
}

CDDA_PREFIX = "cdda://?"

# Usual PATH_MAX; capacity of a StringBuf created with -1
DEFAULT_CAPACITY = 4096

HEX_DIGITS = b"0123456789ABCDEF"

HEX_VALUES: bytes = bytes(
    int(chr(c), 16) if chr(c) in "0123456789abcdefABCDEF" else 0
    for c in range(256)
)

URI_LEGAL: frozenset[int] = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~/"
)

SWAP_CASE: bytes = bytes(
    c ^ 0x20 if chr(c).isascii() and chr(c).isalpha() else 0
    for c in range(256)
)


class UriParts(NamedTuple):
    """Decomposition of a URI or path, re-derived on demand by parse_uri.

    extension keeps its leading "." and sub_target its leading "?"; both are
    empty when absent.
    """

    base: str
    extension: str
    sub_target: str
    sub_index: int
