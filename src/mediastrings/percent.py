"""Percent-encoding codec over raw bytes."""

from .buffer import StringBuf
from .models import HEX_DIGITS, HEX_VALUES, URI_LEGAL
from .text import as_bytes


def decode_percent(data: str | bytes, length: int = -1) -> bytes:
    """Replace each %XX triple with the byte it names.

    Decodes the first length bytes, or everything when length is negative.
    A "%" without two bytes after it is copied literally along with the rest,
    and non-hex digits decode as 0.
    """
    src = as_bytes(data)
    if length >= 0:
        src = src[:length]

    buf = StringBuf(len(src))
    pos = 0

    while True:
        pct = src.find(b"%", pos)
        if pct < 0 or len(src) - pct < 3:
            break
        buf.append(src[pos:pct])
        buf.append(bytes(((HEX_VALUES[src[pct + 1]] << 4) | HEX_VALUES[src[pct + 2]],)))
        pos = pct + 3

    buf.append(src[pos:])
    return bytes(buf)


def encode_percent(data: str | bytes, length: int = -1) -> str:
    """Escape every byte outside A-Z a-z 0-9 - . _ ~ / as %XX (uppercase hex).

    Encodes the first length bytes, or everything when length is negative.
    """
    src = as_bytes(data)
    if length >= 0:
        src = src[:length]

    # worst case: every byte escaped
    buf = StringBuf(3 * len(src))
    out = buf.view()
    n = 0

    for c in src:
        if c in URI_LEGAL:
            out[n] = c
            n += 1
        else:
            out[n : n + 3] = bytes((0x25, HEX_DIGITS[c >> 4], HEX_DIGITS[c & 0xF]))
            n += 3

    out.release()
    buf.resize(n)
    return bytes(buf).decode("ascii")
