"""Byte/text coercion and small capacity-bounded text builders.

Strings are turned into bytes with UTF-8 and surrogateescape, the convention
os.fsdecode() uses on POSIX, so filename bytes that are not valid UTF-8 survive
a round trip through str.
"""

from .buffer import StringBuf


def as_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogateescape")
    return bytes(value)


def as_text(data: bytes | bytearray | str) -> str:
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", "surrogateescape")


def is_valid_utf8(data: bytes | bytearray) -> bool:
    try:
        bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def str_concat(*parts: str | bytes) -> str:
    """Concatenate parts into a default-capacity buffer.

    Raises BufferCapacityError when the result does not fit.
    """
    buf = StringBuf(-1)
    for part in parts:
        buf.append(as_bytes(part))
    return buf.decode()


def str_tolower(s: str) -> str:
    """Lower-case ASCII letters only; other characters are left alone."""
    return "".join(c.lower() if c.isascii() else c for c in s)


def str_tolower_utf8(s: str) -> str:
    """Lower-case each code point on its own; one never becomes several."""
    out = []
    for c in s:
        low = c.lower()
        out.append(low if len(low) == 1 else c)
    return "".join(out)
