"""Delimited-list codec for list-like settings."""

from .buffer import StringBuf
from .text import as_bytes


def split_list(text: str, delimiters: str) -> list[str]:
    """Split on any character of delimiters, dropping empty tokens.

    >>> split_list("a, b,c", ", ")
    ['a', 'b', 'c']
    """
    tokens = []
    start = None

    for i, c in enumerate(text):
        if c in delimiters:
            if start is not None:
                tokens.append(text[start:i])
                start = None
        elif start is None:
            start = i

    if start is not None:
        tokens.append(text[start:])

    return tokens


def join_list(tokens, separator: str) -> str:
    """Join tokens with separator between them (never leading or trailing).

    Raises BufferCapacityError when the result exceeds the default capacity.
    """
    buf = StringBuf(-1)
    sep = as_bytes(separator)

    for i, token in enumerate(tokens):
        if i:
            buf.append(sep)
        buf.append(as_bytes(token))

    return buf.decode()
