"""None-tolerant comparisons, case-insensitive search, and the index hash."""

from .models import SWAP_CASE
from .text import as_bytes

_MASK = 0xFFFFFFFF


def _cmp(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


def compare_safe(a: str | bytes | None, b: str | bytes | None, length: int = -1) -> int:
    """Byte-wise ordering where None sorts before any value.

    When length is non-negative only the first length bytes are compared.
    """
    if a is None:
        return -1 if b is not None else 0
    if b is None:
        return 1

    x, y = as_bytes(a), as_bytes(b)
    if length >= 0:
        x, y = x[:length], y[:length]
    return _cmp(x, y)


def compare_nocase(a: str | bytes | None, b: str | bytes | None, length: int = -1) -> int:
    """compare_safe() with ASCII case folding."""
    if a is None:
        return -1 if b is not None else 0
    if b is None:
        return 1

    x, y = as_bytes(a).lower(), as_bytes(b).lower()
    if length >= 0:
        x, y = x[:length], y[:length]
    return _cmp(x, y)


def has_prefix_nocase(s: str | bytes, prefix: str | bytes) -> bool:
    return as_bytes(s).lower().startswith(as_bytes(prefix).lower())


def has_suffix_nocase(s: str | bytes, suffix: str | bytes) -> bool:
    return as_bytes(s).lower().endswith(as_bytes(suffix).lower())


def _signed(c: int) -> int:
    return c - 256 if c > 127 else c


def str_hash(s: str | bytes) -> int:
    """Bernstein hash (h = 33 * h + c, seeded at 5381), unrolled by 8 and 4.

    Bytes are weighted as signed 8-bit values and the result is reduced to
    32 bits, so values match indexes written by the x86 builds.
    """
    data = [_signed(c) for c in as_bytes(s)]
    h = 5381
    i = 0
    left = len(data)

    while left >= 8:
        c = data[i : i + 8]
        h = (
            h * 1954312449
            + c[0] * 3963737313
            + c[1] * 1291467969
            + c[2] * 39135393
            + c[3] * 1185921
            + c[4] * 35937
            + c[5] * 1089
            + c[6] * 33
            + c[7]
        ) & _MASK
        i += 8
        left -= 8

    if left >= 4:
        c = data[i : i + 4]
        h = (h * 1185921 + c[0] * 35937 + c[1] * 1089 + c[2] * 33 + c[3]) & _MASK
        i += 4
        left -= 4

    for c in data[i:]:
        h = (h * 33 + c) & _MASK

    return h


def find_nocase(haystack: str | bytes, needle: str | bytes) -> int | None:
    """Byte offset of the first ASCII case-insensitive match, or None."""
    hay, pat = as_bytes(haystack), as_bytes(needle)

    for start in range(len(hay) - len(pat) + 1):
        for a, b in zip(hay[start : start + len(pat)], pat):
            # SWAP_CASE is 0 for non-letters, which must not match a NUL
            if a != b and (not SWAP_CASE[b] or a != SWAP_CASE[b]):
                break
        else:
            return start

    return None


def find_nocase_text(haystack: str, needle: str) -> int | None:
    """Code point offset of the first case-insensitive match, or None.

    ASCII characters fold through the swap table; everything else is compared
    lower-cased.
    """
    for start in range(len(haystack) - len(needle) + 1):
        for a, b in zip(haystack[start : start + len(needle)], needle):
            if a == b:
                continue
            if ord(a) < 128:
                if not SWAP_CASE[ord(a)] or SWAP_CASE[ord(a)] != ord(b):
                    break
            elif a.lower() != b.lower():
                break
        else:
            return start

    return None
