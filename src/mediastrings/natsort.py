"""Natural ordering for names that embed numbers (track2 before track10)."""

from functools import cmp_to_key

from .models import HEX_VALUES
from .text import as_bytes


def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39


def _fold(c: int) -> int:
    return c + 0x20 if 0x41 <= c <= 0x5A else c


def _natural_compare(ap: bytes, bp: bytes, decode: bool) -> int:
    i = j = 0
    while i < len(ap) or j < len(bp):
        a = ap[i] if i < len(ap) else 0
        b = bp[j] if j < len(bp) else 0
        i += 1
        j += 1

        if decode:
            if a == 0x25 and i + 1 < len(ap):
                a = (HEX_VALUES[ap[i]] << 4) | HEX_VALUES[ap[i + 1]]
                i += 2
            if b == 0x25 and j + 1 < len(bp):
                b = (HEX_VALUES[bp[j]] << 4) | HEX_VALUES[bp[j + 1]]
                j += 2

        if _is_digit(a) and _is_digit(b):
            # digits continuing a run are read as-is, even when decoding
            x = a - 0x30
            while i < len(ap) and _is_digit(ap[i]):
                x = 10 * x + ap[i] - 0x30
                i += 1
            y = b - 0x30
            while j < len(bp) and _is_digit(bp[j]):
                y = 10 * y + bp[j] - 0x30
                j += 1
            if x != y:
                return 1 if x > y else -1
        else:
            a, b = _fold(a), _fold(b)
            if a != b:
                return 1 if a > b else -1

    return 0


def compare_natural(a: str | bytes | None, b: str | bytes | None) -> int:
    """Case-insensitive ordering where digit runs compare by numeric value.

    Non-ASCII bytes compare by raw value. None sorts before any value.
    """
    if a is None:
        return -1 if b is not None else 0
    if b is None:
        return 1
    return _natural_compare(as_bytes(a), as_bytes(b), decode=False)


def compare_natural_encoded(a: str | bytes | None, b: str | bytes | None) -> int:
    """compare_natural() on percent-encoded text, decoding %XX as it scans."""
    if a is None:
        return -1 if b is not None else 0
    if b is None:
        return 1
    return _natural_compare(as_bytes(a), as_bytes(b), decode=True)


natural_sort_key = cmp_to_key(compare_natural)
natural_sort_key_encoded = cmp_to_key(compare_natural_encoded)


def natural_sorted(items, encoded: bool = False) -> list:
    """Sort items with compare_natural (or compare_natural_encoded)."""
    return sorted(items, key=natural_sort_key_encoded if encoded else natural_sort_key)
