"""Locale-independent conversion between numbers and strings.

Goals: converting back and forth never drifts the value, the result is the
same on every platform and locale, and 1 renders as "1" rather than "1.000".
Values in [-1e9, 1e9] keep 6 decimal places of accuracy.
"""

import math

from .config import ConfigStore, get_config
from .strlist import join_list, split_list


def _digit_run(text: str) -> str:
    end = 0
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return text[:end]


def str_to_int(text: str) -> int:
    """Optional "-", then digits up to the first non-digit. Garbage gives 0."""
    neg = text.startswith("-")
    if neg:
        text = text[1:]

    val = 0
    for c in _digit_run(text):
        val = val * 10 + ord(c) - 0x30

    return -val if neg else val


def str_to_double(text: str) -> float:
    neg = text.startswith("-")
    if neg:
        text = text[1:]

    digits = _digit_run(text)
    val = float(str_to_int(digits))

    rest = text[len(digits) :]
    if rest.startswith("."):
        frac = _digit_run(rest[1:7]).ljust(6, "0")
        val += str_to_int(frac) / 1000000

    return -val if neg else val


def int_to_str(value: int) -> str:
    return str(int(value))


def double_to_str(value: float) -> str:
    neg = value < 0
    if neg:
        value = -value

    i = math.floor(value)
    # round half away from zero; value is non-negative here
    f = math.floor((value - i) * 1000000 + 0.5)

    if f == 1000000:
        i += 1
        f = 0

    if i == 0 and f == 0:
        neg = False

    s = f"{'-' if neg else ''}{i}.{f:06d}".rstrip("0")
    return s.removesuffix(".")


def str_to_int_array(text: str, count: int) -> list[int] | None:
    """Parse exactly count integers separated by commas and/or spaces."""
    tokens = split_list(text, ", ")
    if len(tokens) != count:
        return None
    return [str_to_int(t) for t in tokens]


def int_array_to_str(values) -> str:
    return join_list([int_to_str(v) for v in values], ",")


def str_to_double_array(text: str, count: int) -> list[float] | None:
    """Parse exactly count numbers separated by commas and/or spaces."""
    tokens = split_list(text, ", ")
    if len(tokens) != count:
        return None
    return [str_to_double(t) for t in tokens]


def double_array_to_str(values) -> str:
    return join_list([double_to_str(v) for v in values], ",")


def format_time(milliseconds: int, config: ConfigStore | None = None) -> str:
    """Render a duration as H:MM:SS, or M:SS / MM:SS without hours.

    The two-digit minutes form is used when "leading_zero" is set.
    """
    milliseconds = max(0, int(milliseconds))
    hours = milliseconds // 3600000
    minutes = (milliseconds // 60000) % 60
    seconds = (milliseconds // 1000) % 60

    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"

    config = config or get_config()
    if config.get_bool("leading_zero"):
        return f"{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
