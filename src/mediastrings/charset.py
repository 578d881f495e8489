"""Bridge between the system code page and UTF-8."""

import codecs
import locale
from functools import lru_cache
from typing import Protocol

from loguru import logger

from .config import get_config

log = logger.bind(stage="charset")


class LocaleBridge(Protocol):
    """Converts filename bytes between the active locale and UTF-8.

    Conversions return None when the text is not representable.
    """

    def to_utf8(self, data: bytes) -> bytes | None: ...

    def from_utf8(self, data: bytes) -> bytes | None: ...

    def is_utf8_locale(self) -> bool: ...


class SystemLocale:
    """LocaleBridge backed by the codec registry.

    Uses the given encoding, or the locale's preferred encoding.
    """

    def __init__(self, encoding: str | None = None) -> None:
        name = encoding or locale.getpreferredencoding(False)
        try:
            self.encoding = codecs.lookup(name).name
        except LookupError:
            log.warning(f"Unknown charset '{name}', falling back to utf-8")
            self.encoding = "utf-8"

    def __repr__(self) -> str:
        return f"SystemLocale({self.encoding!r})"

    def is_utf8_locale(self) -> bool:
        return self.encoding == "utf-8"

    def to_utf8(self, data: bytes) -> bytes | None:
        try:
            return data.decode(self.encoding).encode("utf-8")
        except UnicodeError:
            log.debug(f"Cannot convert {data!r} from {self.encoding} to UTF-8")
            return None

    def from_utf8(self, data: bytes) -> bytes | None:
        try:
            return data.decode("utf-8").encode(self.encoding)
        except UnicodeError:
            log.debug(f"Cannot convert {data!r} from UTF-8 to {self.encoding}")
            return None


@lru_cache(maxsize=1)
def default_bridge() -> SystemLocale:
    """Process-wide bridge for the configured (or system) charset."""
    return SystemLocale(get_config().charset or None)
