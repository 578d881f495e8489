"""URI parsing and conversion between filenames, URIs, and display text.

Filenames may be passed as str or bytes. Locale transcoding goes through a
LocaleBridge and user settings through a ConfigStore; both are keyword
arguments and default to the process-wide instances.
"""

import gettext
import re

from loguru import logger

from .charset import LocaleBridge, default_bridge
from .config import ConfigStore, get_config
from .filename import normalize_filename
from .models import CDDA_PREFIX, HOST_STYLE, SEPARATOR, URI_PREFIX, PathStyle, UriParts
from .percent import decode_percent, encode_percent
from .text import as_bytes, as_text, is_valid_utf8

log = logger.bind(stage="uri")

_ = gettext.translation("mediastrings", fallback=True).gettext

# "?2" and also "?2xyz": trailing text after the digits is tolerated
_SUB_INDEX = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_uri(uri: str) -> UriParts:
    """Split a URI or path into base name, extension, and sub-target.

    >>> parse_uri("file:///music/album.cue?2")
    UriParts(base='album.cue?2', extension='.cue', sub_target='?2', sub_index=2)
    """
    base = uri[uri.rfind("/") + 1 :]

    sub_at = len(base)
    sub_index = 0
    q = base.rfind("?")
    if q >= 0:
        m = _SUB_INDEX.match(base, q + 1)
        if m:
            sub_at = q
            sub_index = int(m.group())

    dot = base.rfind(".")
    ext_at = dot if 0 <= dot < sub_at else sub_at

    return UriParts(
        base=base,
        extension=base[ext_at:sub_at],
        sub_target=base[sub_at:],
        sub_index=sub_index,
    )


def get_scheme(uri: str) -> str:
    delim = uri.find("://")
    return uri[:delim] if delim >= 0 else ""


def get_extension(uri: str) -> str:
    """Extension without its leading ".", with sub-tunes and queries removed."""
    ext = parse_uri(uri).extension
    if not ext.startswith("."):
        return ""
    return ext[1:].partition("?")[0]


# ---------------------------------------------------------------------------
# Filename <-> URI
# ---------------------------------------------------------------------------


def filename_to_uri(
    name: str | bytes,
    *,
    bridge: LocaleBridge | None = None,
    style: PathStyle = HOST_STYLE,
) -> str:
    """Percent-encode a local filename into a file:// URI.

    On POSIX a name that is not valid UTF-8 is first converted from the
    locale charset (unless the locale is UTF-8 already). Windows names are
    taken as UTF-8 with "\\" turned into "/".
    """
    data = as_bytes(name)

    if style == PathStyle.WINDOWS:
        data = data.replace(b"\\", b"/")
    else:
        bridge = bridge or default_bridge()
        if not bridge.is_utf8_locale() and not is_valid_utf8(data):
            converted = bridge.to_utf8(data)
            if converted is not None:
                data = converted
            else:
                log.debug(f"Locale conversion failed, encoding raw bytes: {data!r}")

    return URI_PREFIX[style] + encode_percent(data)


def uri_to_filename(
    uri: str,
    use_locale: bool = True,
    *,
    bridge: LocaleBridge | None = None,
    style: PathStyle = HOST_STYLE,
) -> str | None:
    """Decode a file:// URI into a normalized local filename.

    Returns None for any other kind of URI. On POSIX the decoded UTF-8 is
    converted to the locale charset when use_locale is set.
    """
    prefix = URI_PREFIX[style]
    if not uri.startswith(prefix):
        log.debug(f"Not a {prefix} URI: {uri}")
        return None

    data = decode_percent(uri[len(prefix) :])

    if style == PathStyle.POSIX and use_locale:
        bridge = bridge or default_bridge()
        if not bridge.is_utf8_locale() and is_valid_utf8(data):
            converted = bridge.from_utf8(data)
            if converted is not None:
                data = converted

    return normalize_filename(data, style=style)


def uri_to_display(
    uri: str,
    *,
    config: ConfigStore | None = None,
    bridge: LocaleBridge | None = None,
    style: PathStyle = HOST_STYLE,
) -> str:
    """Format a URI for human-readable display.

    Percent-decodes, and for file:// URIs shows the normalized filename with
    the home directory abbreviated to "~".
    """
    if uri.startswith(CDDA_PREFIX):
        return _("Audio CD, track %s") % uri[len(CDDA_PREFIX) :]

    data = decode_percent(uri)
    if not is_valid_utf8(data):
        data = (bridge or default_bridge()).to_utf8(data)
        if data is None or not is_valid_utf8(data):
            log.debug(f"Undecodable URI: {uri}")
            return _("(character encoding error)")

    text = data.decode("utf-8")
    prefix = URI_PREFIX[style]
    if not text.startswith(prefix):
        return text

    text = normalize_filename(text[len(prefix) :], style=style)

    home = (config or get_config()).home_directory_utf8()
    if home and text.startswith(home) and text[len(home) : len(home) + 1] == SEPARATOR[style]:
        text = "~" + text[len(home) :]

    return text


def _is_absolute(path: str, style: PathStyle) -> bool:
    if style == PathStyle.WINDOWS:
        return len(path) >= 3 and path[1] == ":" and path[2] in "/\\"
    return path.startswith("/")


def construct_uri(
    path: str | bytes,
    reference: str,
    *,
    config: ConfigStore | None = None,
    bridge: LocaleBridge | None = None,
    style: PathStyle = HOST_STYLE,
) -> str | None:
    """Build a full URI for a playlist entry.

    path is a full URI (returned unchanged), an absolute filename, or a path
    relative to reference, the URI of the playlist containing it. Returns None
    when a relative path cannot be resolved.
    """
    text = as_text(path)

    if "://" in text:
        return text

    if _is_absolute(text, style):
        return filename_to_uri(path, bridge=bridge, style=style)

    slash = reference.rfind("/")
    if slash < 0:
        log.debug(f"Reference has no directory part: {reference}")
        return None

    data = as_bytes(path)
    if not is_valid_utf8(data):
        data = (bridge or default_bridge()).to_utf8(data)
        if data is None:
            log.debug(f"Cannot convert relative path to UTF-8: {path!r}")
            return None

    if (config or get_config()).get_bool("convert_backslash"):
        data = data.replace(b"\\", b"/")

    return reference[: slash + 1] + encode_percent(data)
