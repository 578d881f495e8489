"""Filename normalization and joining for POSIX and Windows path styles."""

from .buffer import StringBuf
from .models import HOST_STYLE, SEPARATOR, PathStyle
from .text import as_bytes


def normalize_filename(filename: str | bytes, style: PathStyle = HOST_STYLE) -> str:
    """Collapse "." and ".." elements and drop one trailing separator.

    ".." above the root collapses to the root. The root "/" (or a drive root
    such as "C:\\") keeps its separator. A relative path that cancels out
    entirely ("a/..") becomes ".".
    """
    data = as_bytes(filename)
    if style == PathStyle.WINDOWS:
        data = data.replace(b"/", b"\\")

    sep = SEPARATOR[style].encode()
    buf = StringBuf(len(data))
    buf.append(data)

    # remove current directory (".") elements
    while len(buf) >= 2:
        n = len(buf)
        s = buf.find(sep + b"." + sep)
        if s < 0:
            if not buf.endswith(sep + b"."):
                break
            s = n - 2
        buf.remove(s + 1, min(s + 3, n) - (s + 1))

    # remove parent directory ("..") elements with the segment before them
    start = 0
    while len(buf) >= 3:
        n = len(buf)
        s = buf.find(sep + b".." + sep, start)
        if s < 0:
            if not buf.endswith(sep + b"..") or n - 3 < start:
                break
            s = n - 3
        s2 = buf.rfind(sep, s)
        if buf[s2 + 1 : s] == b"..":
            # leading ".." of a relative path, nothing to cancel
            start = s + 1
            continue
        if s2 < 0:
            if s > 0 and not buf[:s].endswith(b":"):
                # relative first segment: drop it along with the ".."
                buf.remove(0, min(s + 4, n))
                continue
            # nothing above the root (or drive) to remove
            s2 = s
        buf.remove(s2 + 1, min(s + 4, n) - (s2 + 1))

    # remove trailing separator, but leave "/" and "C:\"
    root_len = 3 if style == PathStyle.WINDOWS else 1
    if len(buf) > root_len and buf.endswith(sep):
        buf.resize(len(buf) - 1)

    if data and not len(buf):
        return "."

    return buf.decode()


def build_filename(*segments: str | bytes, style: PathStyle = HOST_STYLE) -> str:
    """Join non-empty segments with exactly one separator between them.

    Raises BufferCapacityError when the result does not fit a default-capacity
    buffer.
    """
    seps = (b"/", b"\\") if style == PathStyle.WINDOWS else (b"/",)
    sep = SEPARATOR[style].encode()
    buf = StringBuf(-1)

    for segment in segments:
        data = as_bytes(segment)
        if not data:
            continue
        if len(buf):
            data = data.lstrip(b"".join(seps))
            if not buf.endswith(seps):
                buf.append(sep)
        buf.append(data)

    return buf.decode()
