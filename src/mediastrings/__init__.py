"""mediastrings -- move between filenames, file:// URIs, and display strings.

Core modules:
    buffer    -- StringBuf, a fixed-capacity byte buffer. Writes past capacity
                 raise BufferCapacityError instead of truncating.
    compare   -- None-tolerant byte comparisons, ASCII/Unicode case-insensitive
                 search, and str_hash, the bit-exact 32-bit index hash.
    percent   -- Percent-encoding codec (lenient decoding of short escapes).
    filename  -- Filename normalization ("." / ".." collapsing) and joining for
                 POSIX and Windows path styles.
    uri       -- URI parsing (base, extension, sub-target), filename <-> URI
                 conversion, display strings, and playlist-relative resolution.
    natsort   -- Natural ordering (track2 before track10), optionally decoding
                 %XX escapes while comparing.
    numeric   -- Locale-independent int/float <-> string conversion, fixed-count
                 arrays, and duration formatting.
    strlist   -- Delimited-list split/join for list-like settings.
    charset   -- LocaleBridge protocol and the codec-backed SystemLocale.
    config    -- Settings via pydantic-settings (LEADING_ZERO, CONVERT_BACKSLASH,
                 HOME_DIR, CHARSET, LOG_LEVEL, LOG_FILE) and loguru setup.
    cli       -- Click CLI exposing the conversions for scripting.
"""
