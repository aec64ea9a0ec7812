"""Decoding of raw byte strings into text with a chosen codec."""

from __future__ import annotations

import codecs
import locale
import logging

logger = logging.getLogger(__name__)


def decode_blob(blob, codec, strict):
    """Decode ``blob`` with ``codec``.

    A ``None`` blob is a programming error. An empty blob gives ``""``.
    When the bytes are not valid for the codec, ``strict`` decides whether
    a ``UnicodeDecodeError`` is raised or a warning is logged and the
    undecodable bytes are replaced.
    """
    if blob is None:
        raise ValueError("blob must not be None")
    data = bytes(blob)
    if not data:
        return ""
    if codec is None:
        raise LookupError(f"no codec given for blob {data!r}")
    name = codecs.lookup(codec).name
    try:
        return data.decode(name)
    except UnicodeDecodeError:
        if strict:
            raise
        logger.warning("Blob-string %r not a valid %s sequence.", data, name)
        return data.decode(name, errors="replace")


def _locale_codec():
    return locale.getpreferredencoding(False) or "utf-8"


def decode_local_warn(blob):
    """Decode with the locale's codec, warning about invalid bytes."""
    return decode_blob(blob, _locale_codec(), strict=False)


def decode_local_strict(blob):
    """Decode with the locale's codec, raising on invalid bytes."""
    return decode_blob(blob, _locale_codec(), strict=True)


def decode_utf8_strict(blob):
    """Decode as UTF-8, raising on invalid bytes."""
    return decode_blob(blob, "UTF-8", strict=True)