import logging

import pytest

from moviekit.encoding import (
    decode_blob,
    decode_local_strict,
    decode_local_warn,
    decode_utf8_strict,
)


def test_utf8_strict_decodes_multibyte():
    assert decode_utf8_strict("héllo".encode("utf-8")) == "héllo"


def test_empty_blob_gives_empty_string():
    assert decode_blob(b"", "utf-8", True) == ""
    assert decode_blob(b"", None, True) == ""


def test_none_blob_is_rejected():
    with pytest.raises(ValueError):
        decode_blob(None, "utf-8", False)
    with pytest.raises(ValueError):
        decode_local_warn(None)


def test_missing_codec_is_rejected():
    with pytest.raises(LookupError):
        decode_blob(b"abc", None, False)


def test_unknown_codec_is_rejected():
    with pytest.raises(LookupError):
        decode_blob(b"abc", "no-such-codec-xyz", False)


def test_strict_raises_on_invalid_bytes():
    with pytest.raises(UnicodeDecodeError):
        decode_blob(b"ab\xff", "utf-8", True)
    with pytest.raises(UnicodeDecodeError):
        decode_utf8_strict(b"\xc3")


def test_warn_mode_replaces_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="moviekit.encoding"):
        result = decode_blob(b"ab\xff", "utf-8", False)
    assert result.startswith("ab")
    assert "\ufffd" in result
    assert any("not a valid" in r.getMessage() for r in caplog.records)


def test_local_decoders_round_trip_ascii():
    text = "plain ascii text"
    assert decode_local_warn(text.encode("ascii")) == text
    assert decode_local_strict(text.encode("ascii")) == text


def test_bytearray_accepted():
    assert decode_blob(bytearray(b"xyz"), "latin-1", True) == "xyz"