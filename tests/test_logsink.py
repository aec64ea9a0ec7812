import io
import logging
import os
import threading

import pytest

from moviekit.logsink import (
    BufferingHandler,
    MessageSink,
    MsgType,
    SerializedMessage,
    format_message,
    init_logging,
)


def _sink(**kwargs):
    stream = io.StringIO()
    kwargs.setdefault("print_all", False)
    return MessageSink(stream, **kwargs), stream


def test_format_pinned_value():
    assert format_message(5, MsgType.DEBUG, "hi", "CFG", 42, 42) == "Debug:      5 CFG    : hi"


def test_format_default_category_pads_nine_spaces():
    out = format_message(0, MsgType.INFO, "x", "default", 1, 1)
    assert out == "Info :      0 " + " " * 9 + "x"


def test_format_includes_pid_and_tid_when_different():
    out = format_message(7, MsgType.WARNING, "m", "SYS", 20, 10)
    assert "[10|20]" in out
    assert out.startswith("Warni:")


def test_format_escapes_control_characters():
    out = format_message(0, MsgType.DEBUG, "a\tb\rc\x00d\x1be", "CFG", 1, 1)
    assert out.endswith("a\\tb\\rc\\0d\\ee")


def test_format_newlines_repeat_prefix():
    prefix = format_message(3, MsgType.DEBUG, "", "LOG", 1, 1)
    out = format_message(3, MsgType.DEBUG, "one\ntwo\nthree", "LOG", 1, 1)
    lines = out.split("\n")
    assert len(lines) == 3
    assert [line[len(prefix):] for line in lines] == ["one", "two", "three"]
    assert all(line.startswith(prefix) for line in lines)


def test_format_prefix_is_at_least_twenty_wide():
    prefix = format_message(1, MsgType.DEBUG, "", "A", 1, 1)
    assert len(prefix) >= 20


def test_serialized_message_truncates():
    msg = SerializedMessage(MsgType.DEBUG, "x" * 600, "c" * 100, 0, 1, "f" * 100, "g" * 200)
    assert len(msg.message) == 512
    assert len(msg.category) == 63
    assert len(msg.file) == 63
    assert len(msg.function) == 127


def test_debug_is_buffered_until_flush():
    sink, stream = _sink()
    sink.handle(MsgType.DEBUG, "quiet", "CFG")
    assert stream.getvalue() == ""
    sink.flush()
    assert "quiet" in stream.getvalue()


def test_warning_flushes_buffer_first():
    sink, stream = _sink()
    sink.handle(MsgType.DEBUG, "before", "CFG")
    sink.handle(MsgType.WARNING, "problem", "CFG")
    text = stream.getvalue()
    assert text.index("before") < text.index("problem")
    assert text.count("\n") == 2


def test_buffer_drops_oldest_beyond_capacity():
    sink, stream = _sink(capacity=2)
    for word in ("first", "second", "third"):
        sink.handle(MsgType.DEBUG, word, "CFG")
    sink.flush()
    text = stream.getvalue()
    assert "first" not in text
    assert "second" in text and "third" in text


def test_flush_empties_buffer():
    sink, stream = _sink()
    sink.handle(MsgType.INFO, "once", "CFG")
    sink.flush()
    sink.flush()
    assert stream.getvalue().count("once") == 1


def test_fatal_raises_with_location():
    sink, stream = _sink()
    sink.handle(MsgType.DEBUG, "context", "CFG")
    with pytest.raises(RuntimeError) as info:
        sink.handle(MsgType.FATAL, "boom", "CFG", "file.cpp", 12)
    assert str(info.value) == "file.cpp:12 boom"
    text = stream.getvalue()
    assert text.index("context") < text.index("file.cpp:12 boom")


def test_print_all_writes_immediately():
    sink, stream = _sink(print_all=True)
    sink.handle(MsgType.DEBUG, "loud", "CFG")
    assert "loud" in stream.getvalue()


def test_ignored_debug_categories_are_dropped():
    sink, stream = _sink(print_all=True)
    sink.handle(MsgType.DEBUG, "noise", "qt.qpa.input")
    sink.handle(MsgType.DEBUG, "noise", "qt.widgets.gestures")
    assert stream.getvalue() == ""


def test_trailing_newlines_stripped_and_empty_ignored():
    sink, stream = _sink(print_all=True)
    sink.handle(MsgType.INFO, "\n\n", "CFG")
    assert stream.getvalue() == ""
    sink.handle(MsgType.INFO, "text\n\n", "CFG")
    assert stream.getvalue().endswith("text\n")
    assert stream.getvalue().count("\n") == 1


def test_own_thread_has_no_pid_tid_marker_only_if_equal():
    sink, stream = _sink(print_all=True)
    sink.handle(MsgType.INFO, "m", "CFG")
    marker = f"[{os.getpid()}|"
    has_marker = marker in stream.getvalue()
    assert has_marker == (threading.get_native_id() != os.getpid())


def test_msec_since_start_non_negative_and_monotonic():
    sink, _ = _sink()
    a = sink.msec_since_start()
    b = sink.msec_since_start()
    assert 0 <= a <= b


def test_invalid_capacity():
    with pytest.raises(ValueError):
        MessageSink(io.StringIO(), capacity=0)


def test_buffering_handler_forwards_records():
    sink, stream = _sink()
    log = logging.getLogger("moviekit.test.handler")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    handler = BufferingHandler(sink)
    log.addHandler(handler)
    try:
        log.debug("dbg %d", 1)
        assert stream.getvalue() == ""
        log.warning("warn %s", "x")
    finally:
        log.removeHandler(handler)
    text = stream.getvalue()
    assert "dbg 1" in text
    assert "warn x" in text
    assert "moviekit.test.handler" in text
    assert text.index("dbg 1") < text.index("warn x")


def test_buffering_handler_maps_error_to_critical():
    sink, stream = _sink()
    record = logging.LogRecord("CFG", logging.ERROR, "f.py", 3, "bad", None, None)
    BufferingHandler(sink).emit(record)
    assert stream.getvalue().startswith("Criti:")


def test_init_logging_is_idempotent():
    root = logging.getLogger()
    before = list(root.handlers)
    first = init_logging()
    second = init_logging()
    try:
        assert first is second
        added = [h for h in root.handlers if h not in before]
        assert len([h for h in root.handlers if isinstance(h, BufferingHandler) and h.sink is first]) == 1
        assert all(isinstance(h, BufferingHandler) for h in added)
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)