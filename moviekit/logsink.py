"""A message sink that buffers debug output and prints it on demand.

Debug and info messages go into a ring buffer and are only written out
when a warning or worse arrives, so the context leading up to a problem
is shown without flooding the terminal. A fatal message is written and
then raised as :class:`RuntimeError`.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime

logger = logging.getLogger("LOG")

_MAX_MESSAGE = 512
_MAX_CATEGORY = 63
_MAX_FILE = 63
_MAX_FUNCTION = 127
_DEFAULT_CAPACITY = 10000
_IGNORED_DEBUG_CATEGORIES = frozenset({"qt.qpa.input", "qt.widgets.gestures"})

_ESCAPES = (
    ("\r", "\\r"),
    ("\a", "\\a"),
    ("\b", "\\b"),
    ("\f", "\\f"),
    ("\t", "\\t"),
    ("\v", "\\v"),
    ("\x00", "\\0"),
    ("\x1b", "\\e"),
)


class MsgType(enum.Enum):
    """Severity of a message, with its five-character label."""

    DEBUG = "Debug"
    INFO = "Info "
    WARNING = "Warni"
    CRITICAL = "Criti"
    FATAL = "Fatal"

    @property
    def label(self):
        return self.value


def _label(msg_type):
    return msg_type.label if isinstance(msg_type, MsgType) else "Unkno"


def format_message(msec, msg_type, message, category, tid, pid):
    """Format one message as it is printed, without a trailing newline."""
    prefix = f"{_label(msg_type)}: {str(int(msec)).rjust(6)}"
    if pid != tid:
        prefix += f" [{pid}|{tid}]"
    prefix += " "
    if category is None or category == "default":
        prefix += " " * 9
    else:
        prefix += f"{category.ljust(7)}: "
    prefix = prefix.ljust(20)

    text = message
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    text = text.replace("\n", "\n" + prefix)
    return prefix + text


@dataclass
class SerializedMessage:
    """A buffered message; long fields are cut to fixed maxima."""

    msg_type: MsgType
    message: str
    category: str
    msec_since_start: int
    tid: int
    file: str = ""
    function: str = ""
    line: int = 0

    def __post_init__(self):
        self.message = (self.message or "")[:_MAX_MESSAGE]
        self.category = (self.category or "")[:_MAX_CATEGORY]
        self.file = (self.file or "")[:_MAX_FILE]
        self.function = (self.function or "")[:_MAX_FUNCTION]


def _env_print_all():
    return os.environ.get("MC_ALL_LOG") == "1"


class MessageSink:
    """Writes messages to ``stream``, holding back debug and info ones.

    ``capacity`` bounds the number of held-back messages; the oldest are
    dropped first. With ``print_all`` every message is written at once;
    when ``None`` it is on if the ``MC_ALL_LOG`` environment variable is
    ``1``.
    """

    def __init__(self, stream=None, capacity=_DEFAULT_CAPACITY, print_all=None):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._stream = stream
        self._buffer = deque(maxlen=capacity)
        self._lock = threading.Lock()
        self._print_all = _env_print_all() if print_all is None else bool(print_all)
        self._start = time.monotonic()
        self._pid = os.getpid()

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stderr

    def msec_since_start(self):
        """Milliseconds since the sink was created, never negative."""
        return max(0, int((time.monotonic() - self._start) * 1000))

    def _output(self, msec, msg_type, message, category, tid):
        line = format_message(msec, msg_type, message, category, tid, self._pid)
        self.stream.write(line + "\n")

    def flush(self):
        """Write out all held-back messages and empty the buffer."""
        with self._lock:
            for item in self._buffer:
                self._output(item.msec_since_start, item.msg_type, item.message,
                             item.category, item.tid)
            self._buffer.clear()
        flush = getattr(self.stream, "flush", None)
        if flush is not None:
            flush()

    def handle(self, msg_type, message, category="default", file=None, line=0):
        """Take one message; raises :class:`RuntimeError` for fatal ones."""
        if category is None:
            category = "default"
        if msg_type is MsgType.DEBUG and category in _IGNORED_DEBUG_CATEGORIES:
            return
        text = message.rstrip("\n")
        if not text:
            return

        tid = threading.get_native_id()
        msec = self.msec_since_start()

        if msg_type in (MsgType.WARNING, MsgType.CRITICAL):
            self.flush()
            self._output(msec, msg_type, text, category, tid)
        elif msg_type is MsgType.FATAL:
            with_location = f"{file or ''}:{line} {text}"
            self.flush()
            self._output(msec, msg_type, with_location, category, tid)
            raise RuntimeError(with_location)
        elif self._print_all:
            self._output(msec, msg_type, text, category, tid)
        else:
            entry = SerializedMessage(msg_type, text, category, msec, tid, file or "", "", line)
            with self._lock:
                self._buffer.append(entry)


def _level_to_type(levelno):
    if levelno >= logging.ERROR:
        return MsgType.CRITICAL
    if levelno >= logging.WARNING:
        return MsgType.WARNING
    if levelno >= logging.INFO:
        return MsgType.INFO
    return MsgType.DEBUG


class BufferingHandler(logging.Handler):
    """A logging handler that passes records on to a :class:`MessageSink`."""

    def __init__(self, sink):
        super().__init__(logging.DEBUG)
        self.sink = sink

    def emit(self, record):
        try:
            message = record.getMessage()
        except Exception:
            self.handleError(record)
            return
        category = "default" if record.name == "root" else record.name
        self.sink.handle(_level_to_type(record.levelno), message, category,
                         record.pathname, record.lineno)


_init_lock = threading.Lock()
_sink = None


def init_logging():
    """Install a buffering handler on the root logger once; return its sink."""
    global _sink
    with _init_lock:
        if _sink is not None:
            return _sink
        _sink = MessageSink()
        root = logging.getLogger()
        root.addHandler(BufferingHandler(_sink))
        root.setLevel(logging.DEBUG)
    logger.debug("started at %s", datetime.now().strftime("%H:%M:%S.%f")[:-3])
    return _sink