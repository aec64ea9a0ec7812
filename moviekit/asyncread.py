"""Loading a file in a background reader so a hanging file system cannot block us."""

from __future__ import annotations

import logging
import os
import threading
import time
from dataclasses import dataclass

from .readchild import ChildReadError, copy_file_to_pipe

logger = logging.getLogger(__name__)

_FILEREAD_BUFSIZE = 65536
_PIPE_BUFSIZE = 16384
_SHORT_NAME_LEN = 20
_CONTENT = "content"


@dataclass(frozen=True)
class StepResult:
    """Outcome of one :meth:`AsyncReadFile.step`.

    ``running`` is false once the load is over, successful or not.
    ``data`` holds content bytes received in this step and ``errors`` the
    error messages produced in this step.
    """

    running: bool
    made_progress: bool
    data: bytes = b""
    errors: tuple = ()


class _Reader(threading.Thread):
    """Reads the file and writes it into the content pipe, if there is one."""

    def __init__(self, filename, content_fd, max_read_size):
        super().__init__(name=f"AsyncReadFile_{filename[-_SHORT_NAME_LEN:]}", daemon=True)
        self._filename = filename
        self._content_fd = content_fd
        self._max_read_size = max_read_size
        self.exit_code = None
        self.message = ""

    def run(self):
        try:
            copy_file_to_pipe(
                self._filename,
                self._content_fd,
                self._max_read_size,
                _PIPE_BUFSIZE,
                _FILEREAD_BUFSIZE,
            )
            self.exit_code = 0
        except ChildReadError as exc:
            self.message = str(exc)
            self.exit_code = 1
        except (OSError, ValueError) as exc:
            self.message = str(exc)
            self.exit_code = 1
        finally:
            if self._content_fd >= 0:
                try:
                    os.close(self._content_fd)
                except OSError:
                    pass


class AsyncReadFile:
    """Reads a file through a background reader, one non-blocking step at a time.

    With ``get_contents`` the file's bytes are handed back in the step
    results; otherwise the reader only reads them, which warms the cache and
    shows whether the file can be read. A negative ``max_read_size`` reads
    the whole file.
    """

    def __init__(self, filename, get_contents, max_read_size):
        self._ofn = os.fspath(filename)
        self._fn = ""
        self._get_contents = bool(get_contents)
        self._max_read_size = max_read_size
        self._started = False
        self._content_fd = -1
        self._reader = None
        self._done = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.finish()
        return False

    def __del__(self):
        try:
            self.finish()
        except Exception:
            pass

    def _errmsg(self, err, msg):
        if len(self._ofn) > _SHORT_NAME_LEN:
            prefix = "..." + self._ofn[-(_SHORT_NAME_LEN - 3):]
        else:
            prefix = self._ofn
        text = f"{prefix}: {msg}"
        if err:
            text += f": {os.strerror(err)}"
        return text

    def _abandon_reader(self, reason):
        if self._reader is not None:
            logger.debug("abandoning reader for %s: %s", self._ofn[-_SHORT_NAME_LEN:], reason)
            self._reader = None

    def _close_content(self):
        fd = self._content_fd
        if fd >= 0:
            self._content_fd = -1
            try:
                os.close(fd)
            except OSError as exc:
                logger.debug("close(%s FD=%d): %s", _CONTENT, fd, exc.strerror)

    def step(self):
        """Advance the load by one step without blocking."""
        errors = []
        data = bytearray()
        running, progress = self._step(errors, data)
        return StepResult(running, progress, bytes(data), tuple(errors))

    def _step(self, errors, data):
        if not self._ofn:
            errors.append("iter() called but start() not called before")
            return False, True

        if not self._fn:
            self._fn = self._ofn
            return True, True

        if not self._started:
            return self._spawn(errors), True

        if self._done:
            return False, False

        got_content = False
        if self._content_fd >= 0:
            ok, got_content = self._read(data, errors)
            if not ok:
                self._done = True
                return False, True

        if self._content_fd < 0 or not got_content:
            if self._poll(data, errors):
                self._done = True
                return False, True
        return True, got_content

    def _spawn(self, errors):
        content_read = content_write = -1
        if self._get_contents:
            try:
                content_read, content_write = os.pipe()
                os.set_blocking(content_read, False)
            except OSError as exc:
                for fd in (content_read, content_write):
                    if fd >= 0:
                        os.close(fd)
                errors.append(self._errmsg(exc.errno, f"could not pipe2 {_CONTENT}"))
                return False

        reader = _Reader(self._fn, content_write, self._max_read_size)
        try:
            reader.start()
        except RuntimeError:
            for fd in (content_read, content_write):
                if fd >= 0:
                    os.close(fd)
            errors.append(self._errmsg(0, "could not start reader"))
            return False

        logger.debug("started reader for %s", self._fn[-_SHORT_NAME_LEN:])
        self._reader = reader
        self._content_fd = content_read
        self._started = True
        return True

    def _read(self, accumulator, errors):
        """Return ``(ok, got_bytes)``."""
        fd = self._content_fd
        try:
            chunk = os.read(fd, _PIPE_BUFSIZE)
        except BlockingIOError:
            return True, False
        except OSError as exc:
            self._abandon_reader(f"due to read error on {_CONTENT} FD")
            errors.append(self._errmsg(exc.errno, f"read error on {_CONTENT} FD"))
            return False, False
        if not chunk:
            logger.debug("got EOF from reader on %s FD=%d", _CONTENT, fd)
            self._close_content()
            return True, False
        accumulator.extend(chunk)
        return True, True

    def _drain(self, accumulator, errors):
        while self._content_fd >= 0:
            ok, got = self._read(accumulator, errors)
            if not ok or not got:
                return

    def _poll(self, data, errors):
        """Return true once the reader is over, recording its outcome."""
        reader = self._reader
        if reader is None:
            errors.append("did not properly exit")
            return True
        if reader.is_alive():
            return False

        self._reader = None
        self._drain(data, errors)
        code = reader.exit_code
        if code == 1:
            errors.append("exit value 1")
        elif code is None:
            errors.append("did not properly exit")
        elif code != 0:
            errors.append(f"exit value {code}but I only expected 0 or 1")
        if reader.message:
            errors.append(reader.message)
        return True

    def finish(self):
        """Close the channel, abandon a still running reader and forget the file."""
        self._close_content()
        self._abandon_reader("still alive")
        self._fn = ""
        self._ofn = ""


def _drive(reader, timeout_msec, sleep_usec, on_data):
    errors = []
    start = time.monotonic()
    while True:
        result = reader.step()
        errors.extend(result.errors)
        on_data(result.data)
        if not result.running:
            return errors
        elapsed_msec = (time.monotonic() - start) * 1000.0
        if elapsed_msec > timeout_msec:
            errors.append("took too long")
            return errors
        if not result.made_progress:
            remaining_msec = timeout_msec - elapsed_msec
            sleep = min(sleep_usec, 1000 * remaining_msec)
            if sleep > 0:
                time.sleep(sleep / 1_000_000)


def async_slurp_file(path, timeout_msec, sleep_usec):
    """Read a whole file; return ``(contents, errors)``."""
    contents = bytearray()
    with AsyncReadFile(path, True, -1) as reader:
        errors = _drive(reader, timeout_msec, sleep_usec, contents.extend)
    if errors:
        logger.debug("async_slurp_file: FAILURE %s", "; ".join(errors))
    else:
        logger.debug("async_slurp_file: success")
    return bytes(contents), errors


def try_load_start_of_file(path, max_read_size, timeout_msec, sleep_usec):
    """Read the first bytes of a file; return ``""`` or the joined errors."""
    with AsyncReadFile(path, False, max_read_size) as reader:
        errors = _drive(reader, timeout_msec, sleep_usec, lambda data: None)
    joined = "; ".join(errors)
    if joined:
        logger.debug("try_load_start_of_file: FAILURE %s", joined)
    else:
        logger.debug("try_load_start_of_file: success")
    return joined