"""The reading side of an asynchronous file load, run in a forked child."""

from __future__ import annotations

import logging
import os
import select
import sys
import time

logger = logging.getLogger(__name__)

_SLEEP_IF_READ_NOT_READY = 0.001
_SLEEP_IF_PIPE_FULL = 0.001


class ChildReadError(RuntimeError):
    """Raised when the file cannot be read or transmitted."""


def _check_block_sizes(transmit, pipe_block_size, file_block_size):
    if file_block_size <= 0:
        raise ValueError("file blocksize negative/0?")
    if not transmit:
        return
    if pipe_block_size <= 0:
        raise ValueError("pipe blocksize negative/0?")
    if pipe_block_size > file_block_size:
        raise ValueError("pipe blocksize needs to be smaller or equal to file blocksize")
    if file_block_size % pipe_block_size:
        raise ValueError("file blocksize needs to be a multiple of pipe blocksize")


def _open(filename):
    try:
        return os.open(filename, os.O_RDONLY | os.O_CLOEXEC | os.O_NONBLOCK)
    except OSError as exc:
        raise ChildReadError(f"could not open: {exc.strerror}") from exc


def _file_size(fd):
    try:
        return os.fstat(fd).st_size
    except OSError as exc:
        raise ChildReadError(f"could not stat file FD={fd}: {exc.strerror}") from exc


def _wait_ready(fd, for_write, what):
    try:
        if for_write:
            _, ready, _ = select.select([], [fd], [], _SLEEP_IF_PIPE_FULL)
        else:
            ready, _, _ = select.select([fd], [], [], _SLEEP_IF_READ_NOT_READY)
    except OSError as exc:
        raise ChildReadError(f"{what}: {exc.strerror}") from exc
    return fd in ready


def _transmit(content_fd, block, pipe_block_size):
    view = memoryview(block)
    written = 0
    while written < len(view):
        chunk = view[written:written + pipe_block_size]
        if not _wait_ready(content_fd, True, "error waiting for pipe to drain"):
            continue
        try:
            count = os.write(content_fd, chunk)
        except BlockingIOError:
            time.sleep(_SLEEP_IF_PIPE_FULL)
            continue
        except OSError as exc:
            raise ChildReadError(f"error writing: {exc.strerror}") from exc
        written += count


def copy_file_to_pipe(filename, content_fd, max_read_size, pipe_block_size, file_block_size):
    """Read ``filename`` in blocks, optionally writing it to ``content_fd``.

    A negative ``max_read_size`` reads the whole file. Reading stops once at
    least ``max_read_size`` bytes were read, so whole blocks may go past it.
    ``content_fd`` of ``None`` or below zero only reads. Returns the number
    of bytes read; ``content_fd`` is left open.
    """
    transmit = content_fd is not None and content_fd >= 0
    _check_block_sizes(transmit, pipe_block_size, file_block_size)

    fd = _open(filename)
    try:
        size = _file_size(fd)
        to_read = size if max_read_size < 0 else min(size, max_read_size)
        pos = 0
        while pos < to_read:
            if not _wait_ready(fd, False, "error waiting for data"):
                continue
            try:
                block = os.read(fd, file_block_size)
            except BlockingIOError:
                time.sleep(_SLEEP_IF_READ_NOT_READY)
                continue
            except OSError as exc:
                raise ChildReadError(f"error reading: {exc.strerror}") from exc
            if not block:
                raise ChildReadError("got EOF before reading all of file?")
            if transmit:
                _transmit(content_fd, block, pipe_block_size)
            pos += len(block)
        return pos
    finally:
        try:
            os.close(fd)
        except OSError as exc:
            raise ChildReadError(f"could not close file FD={fd}: {exc.strerror}") from exc


def _close_fd(fd):
    if fd is None or fd < 0:
        return
    try:
        os.close(fd)
    except OSError as exc:
        raise ChildReadError(f"could not close file FD={fd}: {exc.strerror}") from exc


def child_read_file(filename, short_name, errmsg_fd, content_fd, max_read_size,
                    pipe_block_size, file_block_size, debug):
    """Body of the forked reader: never returns.

    Exits with 0 on success. On failure the message goes to ``errmsg_fd``
    and the process exits with 1.
    """

    def dbg(msg):
        if debug:
            print(f"CLF C  {short_name} PID={os.getpid()} {msg}", file=sys.stderr)

    exit_code = 1
    try:
        dbg(f"hi from child. errmsg FD={errmsg_fd}, pipe FD={content_fd}")
        count = copy_file_to_pipe(filename, content_fd, max_read_size,
                                  pipe_block_size, file_block_size)
        _close_fd(content_fd)
        dbg(f"successfully read {count} bytes, exiting")
        exit_code = 0
    except Exception as exc:  # the child must always exit, never unwind
        message = str(exc)
        print(f"{short_name} CLF C erroring with {message}", file=sys.stderr)
        try:
            os.write(errmsg_fd, message.encode("utf-8", "replace"))
        except OSError as write_exc:
            print(f"could not write error message to channel FD={errmsg_fd}: "
                  f"{write_exc.strerror}", file=sys.stderr)
    finally:
        try:
            sys.stdout.flush()
            sys.stderr.flush()
        except Exception:
            pass
        try:
            dbg(f"closing FD={errmsg_fd}")
            os.close(errmsg_fd)
        except OSError:
            pass
        dbg(f"exit = {exit_code}")
        os._exit(exit_code)