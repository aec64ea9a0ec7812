"""Killing a child process and reaping it on a background thread."""

from __future__ import annotations

import logging
import os
import signal
import threading

logger = logging.getLogger(__name__)

_KILL_SIGNAL = signal.SIGKILL


def _signal_name(signum):
    return signal.strsignal(signum) or f"signal {signum}"


class ProcessKiller(threading.Thread):
    """Sends SIGKILL to a process and waits for it to die.

    After :meth:`run` the attributes ``killed``, ``exit_code``,
    ``term_signal`` and ``error`` describe what happened. A process that no
    longer exists is not an error.
    """

    def __init__(self, pid, reason, context):
        super().__init__(name=f"ProcessKiller_{pid}", daemon=True)
        if reason is None or context is None:
            raise ValueError("reason and context must be given")
        self.pid = pid
        self.reason = str(reason)
        self.context = str(context)
        self.tid = None
        self.killed = False
        self.exit_code = None
        self.term_signal = None
        self.error = None
        self._debug("CONSTRUCT")

    def _debug(self, msg, *args):
        logger.debug("%s on PID=%d TID=%s " + msg, self.context, self.pid, self.tid, *args)

    def run(self):
        self.tid = threading.get_native_id()
        self._debug("run()")
        self._debug("killing: %s", self.reason)

        try:
            os.kill(self.pid, _KILL_SIGNAL)
        except ProcessLookupError:
            return
        except OSError as exc:
            logger.warning("could not kill child %s: %s", self.reason, exc.strerror)
            self.error = exc
            return

        self.killed = True
        self._debug("now waiting for it to die")
        try:
            waited, status = os.waitpid(self.pid, 0)
        except OSError as exc:
            self._debug("waitpid() failed: %s", exc.strerror)
            self.error = exc
            return

        if waited != self.pid:
            self._debug("waitpid() returned %d", waited)
            return

        if os.WIFEXITED(status):
            self.exit_code = os.WEXITSTATUS(status)
            self._debug("exited with value %d", self.exit_code)
            return

        if os.WIFSIGNALED(status):
            self.term_signal = os.WTERMSIG(status)
            if self.term_signal != _KILL_SIGNAL:
                self._debug(
                    "died from signal %d %s (I really expected %d %s)",
                    self.term_signal,
                    _signal_name(self.term_signal),
                    int(_KILL_SIGNAL),
                    _signal_name(_KILL_SIGNAL),
                )
            else:
                self._debug("died from signal %d %s", self.term_signal, _signal_name(self.term_signal))
            return

        self._debug("status is %d, do not know what that means", status)


def async_kill_process(pid, reason, context):
    """Kill and reap ``pid`` on a background thread, which is returned."""
    killer = ProcessKiller(pid, reason, context)
    killer.start()
    return killer