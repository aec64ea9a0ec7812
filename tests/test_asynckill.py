import threading

import pytest

from moviekit.asynckill import ProcessKiller, async_kill_process

# Larger than the largest pid_max Linux allows, so no process has this PID.
_NO_SUCH_PID = 2**22 + 12345


def test_process_already_gone_is_not_an_error():
    killer = ProcessKiller(_NO_SUCH_PID, "gone", "ctx")
    killer.run()
    assert killer.killed is False
    assert killer.error is None
    assert killer.term_signal is None
    assert killer.exit_code is None


def test_async_kill_of_missing_process_finishes_quietly():
    killer = async_kill_process(_NO_SUCH_PID, "test", "ctx")
    killer.join(10)
    assert not killer.is_alive()
    assert killer.killed is False
    assert killer.error is None


def test_records_thread_id_after_run():
    killer = ProcessKiller(_NO_SUCH_PID, "gone", "ctx")
    assert killer.tid is None
    killer.run()
    assert killer.tid == threading.get_native_id()


def test_missing_reason_is_rejected():
    with pytest.raises(ValueError):
        ProcessKiller(1, None, "ctx")