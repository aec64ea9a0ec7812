import os

import pytest

from moviekit.asyncread import (
    AsyncReadFile,
    StepResult,
    async_slurp_file,
    try_load_start_of_file,
)


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "movie.bin"
    data = bytes(range(256)) * 1000
    path.write_bytes(data)
    return path, data


def test_slurp_returns_whole_file(sample):
    path, data = sample
    contents, errors = async_slurp_file(str(path), 10000, 1000)
    assert errors == []
    assert contents == data


def test_slurp_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    contents, errors = async_slurp_file(str(path), 10000, 1000)
    assert (contents, errors) == (b"", [])


def test_slurp_missing_file_reports_child_failure(tmp_path):
    missing = tmp_path / "nope"
    contents, errors = async_slurp_file(str(missing), 10000, 1000)
    assert contents == b""
    assert errors[0] == "exit value 1"
    assert errors[1].startswith("could not open")


def test_slurp_negative_timeout_takes_too_long(sample):
    path, _ = sample
    contents, errors = async_slurp_file(str(path), -1, 1000)
    assert errors == ["took too long"]
    assert contents == b""


def test_try_load_start_success(sample):
    path, data = sample
    assert try_load_start_of_file(str(path), 1000, 10000, 1000) == ""


def test_try_load_start_larger_than_file(sample):
    path, data = sample
    assert try_load_start_of_file(str(path), len(data) * 4, 10000, 1000) == ""


def test_try_load_start_missing(tmp_path):
    result = try_load_start_of_file(str(tmp_path / "absent"), 1000, 10000, 1000)
    assert result.startswith("exit value 1; could not open")


def test_step_sequence_collects_data(sample):
    path, data = sample
    collected = bytearray()
    with AsyncReadFile(str(path), True, -1) as reader:
        first = reader.step()
        assert first == StepResult(True, True, b"", ())
        second = reader.step()
        assert second.running and second.made_progress
        result = second
        while result.running:
            result = reader.step()
            collected.extend(result.data)
        assert result.errors == ()
        after = reader.step()
        assert after == StepResult(False, False, b"", ())
    assert bytes(collected) == data


def test_empty_filename_is_an_error():
    reader = AsyncReadFile("", True, -1)
    result = reader.step()
    assert result.running is False
    assert result.errors == ("iter() called but start() not called before",)


def test_step_after_finish_is_an_error(sample):
    path, _ = sample
    reader = AsyncReadFile(str(path), True, -1)
    assert reader.step().running is True
    reader.finish()
    result = reader.step()
    assert result.running is False
    assert result.errors == ("iter() called but start() not called before",)


def test_accepts_path_objects(sample):
    path, data = sample
    contents, errors = async_slurp_file(path, 10000, 1000)
    assert errors == []
    assert len(contents) == os.path.getsize(path)