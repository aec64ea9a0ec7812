# moviekit

Helper library for a movie player front-end on Linux. It checks that movie
files can actually be read before they are handed to a player, kills and
reaps child processes in the background, looks up player options from the
environment or a settings file, and holds back debug logging until
something worth showing happens. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `moviekit.asyncread`

`AsyncReadFile(filename, get_contents, max_read_size)` reads a file on a
background thread, and the caller advances the load with `step()`, which
never blocks. Each call returns a `StepResult` with `running`,
`made_progress`, the `data` bytes received in that step (only when
`get_contents` is true) and the `errors` produced in that step. A negative
`max_read_size` reads the whole file. `AsyncReadFile` is a context
manager; `finish()` closes the content channel and stops waiting for the
reader (a reader thread that is still blocked is left behind as a daemon
thread).

Two helpers drive a load with a time limit:

- `async_slurp_file(path, timeout_msec, sleep_usec)` reads a whole file and
  returns `(contents, errors)`.
- `try_load_start_of_file(path, max_read_size, timeout_msec, sleep_usec)`
  reads the first bytes of a file without keeping them, which warms the
  page cache, and returns `""` on success or the error messages joined with
  `"; "`. When the time limit passes, `"took too long"` is among the errors.

Between steps that made no progress the helpers sleep for at most
`sleep_usec` microseconds.

### `moviekit.readchild`

- `copy_file_to_pipe(filename, content_fd, max_read_size, pipe_block_size,
  file_block_size)` reads a file in blocks of `file_block_size` and, if
  `content_fd` is a file descriptor, writes the bytes to it in pieces of
  `pipe_block_size`. The file block size must be a positive multiple of the
  pipe block size. Reading stops once at least `max_read_size` bytes were
  read (whole blocks may go past it). Returns the number of bytes read;
  failures raise `ChildReadError`.
- `child_read_file(...)` wraps the same work as the body of a forked
  process: it writes any error message to an error descriptor and ends the
  process with exit status 0 or 1. It never returns.

### `moviekit.asynckill`

`async_kill_process(pid, reason, context)` starts a `ProcessKiller` thread
that sends SIGKILL to `pid` and waits for it with `waitpid`, then returns
the thread. After it has run, `killed`, `exit_code`, `term_signal` and
`error` describe the outcome; a process that no longer exists is not an
error.

### `moviekit.config`

`get_mp_vo()`, `get_mp_opts_append()`, `get_mp_opts_override()` and
`get_vdb_run()` return `MP_VO`, `MP_OPTS_APPEND`, `MP_OPTS_OVERRIDE` and
`VDB_RUN`. A non-empty environment variable wins; otherwise the key is
read from the `[General]` section of
`$XDG_CONFIG_HOME/moviekit/moviekit.conf` (default `~/.config`). A key
found nowhere gives `""`. Non-empty results are cached.
`SettingLookup(settings_path)` does the same for any key, with `get(key)`
and `clear()`.

### `moviekit.logsink`

`MessageSink(stream, capacity, print_all)` takes messages through
`handle(msg_type, message, category, file, line)`. Debug and info messages
go into a ring buffer of `capacity` entries; a warning or critical message
first writes out the buffer and then itself. A fatal message is written
with its file and line and then raised as `RuntimeError`. With
`print_all`, or the environment variable `MC_ALL_LOG=1`, every message is
written at once. `format_message(...)` gives the printed form of one line,
with control characters escaped.

`BufferingHandler(sink)` connects a sink to the `logging` module, and
`init_logging()` installs one on the root logger once and returns its sink.

### `moviekit.checkedget`

`CheckedGet`, `CheckedGetDefault` and `GetDefault` hold a single value.
`CheckedGet` raises `UnsetError` when read before being set; both checked
holders can be sealed, after which `set()` raises `SealedError`. Passing
`caution=False` turns the checks off.

### `moviekit.checkedregex`

`compile_checked(pattern)` compiles a regular expression or raises
`BadRegexError`.

### `moviekit.encoding`

`decode_blob(blob, codec, strict)`, `decode_local_warn`,
`decode_local_strict` and `decode_utf8_strict` turn raw bytes from the
system into text, either raising `UnicodeDecodeError` or logging a warning
and replacing bad bytes.

### `moviekit.event_types`

`event_type_name(n)` and `event_type_desc(n)` give the name and a
description of a numeric GUI event type.

## Example

```python
from moviekit.asyncread import try_load_start_of_file

problem = try_load_start_of_file("/media/movies/film.mkv", 4 * 1024 * 1024, 5000, 10000)
if problem:
    print("cannot play:", problem)
```

## What it does not do

moviekit is a library only. It has no command-line program, does not start
or control a player, has no user interface and does not detect crop
borders or other video properties.