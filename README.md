# runlog

A small leveled logger for cooperating processes. Each record is tagged
with a level and the name of the process that wrote it. It can go to
standard output, to a log file, to a named pipe (FIFO), or to any
combination of these. Which outputs are on, and the lowest level each
one shows, come from a plain-text configuration file.

The package has three modules:

- `runlog.levels`: `LogLevel`, `Process` and `parse_level`
- `runlog.config`: `LoggerConfig`, `Output`, `ConfigError`,
  `parse_config` and `load_config`
- `runlog.logger`: `Logger`, `format_record`, `logger_init` and
  `log_printf`

## Levels

`LogLevel` is an `IntEnum` that orders the levels from least to most
severe: `DEBUG`, `INFO`, `WARN`, `PYTHON`, `ERROR`, `FATAL`.

`PYTHON` records are written exactly as given, with nothing added.
Every other level gets a header with the level, the process name and
the time (as `time.ctime` prints it), separated from the process name
by a tab:

```
INFO @ EXECUTOR	(Mon Jan  1 12:00:00 2024) started
```

A header record gets a trailing newline unless its message already
ends with one.

`Process` names the processes that can own a logger: `DEV_HANDLER`,
`EXECUTOR`, `NET_HANDLER`, `SHM`, `TEST` and `NETWORK_SWITCH`. A plain
string can be given in its place and is used as the process name.

`parse_level(text)` returns the level named by `text` (surrounding
whitespace ignored), or `None`. `PYTHON` is not accepted there: it is a
record level, not a threshold.

## Configuration file

The file holds seven settings in this order. Blank lines and lines that
start with `//` are skipped.

```
// where logs go
LOG_TO_STDOUT: Y
LOG_TO_FILE: N
LOG_TO_NETWORK: N

// lowest level shown by each output
STDOUT_LOG_LEVEL: DEBUG
FILE_LOG_LEVEL: INFO
NETWORK_LOG_LEVEL: WARN

LOG_FILE_LOC: ~/runtime.log
```

- An output is switched on when its value starts with `Y` or `y`.
- A level line that names no known level leaves that threshold at
  `DEBUG`.
- An output that is switched off has its level raised to `FATAL`.
- If the lines run out before all seven settings are read,
  `ConfigError` is raised.

`parse_config(lines)` reads settings from any iterable of lines and
returns a `LoggerConfig`. `load_config(path)` opens a file and parses
it; a file that cannot be opened raises `ConfigError`. Called with no
path, `load_config` looks for `logger.config` beside the
`runlog.config` module.

`LoggerConfig.wants(output, level)` tells whether a record at `level`
goes to a single `Output` (`STDOUT`, `FILE` or `NETWORK`).

## Use

```python
from runlog.config import load_config
from runlog.levels import LogLevel, Process
from runlog.logger import Logger

config = load_config("logger.config")
with Logger(Process.EXECUTOR, config, "/tmp/log-fifo") as log:
    log.log(LogLevel.INFO, "loaded %s", "student code")
```

The message is formatted with `%` only when arguments are given.
`Logger.log` raises `ValueError` once the logger is closed; `close()`
may be called more than once. Writes to all outputs are serialised by a
lock, and every output is flushed after each record.

When file output is on, the configured path is expanded (`~` and
environment variables) and opened for appending. An empty path, or a
file that cannot be opened, raises `ConfigError`.

When network output is on, the logger creates the FIFO (default
`/tmp/log-fifo`) with mode `0o666` if it is missing and opens it
without blocking. Until a reader opens the other end, records meant for
the pipe are dropped. The logger tries to open the pipe again on every
such record, and if the reader goes away it reconnects when the reader
comes back.

For a single logger per process there is a module-level pair:

```python
from runlog.levels import LogLevel, Process
from runlog.logger import logger_init, log_printf

logger_init(Process.NET_HANDLER, "logger.config")
log_printf(LogLevel.WARN, "connection dropped after %d ms", 250)
```

`logger_init` registers the logger's `close` to run at interpreter
exit. `log_printf` does nothing until `logger_init` has been called.

`format_record(level, process, message, now)` builds one record without
writing it; `now` is a POSIX timestamp and defaults to the current time.

## What it does not do

- It has no command-line program; it is used as a library.
- It does not read from the pipe. Something else has to open the FIFO
  for reading before network records are delivered.
- It does not ship a `logger.config` file; pass a path to `load_config`
  or `logger_init`, or place one beside `runlog/config.py`.

## Tests

```
pip install -e .[test]
pytest
```