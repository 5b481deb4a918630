"""Writing log records to stdout, a log file and a named pipe."""

from __future__ import annotations

import atexit
import errno
import os
import sys
import threading
import time
from pathlib import Path
from typing import IO

from runlog.config import ConfigError, LoggerConfig, Output, load_config
from runlog.levels import LogLevel, Process

LOG_FIFO = "/tmp/log-fifo"
FIFO_MODE = 0o666


def _process_name(process: Process | str) -> str:
    return process.value if isinstance(process, Process) else str(process)


def format_record(level: LogLevel, process: Process | str, message: str, now: float | None = None) -> str:
    """Build the text of one record.

    PYTHON records are passed through untouched; every other record gets a
    header with level, process and time, and ends in exactly one newline
    unless the message already carried one.
    """
    if level == LogLevel.PYTHON:
        return message
    stamp = time.ctime(time.time() if now is None else now)
    record = f"{LogLevel(level).name} @ {_process_name(process)}\t({stamp}) {message}"
    return record if message.endswith("\n") else record + "\n"


class Logger:
    """A logger for one process, writing to the destinations in its config."""

    def __init__(self, process: Process | str, config: LoggerConfig, fifo_path: str | Path = LOG_FIFO):
        self.process = process
        self.config = config
        self.fifo_path = str(fifo_path)
        self._lock = threading.Lock()
        self._file: IO[str] | None = None
        self._fifo_fd: int | None = None
        self._closed = False

        if Output.FILE in config.outputs:
            path = os.path.expandvars(os.path.expanduser(config.log_file_path))
            if not path.strip():
                raise ConfigError(f"log file name {config.log_file_path!r} has invalid format")
            try:
                self._file = open(path, "a", encoding="utf-8")
            except OSError as exc:
                raise ConfigError(f"logger could not open log file {path}: {exc.strerror}") from exc
            self.log_file_path = path

        if Output.NETWORK in config.outputs:
            try:
                os.mkfifo(self.fifo_path, FIFO_MODE)
            except FileExistsError:
                pass
            except OSError as exc:
                print(f"ERROR: logger create FIFO failed: {exc.strerror}")
            self._open_fifo()

    @property
    def fifo_up(self) -> bool:
        """True while the pipe is open for writing."""
        return self._fifo_fd is not None

    def _open_fifo(self) -> None:
        try:
            self._fifo_fd = os.open(self.fifo_path, os.O_WRONLY | os.O_NONBLOCK)
        except OSError as exc:
            # ENXIO only means no reader has opened the pipe yet.
            if exc.errno != errno.ENXIO:
                print(f"ERROR: logger open FIFO failed: {exc.strerror}")

    def _drop_fifo(self) -> None:
        if self._fifo_fd is not None:
            try:
                os.close(self._fifo_fd)
            except OSError:
                pass
            self._fifo_fd = None

    def _write_fifo(self, record: str) -> None:
        if self._fifo_fd is None:
            self._open_fifo()
        if self._fifo_fd is None:
            return
        data = record.encode("utf-8")
        try:
            while data:
                written = os.write(self._fifo_fd, data)
                data = data[written:]
        except BrokenPipeError:
            self._drop_fifo()
        except OSError as exc:
            print(f"ERROR: writing to FIFO failed unexpectedly: {exc.strerror}")

    def log(self, level: LogLevel, message: str, *args: object) -> None:
        """Log ``message`` (printf-style formatted with ``args``) at ``level``."""
        if self._closed:
            raise ValueError("logger is closed")
        level = LogLevel(level)
        if not self.config.accepts_any(level):
            return
        text = message % args if args else message
        with self._lock:
            record = format_record(level, self.process, text)
            if self.config.wants(Output.STDOUT, level):
                sys.stdout.write(record)
                sys.stdout.flush()
            if self.config.wants(Output.FILE, level) and self._file is not None:
                self._file.write(record)
                self._file.flush()
            if self.config.wants(Output.NETWORK, level):
                self._write_fifo(record)

    def close(self) -> None:
        """Close the log file and the pipe; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        if self._file is not None:
            try:
                self._file.close()
            except OSError as exc:
                print(f"ERROR: log file close failed: {exc.strerror}")
            self._file = None
        self._drop_fifo()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


_default_logger: Logger | None = None


def logger_init(process: Process | str, config_path: str | Path | None = None) -> Logger:
    """Read the config, create the process-wide logger and register its cleanup."""
    global _default_logger
    logger = Logger(process, load_config(config_path))
    atexit.register(logger.close)
    _default_logger = logger
    return logger


def log_printf(level: LogLevel, message: str, *args: object) -> None:
    """Log through the process-wide logger; does nothing before logger_init."""
    if _default_logger is not None:
        _default_logger.log(level, message, *args)