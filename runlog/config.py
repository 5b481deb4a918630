"""Reading the logger configuration file."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from runlog.levels import LogLevel, parse_level

CONFIG_FILE = "logger.config"
DEFAULT_CONFIG_PATH = Path(__file__).with_name(CONFIG_FILE)


class ConfigError(Exception):
    """The logger configuration could not be read or applied."""


class Output(enum.Flag):
    """Destinations a record can be written to."""

    STDOUT = 1
    FILE = 2
    NETWORK = 4


ALL_OUTPUTS = (Output.STDOUT, Output.FILE, Output.NETWORK)


@dataclass
class LoggerConfig:
    """Where records go and the minimum level for each destination."""

    outputs: Output = Output(0)
    stdout_level: LogLevel = LogLevel.DEBUG
    file_level: LogLevel = LogLevel.DEBUG
    network_level: LogLevel = LogLevel.DEBUG
    log_file_path: str = ""

    def level_for(self, output: Output) -> LogLevel:
        """Return the threshold configured for a single destination."""
        if output is Output.STDOUT:
            return self.stdout_level
        if output is Output.FILE:
            return self.file_level
        if output is Output.NETWORK:
            return self.network_level
        raise ValueError(f"not a single output: {output!r}")

    def wants(self, output: Output, level: LogLevel) -> bool:
        """True if a record at ``level`` should be written to ``output``."""
        return output in self.outputs and level >= self.level_for(output)

    def accepts_any(self, level: LogLevel) -> bool:
        """True if some enabled destination takes records at ``level``."""
        return any(self.wants(output, level) for output in ALL_OUTPUTS)


_FLAG_LINES = (
    ("LOG_TO_STDOUT", Output.STDOUT),
    ("LOG_TO_FILE", Output.FILE),
    ("LOG_TO_NETWORK", Output.NETWORK),
)
_LEVEL_LINES = (
    ("STDOUT_LOG_LEVEL", "stdout_level"),
    ("FILE_LOG_LEVEL", "file_level"),
    ("NETWORK_LOG_LEVEL", "network_level"),
)
_FILE_LOC = "LOG_FILE_LOC"


def _value(key: str, line: str) -> str | None:
    match = re.match(rf"{key}:\s*(\S+)", line)
    return match.group(1) if match else None


def _significant(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        text = line.rstrip("\r\n")
        if not text or text.startswith("//"):
            continue
        yield text


def parse_config(lines: Iterable[str]) -> LoggerConfig:
    """Build a configuration from the lines of a config file.

    Blank lines and lines starting with ``//`` are skipped; the remaining
    lines are read in a fixed order: the three output switches, the three
    levels, then the log file location.
    """
    config = LoggerConfig()
    entries = _significant(lines)

    def next_line() -> str:
        line = next(entries, None)
        if line is None:
            raise ConfigError("end of config file reached before all logger configurations read")
        return line

    for key, flag in _FLAG_LINES:
        value = _value(key, next_line())
        if value is not None and value[0] in "Yy":
            config.outputs |= flag

    for key, attribute in _LEVEL_LINES:
        value = _value(key, next_line())
        level = parse_level(value) if value is not None else None
        if level is not None:
            setattr(config, attribute, level)

    location = _value(_FILE_LOC, next_line())
    if location is not None:
        config.log_file_path = location

    # Unused destinations get the highest threshold so cheap filtering works.
    for output in ALL_OUTPUTS:
        if output not in config.outputs:
            setattr(config, _attribute_for(output), LogLevel.FATAL)
    return config


def _attribute_for(output: Output) -> str:
    return {
        Output.STDOUT: "stdout_level",
        Output.FILE: "file_level",
        Output.NETWORK: "network_level",
    }[output]


def load_config(path: str | Path | None = None) -> LoggerConfig:
    """Read and parse a config file; the default is the one beside this module."""
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        with open(config_path, encoding="utf-8") as handle:
            return parse_config(handle)
    except OSError as exc:
        raise ConfigError(f"logger could not open config file {config_path}: {exc.strerror}") from exc