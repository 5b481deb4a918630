import pytest

from runlog.config import ConfigError, LoggerConfig, Output, load_config, parse_config
from runlog.levels import LogLevel

SAMPLE = """\
// logger configuration

LOG_TO_STDOUT: Yes
LOG_TO_FILE: y
// network is off
LOG_TO_NETWORK: No

STDOUT_LOG_LEVEL: INFO
FILE_LOG_LEVEL: ERROR
NETWORK_LOG_LEVEL: WARN
LOG_FILE_LOC: ~/runtime.log
"""


def test_parse_sample():
    config = parse_config(SAMPLE.splitlines(keepends=True))
    assert config.outputs == Output.STDOUT | Output.FILE
    assert config.stdout_level is LogLevel.INFO
    assert config.file_level is LogLevel.ERROR
    assert config.log_file_path == "~/runtime.log"


def test_unused_output_forced_to_fatal():
    config = parse_config(SAMPLE.splitlines(keepends=True))
    assert config.network_level is LogLevel.FATAL


def test_unknown_level_keeps_default():
    text = SAMPLE.replace("STDOUT_LOG_LEVEL: INFO", "STDOUT_LOG_LEVEL: LOUD")
    config = parse_config(text.splitlines())
    assert config.stdout_level is LogLevel.DEBUG


def test_too_few_lines_raises():
    lines = SAMPLE.splitlines()[:-1]
    with pytest.raises(ConfigError):
        parse_config(lines)


def test_empty_config_raises():
    with pytest.raises(ConfigError):
        parse_config([])


def test_wants_respects_outputs_and_levels():
    config = parse_config(SAMPLE.splitlines())
    assert config.wants(Output.STDOUT, LogLevel.INFO)
    assert not config.wants(Output.STDOUT, LogLevel.DEBUG)
    assert not config.wants(Output.FILE, LogLevel.WARN)
    assert config.wants(Output.FILE, LogLevel.FATAL)
    assert not config.wants(Output.NETWORK, LogLevel.FATAL)


def test_accepts_any():
    config = LoggerConfig(outputs=Output.FILE, file_level=LogLevel.ERROR)
    assert config.accepts_any(LogLevel.ERROR)
    assert not config.accepts_any(LogLevel.WARN)


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "logger.config"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE.splitlines())


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.config")