import pytest

from runlog.levels import LogLevel, Process, parse_level


@pytest.mark.parametrize("name", ["DEBUG", "INFO", "WARN", "ERROR", "FATAL"])
def test_parse_level_known_names(name):
    assert parse_level(name) is LogLevel[name]


def test_parse_level_strips_trailing_newline():
    assert parse_level("WARN\n") is LogLevel.WARN


def test_parse_level_rejects_python_level():
    assert parse_level("PYTHON") is None


def test_parse_level_unknown_and_case_sensitive():
    assert parse_level("debug") is None
    assert parse_level("") is None


def test_levels_are_ordered():
    parsed = [parse_level(name) for name in ["DEBUG", "INFO", "WARN", "ERROR", "FATAL"]]
    assert parsed == sorted(parsed)
    assert parse_level("WARN") < LogLevel(3) < parse_level("ERROR")
    assert LogLevel(3) is LogLevel.PYTHON


@pytest.mark.parametrize(
    "name",
    ["DEV_HANDLER", "EXECUTOR", "NET_HANDLER", "SHM", "TEST", "NETWORK_SWITCH"],
)
def test_process_names(name):
    process = Process(name)
    assert process.value == name
    assert process is Process[name]


def test_process_rejects_unknown_name():
    with pytest.raises(ValueError):
        Process("NOT_A_PROCESS")