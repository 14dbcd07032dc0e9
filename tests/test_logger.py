import re

import pytest

from polaris.logger import Logger, LogLevel

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] \[([A-Z]+)\] (.*)$")


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "test.log"


@pytest.fixture
def logger(log_path, capsys):
    instance = Logger()
    instance.initialize(log_path)
    capsys.readouterr()
    yield instance
    instance.shutdown()


def parse(text):
    result = []
    for line in text.splitlines():
        match = LINE.match(line)
        assert match is not None, line
        result.append((match.group(1), match.group(2)))
    return result


def test_level_order_and_labels(logger, capsys):
    logger.set_log_level(LogLevel.TRACE)
    for level in LogLevel:
        logger.log_to_console("m", level)
    labels = [label for label, _ in parse(capsys.readouterr().out)]
    assert labels == [
        "TRACE",
        "DEBUG",
        "INFO",
        "WARN",
        "ERROR",
        "CRITICAL",
    ]
    assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN
    assert LogLevel.WARN < LogLevel.ERROR < LogLevel.CRITICAL


def test_get_instance_is_shared():
    shared = Logger.get_instance()
    assert shared is Logger.get_instance()
    assert shared is not Logger()
    previous = shared.level
    try:
        shared.set_log_level(LogLevel.WARN)
        assert Logger.get_instance().level is LogLevel.WARN
    finally:
        shared.set_log_level(previous)


def test_initialize_writes_startup_line(log_path, capsys):
    instance = Logger()
    instance.initialize(log_path)
    try:
        out = capsys.readouterr().out
        assert parse(out) == [("INFO", "Logger initialized")]
        assert parse(log_path.read_text()) == [("INFO", "Logger initialized")]
        assert instance.initialized
    finally:
        instance.shutdown()


def test_initialize_twice_is_noop(logger, log_path, capsys):
    logger.initialize(log_path)
    assert capsys.readouterr().out == ""
    assert len(log_path.read_text().splitlines()) == 1


def test_uninitialized_logger_drops_messages(capsys):
    instance = Logger()
    instance.info("hello")
    instance.critical("boom")
    instance.log_to_console("direct", LogLevel.INFO)
    assert capsys.readouterr().out == ""
    assert not instance.initialized


def test_default_level_filters_debug(logger, log_path, capsys):
    logger.trace("t")
    logger.debug("d")
    logger.info("i")
    logger.warn("w")
    logger.error("e")
    logger.critical("c")
    expected = [("INFO", "i"), ("WARN", "w"), ("ERROR", "e"), ("CRITICAL", "c")]
    assert parse(capsys.readouterr().out) == expected
    assert parse(log_path.read_text())[1:] == expected


def test_set_log_level_trace_accepts_everything(logger, capsys):
    logger.set_log_level(LogLevel.TRACE)
    logger.trace("t")
    logger.debug("d")
    assert parse(capsys.readouterr().out) == [("TRACE", "t"), ("DEBUG", "d")]
    assert logger.level is LogLevel.TRACE


def test_set_log_level_error_drops_warnings(logger, capsys):
    logger.set_log_level(LogLevel.ERROR)
    logger.warn("w")
    logger.error("e")
    assert parse(capsys.readouterr().out) == [("ERROR", "e")]


def test_direct_outputs_ignore_level(logger, log_path, capsys):
    logger.set_log_level(LogLevel.CRITICAL)
    logger.log_to_console("console only", LogLevel.TRACE)
    logger.log_to_file("file only", LogLevel.DEBUG)
    assert parse(capsys.readouterr().out) == [("TRACE", "console only")]
    assert parse(log_path.read_text())[-1] == ("DEBUG", "file only")


def test_shutdown_logs_and_stops(log_path, capsys):
    instance = Logger()
    instance.initialize(log_path)
    instance.shutdown()
    out = parse(capsys.readouterr().out)
    assert out[-1] == ("INFO", "Logger shutting down")
    instance.info("after")
    assert capsys.readouterr().out == ""
    assert not instance.initialized
    assert parse(log_path.read_text())[-1] == ("INFO", "Logger shutting down")


def test_file_is_appended_across_sessions(log_path, capsys):
    for _ in range(2):
        instance = Logger()
        instance.initialize(log_path)
        instance.shutdown()
    messages = [msg for _, msg in parse(log_path.read_text())]
    assert messages == ["Logger initialized", "Logger shutting down"] * 2


def test_unopenable_file_reports_and_keeps_console(tmp_path, capsys):
    bad = tmp_path / "missing" / "dir" / "x.log"
    instance = Logger()
    instance.initialize(bad)
    try:
        captured = capsys.readouterr()
        assert f"Failed to open log file: {bad}" in captured.err
        assert parse(captured.out) == [("INFO", "Logger initialized")]
        instance.log_to_file("ignored", LogLevel.INFO)
        assert not bad.exists()
    finally:
        instance.shutdown()


def test_level_survives_reinitialize(log_path, capsys):
    instance = Logger()
    instance.set_log_level(LogLevel.WARN)
    instance.initialize(log_path)
    assert capsys.readouterr().out == ""
    instance.warn("w")
    assert parse(capsys.readouterr().out) == [("WARN", "w")]
    instance.shutdown()