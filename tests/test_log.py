from __future__ import annotations

import json
import logging

import pytest

from terrascan import log


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("terrascan")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("", logging.INFO),
        ("some log level", logging.INFO),
        ("debug", logging.DEBUG),
        ("panic", log.PANIC),
    ],
)
def test_get_logger_level(level, expected):
    assert log.get_logger_level(level) == expected


def test_levels_are_ordered():
    names = ["debug", "info", "warn", "error", "dpanic", "panic", "fatal"]
    levels = [log.get_logger_level(name) for name in names]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


@pytest.mark.parametrize(("level", "encoding"), [("debug", "json"), ("panic", "console")])
def test_get_logger_enables_its_level(level, encoding):
    logger = log.get_logger(level, encoding)
    assert logger.isEnabledFor(log.get_logger_level(level))


def test_get_logger_filters_lower_levels():
    logger = log.get_logger("error", "json")
    assert not logger.isEnabledFor(logging.WARNING)


def test_json_encoding_output(capsys):
    logger = log.get_logger("info", "json")
    logger.info("testing")
    logger.debug("hidden")
    lines = capsys.readouterr().err.strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["msg"] == "testing"
    assert entry["level"] == "info"
    assert entry["file"].endswith(".py:" + entry["file"].rsplit(":", 1)[1])
    assert set(entry) == {"level", "time", "file", "msg"}


def test_console_encoding_output(capsys):
    logger = log.get_logger("warn", "console")
    logger.warning("careful")
    line = capsys.readouterr().err.strip()
    fields = line.split("\t")
    assert fields[-1] == "careful"
    assert "warn" in fields[1]
    assert fields[1].startswith("\x1b[")


def test_default_logger_before_and_after_init():
    log.init("json", "info")
    got = log.get_default_logger()
    assert got is logging.getLogger("terrascan")
    assert got.level == logging.INFO


def test_init_console_encoding_sets_level():
    log.init("console", "debug")
    assert log.get_default_logger().level == logging.DEBUG


def test_init_routes_package_loggers(capsys):
    log.init("json", "warn")
    logging.getLogger("terrascan.something").warning("from child")
    logging.getLogger("terrascan.something").info("dropped")
    lines = capsys.readouterr().err.strip().splitlines()
    assert [json.loads(line)["msg"] for line in lines] == ["from child"]
    assert json.loads(lines[0])["level"] == "warn"