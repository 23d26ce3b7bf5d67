import logging

import pytest

from mallbots.logger import new_logger, to_level


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARN", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_to_level(name, level):
    assert to_level(name) == level


def test_new_logger_sets_level():
    assert new_logger("ERROR").level == logging.ERROR


def test_new_logger_does_not_stack_handlers():
    new_logger("INFO")
    logger = new_logger("INFO")
    assert len(logger.handlers) == 1


def test_new_logger_filters_and_writes_stdout(capsys):
    logger = new_logger("WARN")
    logger.info("hidden")
    logger.warning("shown")
    out = capsys.readouterr().out
    assert "msg=shown" in out
    assert "hidden" not in out