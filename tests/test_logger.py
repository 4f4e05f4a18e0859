import logging

import pytest

from RelayStJude.logger import configure_loggers, parse_log_filter


@pytest.fixture
def restore_loggers():
    names = ["RelayStJude", "RelayStJude.classes.gql", "urllib3"]
    saved = {
        name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers), logging.getLogger(name).propagate)
        for name in names
    }
    yield
    for name, (level, handlers, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers = handlers
        logger.propagate = propagate


test_parse_log_filter_data = [
    (None, {"RelayStJude": logging.WARNING}),
    ("", {"RelayStJude": logging.WARNING}),
    ("debug", {"RelayStJude": logging.DEBUG}),
    ("INFO", {"RelayStJude": logging.INFO}),
    ("warn", {"RelayStJude": logging.WARNING}),
    (
        "info, RelayStJude.classes.gql=debug",
        {"RelayStJude": logging.INFO, "RelayStJude.classes.gql": logging.DEBUG},
    ),
    ("urllib3=error", {"RelayStJude": logging.WARNING, "urllib3": logging.ERROR}),
]


@pytest.mark.parametrize("log_filter,expected", test_parse_log_filter_data)
def test_parse_log_filter(log_filter, expected):
    assert parse_log_filter(log_filter) == expected


@pytest.mark.parametrize("log_filter", ["loud", "RelayStJude=verbose"])
def test_parse_log_filter_error(log_filter):
    with pytest.raises(ValueError):
        parse_log_filter(log_filter)


def test_configure_loggers(restore_loggers):
    logger = configure_loggers("info,RelayStJude.classes.gql=debug,urllib3=error", color=False)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logging.getLogger("RelayStJude.classes.gql").level == logging.DEBUG
    assert logger.handlers[0] in logging.getLogger("urllib3").handlers


def test_configure_loggers_twice_keeps_one_handler(restore_loggers):
    configure_loggers(None, color=False)
    logger = configure_loggers(None, color=False)
    assert len(logger.handlers) == 1
