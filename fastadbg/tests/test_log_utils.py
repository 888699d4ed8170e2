import logging
from fastadbg import log_utils


def test_get_logging_level():
    assert log_utils.get_logging_level(0) == logging.WARNING
    assert log_utils.get_logging_level(1) == logging.INFO
    assert log_utils.get_logging_level(2) == logging.DEBUG
    assert log_utils.get_logging_level(3) == logging.DEBUG
    assert log_utils.get_logging_level(100) == logging.DEBUG


def test_log_lines_with_sep():
    logged = []
    log_utils.log_lines_with_sep(["Settings:", "a: 1", "b: 2"], logged.append)
    assert logged == ["Settings:\n" + ("-" * 24) + "\na: 1\nb: 2"]

    logged = []
    log_utils.log_lines_with_sep(["Hi"], logged.append, "=", endsepline=True)
    assert logged == ["Hi\n" + ("=" * 17) + "\n" + ("=" * 17)]
