import logging

import pytest

from fixed_decimal.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_fixed_decimal_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def captured_logs(caplog: pytest.LogCaptureFixture):
    """
    The package logger does not propagate to the root logger, so attach the capture handler
    directly.
    """
    logger.addHandler(caplog.handler)
    yield caplog
    logger.removeHandler(caplog.handler)
