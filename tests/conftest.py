import logging

import pytest

from ipv4calc.config import CalcConfig, set_config


@pytest.fixture(autouse=True)
def isolated_config():
    """Give every test default settings and a clean package logger."""
    set_config(CalcConfig())
    yield
    set_config(None)
    logger = logging.getLogger("ipv4calc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
