import logging

import pytest

from appserver.utils.log import ROOT_LOGGER_NAME


@pytest.fixture()
def restore_app_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate

    yield logger

    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
