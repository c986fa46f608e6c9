import logging

import pytest


@pytest.fixture(autouse=True)
def reset_dgfl_logger():
    """Drop handlers installed by CLI runs so later tests log through caplog only."""
    yield
    logger = logging.getLogger('dgfl')
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
