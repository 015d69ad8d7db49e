import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_ride_match_logger():
    # handlers bind the stream that was current when they were created
    yield
    logger = logging.getLogger("ride_match")
    for h in list(logger.handlers):
        logger.removeHandler(h)
