import logging

import pytest


@pytest.fixture(autouse=True)
def _cleanup_root_logger():
    """
    Close and remove all handlers from the root logger after each test.

    The CLI configures logging, so handlers would otherwise leak across tests.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
