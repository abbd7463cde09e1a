from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_readme_index_logger():
    """CLI runs install a non-propagating Rich handler; undo it between tests."""
    logger = logging.getLogger("readme_index")
    yield
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
