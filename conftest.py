import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Keep handlers installed by one test (bound to its captured streams) from leaking into the next."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
