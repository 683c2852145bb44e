import io
import logging

import pytest

from dmcommon.config import ConfigAccessor, set_config


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("dmcommon")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory):
    """Keep tests away from the user's dmcommon.cfg."""
    set_config(ConfigAccessor(tmp_path_factory.mktemp("config") / "dmcommon.cfg"))
    yield
    set_config(None)
