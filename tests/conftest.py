import pytest

from scenekey.common import log


@pytest.fixture(autouse=True)
def _restore_scenekey_logger():
    handlers = list(log.logger.handlers)
    level = log.logger.level
    yield
    log.logger.handlers[:] = handlers
    log.logger.setLevel(level)
