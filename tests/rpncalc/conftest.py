import pytest

from rpncalc.utils import log


@pytest.fixture(autouse=True)
def _reset_rpncalc_logging():
    log.reset_logging()
    yield
    log.reset_logging()
