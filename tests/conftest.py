import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo configure_logging() calls so later tests don't log to a closed capture stream."""
    yield
    structlog.reset_defaults()
