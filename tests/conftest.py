import pytest
from fastapi.testclient import TestClient

from hello_world.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test."""
    from loguru import logger

    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
