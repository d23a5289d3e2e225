import pytest
from unittest.mock import patch

from token_api_schemas import config


@pytest.fixture(autouse=True)
def english_messages():
    """Pins failure messages to English regardless of the local .env."""
    with patch.object(config, "MESSAGE_LOCALE", "en"):
        yield
