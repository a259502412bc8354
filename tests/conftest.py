"""Test configuration and fixtures."""

import logfire
import pytest

from waresys.config import Settings
from waresys.util.jwt import create_token

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header accepted by the API under default settings."""
    token = create_token("test-client", Settings().auth)
    return {"Authorization": f"Bearer {token}"}
