"""
Pytest configuration and fixtures for all tests.
"""

import os
import pytest
from unittest.mock import AsyncMock, Mock

# Set up test environment variables before importing any modules
os.environ.pop('MONGODB_URI', None)
os.environ.pop('MONGODB_URL', None)
os.environ.setdefault('EMAIL_USER', 'website@example.com')
os.environ.setdefault('EMAIL_PASS', 'test-password')
os.environ.setdefault('CONTACT_EMAIL', 'inbox@example.com')
os.environ.setdefault('LOG_LEVEL', 'INFO')

from contactform.core.config import Settings, get_settings  # noqa: E402

ALLOWED = ["https://covechildcare.co.uk", "http://localhost:3000"]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        mongodb_uri=None,
        email_host="smtp.example.com",
        email_port=587,
        email_user="website@example.com",
        email_pass="test-password",
        contact_email="inbox@example.com",
        site_name="Cove Childcare",
        email_send_timeout=8.0,
    )


@pytest.fixture
def payload():
    return {
        "name": "Ann",
        "email": "ann@x.com",
        "phone": "555",
        "subject": "Info",
        "message": "Hi",
    }


@pytest.fixture
def store():
    """Store double whose save succeeds."""
    fake = Mock()
    fake.try_save = AsyncMock(return_value=True)
    return fake


@pytest.fixture
def sender():
    """Sender double whose send succeeds."""
    fake = Mock()
    fake.send = AsyncMock(return_value=None)
    return fake
