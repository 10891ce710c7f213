import asyncio
import logging
from typing import Optional

import motor.motor_asyncio

from contactform.core.config import Settings, get_settings

# Set up logger
logger = logging.getLogger(__name__)

# Process-wide cached client; created on first use, replaced after a disconnect
_client = None
_client_loop = None


def mask_uri(uri: str) -> str:
    """Mask the password in a MongoDB connection string for logging."""
    masked_uri = uri
    if '@' in uri and ':' in uri:
        parts = uri.split('@')
        if len(parts) > 1:
            credentials_part = parts[0]
            if ':' in credentials_part:
                user_pass = credentials_part.split('://')[-1]
                if ':' in user_pass:
                    user, password = user_pass.split(':', 1)
                    masked_credentials = f"{user}:{'*' * len(password)}"
                    masked_uri = uri.replace(user_pass, masked_credentials)
    return masked_uri


def _create_client(uri: str):
    logger.info(f"Connecting to MongoDB server: {mask_uri(uri)}")
    return motor.motor_asyncio.AsyncIOMotorClient(
        uri,
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,         # Close idle connections after 30 seconds
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=10000
    )


def _current_loop():
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def get_client(settings: Optional[Settings] = None):
    """
    Return the cached MongoDB client, creating it on first use.

    A client bound to another event loop is discarded and rebuilt.

    Raises:
        ValueError: MONGODB_URI is not configured
    """
    global _client, _client_loop
    settings = settings or get_settings()

    if not settings.mongodb_uri:
        raise ValueError("MongoDB URI not configured! Please set MONGODB_URI in your environment variables.")

    loop = _current_loop()
    if _client is not None and _client_loop is not loop:
        logger.info("Event loop changed, discarding cached MongoDB client")
        reset_client()

    if _client is None:
        _client = _create_client(settings.mongodb_uri)
        _client_loop = loop
    return _client


def get_db(settings: Optional[Settings] = None):
    """Returns the database named in the URI, or MONGODB_DB_NAME."""
    settings = settings or get_settings()
    client = get_client(settings)
    return client.get_default_database(default=settings.mongodb_db_name)


def reset_client():
    """Close and forget the cached client; the next get_client() reconnects."""
    global _client, _client_loop
    if _client is not None:
        try:
            _client.close()
        except Exception as e:
            logger.warning(f"Error closing MongoDB client: {str(e)}")
    _client = None
    _client_loop = None
