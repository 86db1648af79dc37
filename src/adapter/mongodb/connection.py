import os
import logging
from pymongo import MongoClient
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

# Driver-level logs are noisy at INFO
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'contact_api')

_client_cache = None
_connection_attempted = False
# Set only when MONGO_URL is missing; an unreachable server is retried on the next call
_config_missing = False
_outage_logged = False


def reset_client():
    global _client_cache, _connection_attempted, _config_missing, _outage_logged
    if _client_cache is not None:
        _client_cache.close()
    _client_cache = None
    _connection_attempted = False
    _config_missing = False
    _outage_logged = False


def get_mongodb_client() -> MongoClient | None:
    """Get MongoDB client with connection caching and reconnection logic.

    Connection strategy:
    1. Return cached client if healthy (ping succeeds)
    2. Otherwise connect again; a failed connect returns None and the
       next call tries again
    3. If MONGO_URL is not configured, give up without retrying

    Returns:
        MongoDB client or None if connection fails
    """
    global _client_cache, _connection_attempted, _config_missing, _outage_logged

    if _client_cache:
        try:
            _client_cache.admin.command('ping')
            return _client_cache
        except PyMongoError:
            _client_cache.close()
            _client_cache = None
            logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

    if _config_missing:
        return None

    if not MONGO_URL:
        logger.error("[MONGODB] MONGO_URL not configured.")
        _config_missing = True
        return None

    client = None
    try:
        client = MongoClient(
            MONGO_URL,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            maxPoolSize=10,
            minPoolSize=0,
            maxIdleTimeMS=30000,
            waitQueueTimeoutMS=10000,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except (ConnectionFailure, PyMongoError) as e:
        if client is not None:
            client.close()
        # One ERROR per outage, DEBUG for the retries inside it
        if not _outage_logged:
            logger.error(f"[MONGODB] Connection failed: {str(e)[:200]}")
            _outage_logged = True
        else:
            logger.debug("[MONGODB] Reconnect attempt failed")
        return None

    if not _connection_attempted:
        logger.info(f"[MONGODB] Connected successfully to {DATABASE_NAME}")
    elif _outage_logged:
        logger.info(f"[MONGODB] Reconnected to {DATABASE_NAME}")
    _connection_attempted = True
    _outage_logged = False
    _client_cache = client
    return client
