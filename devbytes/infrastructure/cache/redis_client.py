import threading
from typing import Optional

from redis import Redis

from devbytes.config import REDIS_HOST, REDIS_PORT, REDIS_DB

_client: Optional[Redis] = None
_client_lock = threading.Lock()


def get_redis_client() -> Redis:
    """Process-wide Redis client, created once on first use."""
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = Redis(
                    host=REDIS_HOST,
                    port=REDIS_PORT,
                    db=REDIS_DB,
                    socket_connect_timeout=5,
                    decode_responses=True,
                )
    return _client


def reset_redis_client() -> None:
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
        _client = None
