from devbytes.infrastructure.cache.redis_client import get_redis_client, reset_redis_client
from devbytes.infrastructure.cache.video_store import RedisVideoStore

__all__ = ["RedisVideoStore", "get_redis_client", "reset_redis_client"]
