import json
import logging
from typing import Callable, List, Optional, Sequence

from redis import Redis, RedisError

from devbytes.application.ports.video_store import VideoStore
from devbytes.application.serializers import video_from_dict, video_to_dict
from devbytes.core.exceptions import DeserializationError, StorageError
from devbytes.core.models import Video
from devbytes.core.observable import ObserverList, Subscription
from devbytes.infrastructure.cache.redis_client import get_redis_client

log = logging.getLogger("devbytes.video_store")


class RedisVideoStore(VideoStore):
    """
    Cached playlist kept as one JSON array under a single Redis key.

    The whole list is written with one SET, so readers see either the old
    list or the new one. There is no TTL: the cache is only ever overwritten.
    """

    def __init__(self, key: str = "videos:devbytes:playlist", client: Optional[Redis] = None) -> None:
        self._key = key
        self._client = client
        self._observers: ObserverList[List[Video]] = ObserverList()

    def _redis(self) -> Redis:
        return self._client if self._client is not None else get_redis_client()

    def get_all(self) -> List[Video]:
        try:
            cached = self._redis().get(self._key)
        except RedisError as e:
            raise StorageError(str(e), key=self._key) from e
        if not cached:
            return []
        if isinstance(cached, bytes):
            cached = cached.decode("utf-8", errors="replace")
        try:
            items = json.loads(cached)
        except ValueError as e:
            raise DeserializationError(f"Cached playlist under {self._key!r} is not valid JSON") from e
        if not isinstance(items, list):
            raise DeserializationError(f"Cached playlist under {self._key!r} is not a list")
        return [video_from_dict(item) for item in items]

    def replace_all(self, videos: Sequence[Video]) -> None:
        snapshot = list(videos)
        payload = json.dumps([video_to_dict(v) for v in snapshot], ensure_ascii=False)
        try:
            self._redis().set(self._key, payload)
        except RedisError as e:
            raise StorageError(str(e), key=self._key) from e
        log.debug("Cached playlist replaced key=%s items=%d", self._key, len(snapshot))
        self._observers.notify(snapshot)

    def subscribe(self, observer: Callable[[List[Video]], None]) -> Subscription:
        subscription = self._observers.add(observer)
        try:
            observer(self.get_all())
        except Exception:
            subscription.unsubscribe()
            raise
        return subscription
