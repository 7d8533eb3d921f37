from typing import Any, Dict, List, Optional

import pytest

from devbytes.core.exceptions import TransportError
from devbytes.infrastructure.cache.video_store import RedisVideoStore


class InMemoryRedis:
    """Just enough of the Redis client API for the playlist store."""

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}
        self.set_calls = 0

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.set_calls += 1
        self.data[key] = value
        return True


class ScriptedFetcher:
    """Returns (or raises) the queued results in order, one per fetch()."""

    def __init__(self, *results: Any) -> None:
        self.results: List[Any] = list(results)
        self.calls = 0

    async def fetch(self) -> List[Dict[str, Any]]:
        self.calls += 1
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


def feed_record(n: int) -> Dict[str, Any]:
    return {
        "title": f"DevByte {n}",
        "description": f"Episode {n} of DevBytes",
        "url": f"https://www.youtube.com/watch?v=vid{n}",
        "updated": "2019-01-01T00:00:00Z",
        "thumbnail": f"https://i.ytimg.com/vi/vid{n}/hqdefault.jpg",
    }


def network_down() -> TransportError:
    return TransportError("connection refused", url="https://devbytes.example/feed.json")


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def store(fake_redis) -> RedisVideoStore:
    return RedisVideoStore(key="test:playlist", client=fake_redis)


@pytest.fixture
def make_record():
    return feed_record


@pytest.fixture
def make_fetcher():
    return ScriptedFetcher


@pytest.fixture
def transport_error():
    return network_down
