from devbytes.application.playlist_controller import PlaylistController
from devbytes.application.sync_coordinator import SyncCoordinator
from devbytes.config import PLAYLIST_CACHE_KEY, VIDEO_FEED_TIMEOUT_SEC, VIDEO_FEED_URL
from devbytes.infrastructure.cache.video_store import RedisVideoStore
from devbytes.infrastructure.network.video_fetcher import HttpVideoFetcher


def get_sync_coordinator(store: RedisVideoStore) -> SyncCoordinator:
    fetcher = HttpVideoFetcher(url=VIDEO_FEED_URL, timeout_sec=VIDEO_FEED_TIMEOUT_SEC)
    return SyncCoordinator(store, fetcher)


def build_playlist_controller() -> PlaylistController:
    """Must be called from a running event loop; starts the first refresh."""
    store = RedisVideoStore(key=PLAYLIST_CACHE_KEY)
    return PlaylistController(store, get_sync_coordinator(store))
