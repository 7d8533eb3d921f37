import asyncio
import logging

from devbytes.application.ports.video_fetcher import VideoFetcher
from devbytes.application.ports.video_store import VideoStore
from devbytes.application.serializers import as_domain_model
from devbytes.core.exceptions import TransportError
from devbytes.core.models import ErrorState
from devbytes.core.observable import LiveValue, MutableLiveValue

log = logging.getLogger("devbytes.sync")


class SyncCoordinator:
    """
    Runs refresh cycles: fetch the remote list, replace the cached one.

    A transport failure never touches the store. It raises the error flag
    only while the cache is empty; with cached data the failure is logged
    and otherwise ignored. Any other failure propagates to the caller.
    """

    def __init__(self, store: VideoStore, fetcher: VideoFetcher) -> None:
        self._store = store
        self._fetcher = fetcher
        self._lock = asyncio.Lock()
        self._error_occurred = MutableLiveValue(False)
        self._error_shown = MutableLiveValue(False)

    @property
    def error_occurred(self) -> LiveValue[bool]:
        return self._error_occurred.read_only()

    @property
    def error_shown(self) -> LiveValue[bool]:
        return self._error_shown.read_only()

    @property
    def error_state(self) -> ErrorState:
        return ErrorState(
            error_occurred=self._error_occurred.value,
            error_shown=self._error_shown.value,
        )

    async def refresh(self) -> None:
        async with self._lock:
            try:
                records = await self._fetcher.fetch()
            except TransportError as e:
                if self._store.get_all():
                    log.warning("Playlist refresh failed, keeping cached videos: %s", e)
                else:
                    log.warning("Playlist refresh failed with empty cache: %s", e)
                    self._error_occurred.set_value(True)
                return

            videos = as_domain_model(records)
            self._store.replace_all(videos)
            self._error_occurred.set_value(False)
            self._error_shown.set_value(False)
            log.info("Playlist refreshed items=%d", len(videos))

    def mark_error_shown(self) -> None:
        # Only an error raised by a failed refresh can be acknowledged.
        if self._error_shown.value or not self._error_occurred.value:
            return
        self._error_shown.set_value(True)
