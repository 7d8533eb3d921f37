import asyncio
import logging
from typing import List, Optional

from devbytes.application.ports.video_store import VideoStore
from devbytes.application.sync_coordinator import SyncCoordinator
from devbytes.core.models import Video
from devbytes.core.observable import LiveValue, MutableLiveValue, SubscriptionScope

log = logging.getLogger("devbytes.playlist")


class PlaylistController:
    """
    Read side of the playlist for a presentation layer.

    Must be created inside a running event loop: construction starts one
    background refresh whose lifetime is bound to this controller.
    """

    def __init__(self, store: VideoStore, coordinator: SyncCoordinator) -> None:
        self._coordinator = coordinator
        self._scope = SubscriptionScope()
        self._playlist: MutableLiveValue[List[Video]] = MutableLiveValue([])
        self._scope.add(store.subscribe(self._playlist.set_value))

        loop = asyncio.get_running_loop()
        self._refresh_task: Optional[asyncio.Task] = loop.create_task(coordinator.refresh())
        self._refresh_task.add_done_callback(self._on_refresh_done)

    @property
    def playlist(self) -> LiveValue[List[Video]]:
        return self._playlist.read_only()

    @property
    def network_error_event(self) -> LiveValue[bool]:
        return self._coordinator.error_occurred

    @property
    def is_network_error_shown(self) -> LiveValue[bool]:
        return self._coordinator.error_shown

    @property
    def refresh_task(self) -> Optional[asyncio.Task]:
        return self._refresh_task

    @property
    def closed(self) -> bool:
        return self._scope.disposed

    def acknowledge_network_error(self) -> None:
        self._coordinator.mark_error_shown()

    def consume_network_error_notice(self) -> bool:
        if not self.network_error_event.value or self.is_network_error_shown.value:
            return False
        self.acknowledge_network_error()
        return True

    async def refresh(self) -> None:
        if self.closed:
            raise RuntimeError("PlaylistController is closed")
        await self._coordinator.refresh()

    def close(self) -> None:
        if self.closed:
            return
        if self._refresh_task is not None and not self._refresh_task.done():
            self._refresh_task.cancel()
        self._scope.dispose()

    @staticmethod
    def _on_refresh_done(task: asyncio.Task) -> None:
        if task.cancelled():
            log.info("Initial playlist refresh cancelled")
            return
        error = task.exception()
        if error is not None:
            log.error("Initial playlist refresh failed", exc_info=error)
