import asyncio
import logging
from typing import Any, Dict, List, Optional

import requests

from devbytes.application.ports.video_fetcher import VideoFetcher
from devbytes.config import VIDEO_FEED_TIMEOUT_SEC, VIDEO_FEED_URL
from devbytes.core.exceptions import DeserializationError, TransportError

log = logging.getLogger("devbytes.video_fetcher")


class HttpVideoFetcher(VideoFetcher):
    """Reads the DevBytes feed: {"videos": [{"title", "description", "url", "thumbnail", ...}]}."""

    def __init__(
        self,
        url: str = VIDEO_FEED_URL,
        timeout_sec: float = VIDEO_FEED_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._url = url
        self._timeout_sec = timeout_sec
        self._session = session or requests.Session()

    async def fetch(self) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._fetch_blocking)

    def _fetch_blocking(self) -> List[Dict[str, Any]]:
        try:
            response = self._session.get(self._url, timeout=self._timeout_sec)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(str(e), url=self._url) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DeserializationError(f"Video feed at {self._url} returned invalid JSON") from e

        videos = payload.get("videos") if isinstance(payload, dict) else None
        if not isinstance(videos, list):
            raise DeserializationError(f"Video feed at {self._url} has no 'videos' list")
        log.debug("Video feed fetched url=%s items=%d", self._url, len(videos))
        return videos
