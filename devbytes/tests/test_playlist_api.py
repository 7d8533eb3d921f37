import asyncio
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from devbytes.api.playlist import (
    acknowledge_network_error,
    get_playlist,
    get_playlist_controller,
    refresh_playlist,
)
from devbytes.application.playlist_controller import PlaylistController
from devbytes.application.sync_coordinator import SyncCoordinator


def run_api(store, fetcher, body):
    async def scenario():
        controller = PlaylistController(store, SyncCoordinator(store, fetcher))
        try:
            await controller.refresh_task
            return await body(controller)
        finally:
            controller.close()

    return asyncio.run(scenario())


def test_controller_dependency_reads_app_state():
    controller = MagicMock()
    request = MagicMock()
    request.app.state.playlist_controller = controller
    assert get_playlist_controller(request) is controller


def test_controller_dependency_not_ready():
    request = MagicMock()
    request.app.state.playlist_controller = None
    with pytest.raises(HTTPException) as exc:
        get_playlist_controller(request)
    assert exc.value.status_code == 503


def test_get_playlist_returns_cached_videos(store, make_fetcher, make_record):
    async def body(controller):
        return await get_playlist(controller=controller)

    result = run_api(store, make_fetcher([make_record(1)]), body)

    assert result["ok"] is True
    assert result["network_error"] is False
    assert result["notice"] is None
    assert result["videos"] == [
        {
            "title": "DevByte 1",
            "description": "Episode 1 of DevBytes",
            "short_description": "Episode 1 of DevBytes",
            "url": "https://www.youtube.com/watch?v=vid1",
            "thumbnail_url": "https://i.ytimg.com/vi/vid1/hqdefault.jpg",
            "launch_uri": "vnd.youtube:vid1",
        }
    ]


def test_network_error_notice_only_once(store, make_fetcher, transport_error):
    async def body(controller):
        first = await get_playlist(controller=controller)
        second = await get_playlist(controller=controller)
        return first, second

    first, second = run_api(store, make_fetcher(transport_error()), body)

    assert first["notice"] == "Network Error"
    assert first["network_error_shown"] is True
    assert second["notice"] is None
    assert second["network_error"] is True


def test_acknowledge_endpoint_is_idempotent(store, make_fetcher, transport_error):
    async def body(controller):
        await acknowledge_network_error(controller=controller)
        result = await acknowledge_network_error(controller=controller)
        notice = (await get_playlist(controller=controller))["notice"]
        return result, notice

    result, notice = run_api(store, make_fetcher(transport_error()), body)

    assert result == {"ok": True, "network_error_shown": True}
    assert notice is None


def test_manual_refresh_replaces_playlist(store, make_fetcher, make_record, transport_error):
    async def body(controller):
        return await refresh_playlist(controller=controller)

    result = run_api(store, make_fetcher(transport_error(), [make_record(3)]), body)

    assert [v["title"] for v in result["videos"]] == ["DevByte 3"]
    assert result["network_error"] is False
    assert result["notice"] is None


def test_manual_refresh_fatal_error_is_502(store, make_fetcher, make_record):
    async def body(controller):
        with pytest.raises(HTTPException) as exc:
            await refresh_playlist(controller=controller)
        return exc.value.status_code

    assert run_api(store, make_fetcher([make_record(1)], [{"bad": "record"}]), body) == 502


def test_early_ack_does_not_swallow_notice(store, make_fetcher, transport_error):
    gate = asyncio.Event()

    class DelayedFailure:
        async def fetch(self):
            await gate.wait()
            raise transport_error()

    async def scenario():
        controller = PlaylistController(store, SyncCoordinator(store, DelayedFailure()))
        try:
            await asyncio.sleep(0)
            acked = await acknowledge_network_error(controller=controller)
            gate.set()
            await controller.refresh_task
            first = await get_playlist(controller=controller)
            second = await get_playlist(controller=controller)
            return acked, first, second
        finally:
            controller.close()

    acked, first, second = asyncio.run(scenario())

    assert acked == {"ok": True, "network_error_shown": False}
    assert first["notice"] == "Network Error"
    assert second["notice"] is None
