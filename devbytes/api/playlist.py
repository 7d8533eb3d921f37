import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from devbytes.application.playlist_controller import PlaylistController
from devbytes.application.serializers import video_to_response

router = APIRouter()
log = logging.getLogger("devbytes.api.playlist")

NETWORK_ERROR_NOTICE = "Network Error"


def get_playlist_controller(request: Request) -> PlaylistController:
    controller = getattr(request.app.state, "playlist_controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Playlist not ready")
    return controller


def _playlist_body(controller: PlaylistController) -> Dict[str, Any]:
    # The notice is handed out once per error episode, then acknowledged.
    notice = NETWORK_ERROR_NOTICE if controller.consume_network_error_notice() else None
    return {
        "ok": True,
        "videos": [video_to_response(v) for v in controller.playlist.value],
        "network_error": controller.network_error_event.value,
        "network_error_shown": controller.is_network_error_shown.value,
        "notice": notice,
    }


@router.get("/api/playlist")
async def get_playlist(controller: PlaylistController = Depends(get_playlist_controller)) -> Dict[str, Any]:
    return _playlist_body(controller)


@router.post("/api/playlist/refresh")
async def refresh_playlist(controller: PlaylistController = Depends(get_playlist_controller)) -> Dict[str, Any]:
    try:
        await controller.refresh()
    except Exception:
        log.exception("Playlist refresh failed")
        raise HTTPException(status_code=502, detail="Playlist refresh failed")
    return _playlist_body(controller)


@router.post("/api/playlist/network-error/ack")
async def acknowledge_network_error(
    controller: PlaylistController = Depends(get_playlist_controller),
) -> Dict[str, Any]:
    controller.acknowledge_network_error()
    return {"ok": True, "network_error_shown": controller.is_network_error_shown.value}
