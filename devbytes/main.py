from contextlib import asynccontextmanager

from fastapi import FastAPI

from devbytes.api.playlist import router as playlist_router
from devbytes.infrastructure.playlist import build_playlist_controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    controller = build_playlist_controller()
    app.state.playlist_controller = controller
    try:
        yield
    finally:
        controller.close()
        app.state.playlist_controller = None


app = FastAPI(title="DevBytes Playlist", lifespan=lifespan)

app.include_router(playlist_router)


@app.get("/health")
def health():
    return {
        "ok": True,
        "service": "devbytes_playlist",
    }
