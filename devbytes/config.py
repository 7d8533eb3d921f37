import os
from dotenv import load_dotenv

load_dotenv()

REDIS_HOST = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB = int(os.getenv("REDIS_DB", "0"))
PLAYLIST_CACHE_KEY = os.getenv("PLAYLIST_CACHE_KEY", "videos:devbytes:playlist")

VIDEO_FEED_URL = os.getenv("VIDEO_FEED_URL", "https://devbytes.udacity.com/devbytes.json")
VIDEO_FEED_TIMEOUT_SEC = float(os.getenv("VIDEO_FEED_TIMEOUT_SEC", "10"))
