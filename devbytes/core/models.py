from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlparse

SHORT_DESCRIPTION_LENGTH = 200
YOUTUBE_APP_SCHEME = "vnd.youtube:"


def smart_truncate(text: str, length: int) -> str:
    """Cut text to at most `length` chars on a word boundary, adding "..." if cut."""
    if len(text) <= length:
        return text
    words = text.split(" ")
    kept = []
    size = 0
    for word in words:
        size += len(word) + 1
        if size > length:
            break
        kept.append(word)
    if not kept:
        return text[:length] + "..."
    return " ".join(kept) + "..."


@dataclass(frozen=True)
class Video:
    title: str
    description: str
    url: str
    thumbnail_url: str

    @property
    def short_description(self) -> str:
        return smart_truncate(self.description, SHORT_DESCRIPTION_LENGTH)

    @property
    def launch_uri(self) -> Optional[str]:
        video_ids = parse_qs(urlparse(self.url).query).get("v")
        if not video_ids or not video_ids[0]:
            return None
        return f"{YOUTUBE_APP_SCHEME}{video_ids[0]}"


@dataclass(frozen=True)
class ErrorState:
    error_occurred: bool = False
    error_shown: bool = False
