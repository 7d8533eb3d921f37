from dataclasses import asdict
from typing import Any, Dict, Iterable, List

from devbytes.core.exceptions import DeserializationError
from devbytes.core.models import Video

# feed field -> Video field
_FEED_FIELDS = {
    "title": "title",
    "description": "description",
    "url": "url",
    "thumbnail": "thumbnail_url",
}
_STORED_FIELDS = ("title", "description", "url", "thumbnail_url")


def _require_str(record: Dict[str, Any], field: str) -> str:
    value = record.get(field)
    if not isinstance(value, str):
        raise DeserializationError(f"Video record field {field!r} must be a string, got {type(value).__name__}")
    return value


def network_record_to_video(record: Any) -> Video:
    if not isinstance(record, dict):
        raise DeserializationError(f"Video record must be an object, got {type(record).__name__}")
    values = {target: _require_str(record, source) for source, target in _FEED_FIELDS.items()}
    return Video(**values)


def as_domain_model(records: Iterable[Any]) -> List[Video]:
    return [network_record_to_video(record) for record in records]


def video_to_dict(video: Video) -> Dict[str, str]:
    return asdict(video)


def video_from_dict(data: Any) -> Video:
    if not isinstance(data, dict):
        raise DeserializationError(f"Stored video must be an object, got {type(data).__name__}")
    return Video(**{field: _require_str(data, field) for field in _STORED_FIELDS})


def video_to_response(video: Video) -> Dict[str, Any]:
    payload: Dict[str, Any] = video_to_dict(video)
    payload["short_description"] = video.short_description
    payload["launch_uri"] = video.launch_uri
    return payload
