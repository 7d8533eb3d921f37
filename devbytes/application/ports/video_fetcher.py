from typing import Protocol, List, Dict, Any


class VideoFetcher(Protocol):
    async def fetch(self) -> List[Dict[str, Any]]:
        ...
