from typing import Callable, List, Protocol, Sequence

from devbytes.core.models import Video
from devbytes.core.observable import Subscription


class VideoStore(Protocol):
    def get_all(self) -> List[Video]:
        ...

    def replace_all(self, videos: Sequence[Video]) -> None:
        ...

    def subscribe(self, observer: Callable[[List[Video]], None]) -> Subscription:
        ...
