"""
Observable values for the presentation layer.

A LiveValue holds the latest value and replays it to every new observer.
Observers are plain callables and are called in subscription order.
"""

import logging
import threading
from typing import Callable, Generic, List, Optional, TypeVar

log = logging.getLogger("devbytes.observable")

T = TypeVar("T")

Observer = Callable[[T], None]


class Subscription:
    def __init__(self, cancel: Callable[[], None]) -> None:
        self._cancel: Optional[Callable[[], None]] = cancel
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._cancel is not None

    def unsubscribe(self) -> None:
        with self._lock:
            cancel, self._cancel = self._cancel, None
        if cancel is not None:
            cancel()


class ObserverList(Generic[T]):
    """Thread-safe observer registry. Notification runs on a snapshot, outside the lock."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._lock = threading.Lock()

    def add(self, observer: Observer) -> Subscription:
        with self._lock:
            self._observers.append(observer)
        return Subscription(lambda: self._remove(observer))

    def _remove(self, observer: Observer) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                pass

    def snapshot(self) -> List[Observer]:
        with self._lock:
            return list(self._observers)

    def notify(self, value: T) -> None:
        for observer in self.snapshot():
            try:
                observer(value)
            except Exception:
                log.exception("Observer %r failed", observer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)


class LiveValue(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: ObserverList[T] = ObserverList()

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, observer: Observer) -> Subscription:
        subscription = self._observers.add(observer)
        observer(self._value)
        return subscription

    def observer_count(self) -> int:
        return len(self._observers)


class MutableLiveValue(LiveValue[T]):
    def set_value(self, value: T) -> None:
        self._value = value
        self._observers.notify(value)

    def read_only(self) -> LiveValue[T]:
        return _ReadOnlyLiveValue(self)


class _ReadOnlyLiveValue(LiveValue[T]):
    def __init__(self, source: LiveValue[T]) -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, observer: Observer) -> Subscription:
        return self._source.subscribe(observer)

    def observer_count(self) -> int:
        return self._source.observer_count()


class SubscriptionScope:
    """Owns subscriptions; dispose() unsubscribes all of them."""

    def __init__(self) -> None:
        self._subscriptions: List[Subscription] = []
        self._lock = threading.Lock()
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add(self, subscription: Subscription) -> Subscription:
        with self._lock:
            if not self._disposed:
                self._subscriptions.append(subscription)
                return subscription
        subscription.unsubscribe()
        return subscription

    def dispose(self) -> None:
        with self._lock:
            self._disposed = True
            subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.unsubscribe()

    def __enter__(self) -> "SubscriptionScope":
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()
