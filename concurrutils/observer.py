"""Observers, observables and a mapping operator between them."""

from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

OnNext = Callable[[Any], Any]
OnError = Callable[[BaseException], Any]
OnCompletion = Callable[[], Any]


class Observer(Generic[T]):
    """Receives values, an error or completion through callbacks.

    The error and completion callbacks are optional.
    """

    def __init__(
        self,
        on_next: OnNext,
        on_error: OnError | None = None,
        on_completion: OnCompletion | None = None,
    ) -> None:
        if not callable(on_next):
            raise TypeError("on_next must be callable")
        self._on_next = on_next
        self._on_error = on_error
        self._on_completion = on_completion

    def on_next(self, value: T) -> None:
        """Deliver the next value."""
        self._on_next(value)

    def on_error(self, error: BaseException) -> None:
        """Deliver an error, if an error callback was given."""
        if self._on_error is not None:
            self._on_error(error)

    def on_completion(self) -> None:
        """Signal completion, if a completion callback was given."""
        if self._on_completion is not None:
            self._on_completion()

    def copy(self) -> Observer[T]:
        """A new observer with the same callbacks."""
        return Observer(self._on_next, self._on_error, self._on_completion)


class Observable(Generic[T]):
    """Emits values to subscribed observers.

    The observable holds subscriptions weakly: a subscriber stays subscribed
    only as long as it keeps the subscription returned by ``subscribe``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._observers: list[weakref.ref[Observer[Any]]] = []

    def subscribe(self, observer: Observer[Any]) -> Observer[Any]:
        """Subscribe a copy of ``observer`` and return it as the subscription."""
        subscription = observer.copy()
        with self._lock:
            self._observers.append(weakref.ref(subscription))
        return subscription

    def _live_observers(self) -> list[Observer[Any]]:
        with self._lock:
            alive = []
            for ref in self._observers:
                observer = ref()
                if observer is not None:
                    alive.append(observer)
            self._observers = [weakref.ref(observer) for observer in alive]
            return alive

    def notify(self, value: Any) -> None:
        """Send ``value`` to every live subscription, in subscription order."""
        for observer in self._live_observers():
            observer.on_next(value)

    def notify_error(self, error: BaseException) -> None:
        """Send ``error`` to every live subscription."""
        for observer in self._live_observers():
            observer.on_error(error)

    def notify_completion(self) -> None:
        """Signal completion to every live subscription."""
        for observer in self._live_observers():
            observer.on_completion()


class MappedObservable(Observable[Any]):
    """Observable that transforms each value before emitting it.

    An exception raised while transforming or emitting is sent to the
    observers as an error instead.
    """

    def __init__(self, func: Callable[[Any], Any]) -> None:
        super().__init__()
        if not callable(func):
            raise TypeError("func must be callable")
        self._func = func

    def notify(self, value: Any) -> None:
        """Emit ``func(value)``, or the error it raised."""
        try:
            super().notify(self._func(value))
        except Exception as exc:
            self.notify_error(exc)


def map_observable(func: Callable[[Any], Any]) -> MappedObservable:
    """Create an observable that emits values transformed by ``func``."""
    return MappedObservable(func)


@dataclass(frozen=True)
class Person:
    """A subject to observe."""

    name: str
    address: str
    age: int

    def __post_init__(self) -> None:
        if not 0 <= self.age <= 255:
            raise ValueError("age must be between 0 and 255")

    def __str__(self) -> str:
        return f"Name: {self.name}, address: {self.address}, age: {self.age}"