"""Observable single-value holders.

A LiveValue keeps one current value and pushes every new value to its
subscribers. MutableLiveValue is the writable variant owned by whoever
produces the data; consumers only get the read-only LiveValue view.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class LiveValue(Generic[T]):
    """Read-only observable cell holding a single current value."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._observers: list[Callable[[T], None]] = []
        self._detach: Callable[[], None] | None = None

    @property
    def value(self) -> T:
        """The current value. Reading it has no side effects."""
        return self._value

    def subscribe(self, observer: Callable[[T], None]) -> Callable[[], None]:
        """Register an observer and call it with the current value.

        Args:
            observer: Called with the current value now and with every
                value published afterwards.

        Returns:
            A callable that removes the observer.
        """
        self._observers.append(observer)
        observer(self._value)
        return lambda: self._remove(observer)

    def map(self, transform: Callable[[T], R]) -> "LiveValue[R]":
        """Return a derived view whose value is transform(self.value)."""
        derived: LiveValue[R] = LiveValue(transform(self._value))

        def forward(value: T) -> None:
            derived._publish(transform(value))

        self._observers.append(forward)
        derived._detach = lambda: self._remove(forward)
        return derived

    def close(self) -> None:
        """Stop following the source this view was mapped from."""
        if self._detach is not None:
            self._detach()
            self._detach = None

    async def updates(self) -> AsyncIterator[T]:
        """Yield each value published after iteration starts."""
        queue: asyncio.Queue[T] = asyncio.Queue()
        self._observers.append(queue.put_nowait)
        try:
            while True:
                yield await queue.get()
        finally:
            self._remove(queue.put_nowait)

    def _remove(self, observer: Callable[[T], None]) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _publish(self, value: T) -> None:
        self._value = value
        for observer in list(self._observers):
            observer(value)


class MutableLiveValue(LiveValue[T]):
    """LiveValue whose owner can publish new values."""

    def set(self, value: T) -> None:
        """Store a new value and notify observers in registration order."""
        self._publish(value)
