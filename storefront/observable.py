"""Observable state holder used by the catalog and cart stores.

Holds the current value and pushes every new value to subscribers
synchronously, in subscription order. Values should be immutable
(tuples, frozen models) so a subscriber can keep them safely.
"""
from typing import Callable, Generic, TypeVar

from storefront.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

Callback = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[T]):
    """Current value plus change notification."""

    def __init__(self, initial: T, name: str = "state") -> None:
        self._value = initial
        self._name = name
        self._subscribers: list[Callback] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def set(self, value: T) -> None:
        """Store `value` and notify every subscriber with it."""
        self.put(value)
        self.notify()

    def put(self, value: T) -> None:
        """Store `value` without notifying; pair with notify()."""
        self._value = value

    def notify(self) -> None:
        """Deliver the current value to every subscriber."""
        value = self._value
        # Copy: a subscriber may unsubscribe itself during delivery
        for callback in list(self._subscribers):
            self._deliver(callback, value)

    def subscribe(self, callback: Callback, replay: bool = True) -> Unsubscribe:
        """
        Register `callback` for future values.

        Args:
            callback: Called with each new value
            replay: Deliver the current value immediately

        Returns:
            Callable that removes the subscription (safe to call twice)
        """
        self._subscribers.append(callback)
        if replay:
            self._deliver(callback, self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        """Drop all subscribers."""
        self._subscribers.clear()

    def _deliver(self, callback: Callback, value: T) -> None:
        try:
            callback(value)
        except Exception as e:
            # One broken observer must not starve the rest
            logger.warning(f"Subscriber of {self._name} failed: {e}", exc_info=True)
