"""Lookup notification channel between a validator and its observers"""

from typing import Callable, List

LookupHandler = Callable[[], None]


class LookupPerformedEvent:
    """
    Observer channel fired once per frequent flyer validity lookup.

    Handlers are called synchronously, in subscription order, on the thread
    that calls notify(). There is no unsubscribe: a handler stays attached for
    as long as the channel lives, so an evaluator keeps counting lookups for
    the lifetime of the validator it was built with.
    """

    def __init__(self) -> None:
        self._handlers: List[LookupHandler] = []

    def subscribe(self, handler: LookupHandler) -> None:
        self._handlers.append(handler)

    def notify(self) -> None:
        for handler in list(self._handlers):
            handler()

    @property
    def subscriber_count(self) -> int:
        return len(self._handlers)
