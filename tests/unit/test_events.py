"""Unit tests for the lookup notification channel"""

from credit_card_applications.domain.events import LookupPerformedEvent


def test_notify_calls_handlers_in_subscription_order():
    event = LookupPerformedEvent()
    calls = []
    event.subscribe(lambda: calls.append("first"))
    event.subscribe(lambda: calls.append("second"))

    event.notify()
    event.notify()

    assert calls == ["first", "second", "first", "second"]
    assert event.subscriber_count == 2


def test_notify_without_subscribers_is_a_no_op():
    event = LookupPerformedEvent()

    event.notify()

    assert event.subscriber_count == 0


def test_handler_subscribed_during_notify_runs_next_time():
    event = LookupPerformedEvent()
    calls = []

    def late():
        calls.append("late")

    def subscriber():
        calls.append("subscriber")
        event.subscribe(late)

    event.subscribe(subscriber)
    event.notify()

    assert calls == ["subscriber"]
    assert event.subscriber_count == 2
