"""
Tests for Observable state holder
"""

import logging

from storefront.observable import Observable


def test_replay_on_subscribe():
    """Subscriber receives the current value first"""
    state = Observable(1)
    received = []

    state.subscribe(received.append)

    assert received == [1]


def test_no_replay():
    """replay=False only delivers later values"""
    state = Observable(1)
    received = []

    state.subscribe(received.append, replay=False)
    state.set(2)

    assert received == [2]


def test_subscription_order():
    """Subscribers are notified in subscription order"""
    state = Observable(0)
    calls = []

    state.subscribe(lambda v: calls.append(("a", v)), replay=False)
    state.subscribe(lambda v: calls.append(("b", v)), replay=False)
    state.set(7)

    assert calls == [("a", 7), ("b", 7)]


def test_unsubscribe_twice_is_safe():
    """Unsubscribe callable is idempotent"""
    state = Observable("x")
    unsubscribe = state.subscribe(lambda v: None)

    unsubscribe()
    unsubscribe()

    assert state.subscriber_count == 0


def test_unsubscribe_during_delivery():
    """A subscriber may unsubscribe itself while being notified"""
    state = Observable(0)
    received = []
    holder = {}

    def once(value):
        received.append(value)
        holder["unsubscribe"]()

    holder["unsubscribe"] = state.subscribe(once, replay=False)
    state.subscribe(received.append, replay=False)
    state.set(1)
    state.set(2)

    assert received == [1, 1, 2]


def test_failing_subscriber_does_not_block_others(caplog):
    """Errors in one subscriber are logged; the rest still get the value"""
    state = Observable(0, name="counter")
    received = []

    def broken(value):
        raise RuntimeError("boom")

    state.subscribe(broken, replay=False)
    state.subscribe(received.append, replay=False)

    with caplog.at_level(logging.WARNING):
        state.set(3)

    assert received == [3]
    assert state.value == 3
    assert "Subscriber of counter failed" in caplog.text


def test_put_then_notify():
    """put stores silently; notify delivers the stored value"""
    state = Observable(0)
    received = []
    state.subscribe(received.append, replay=False)

    state.put(5)
    assert received == []
    assert state.value == 5

    state.notify()
    assert received == [5]


def test_clear():
    """clear drops all subscribers"""
    state = Observable(0)
    received = []
    state.subscribe(received.append, replay=False)

    state.clear()
    state.set(1)

    assert received == []
