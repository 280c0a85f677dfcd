from fairylink.events.bus import EVENT_TICK, EventBus


def test_subscribe_emit_and_unsubscribe():
    bus = EventBus()
    received = []

    def handler(sender, **payload):
        received.append((sender, payload))

    bus.subscribe(EVENT_TICK, handler)
    bus.emit(EVENT_TICK, dt=0.5)
    assert received == [(bus, {'dt': 0.5})]
    bus.unsubscribe(EVENT_TICK, handler)
    bus.emit(EVENT_TICK, dt=0.5)
    assert len(received) == 1


def test_emit_without_subscribers_is_harmless():
    EventBus().emit("nobody_listens", value=1)


def test_lambda_subscribers_stay_connected():
    bus = EventBus()
    received = []
    bus.subscribe("ping", lambda sender, **payload: received.append(payload))
    bus.emit("ping", n=1)
    assert received == [{'n': 1}]
