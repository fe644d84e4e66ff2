"""
Shared fixtures for pywynn tests
"""

import pytest

from pywynn import Client, EventType


class FakeClock:
    """Manually advanced time source"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class EventRecorder:
    """Collects (event_type, payload) pairs in emission order"""

    def __init__(self):
        self.events = []

    def watch(self, client, *event_types):
        for event_type in event_types:
            client.on(event_type, lambda data, t=event_type: self.events.append((t, data)))

    def of_type(self, event_type):
        return [data for t, data in self.events if t == event_type]

    def types(self):
        return [t for t, _ in self.events]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sent():
    return []


@pytest.fixture
def client(clock, sent):
    c = Client(send_command=sent.append, clock=clock)
    c.join("Salted")
    yield c
    c.close()


@pytest.fixture
def recorder(client):
    rec = EventRecorder()
    rec.watch(client, *EventType)
    return rec
