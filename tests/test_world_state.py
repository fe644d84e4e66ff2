"""
Tests for world state tracking
"""

from pywynn.events import EventManager, EventType
from pywynn.world_state import WorldState, WorldStateModel


class TestWorldStateModel:
    """State changes and events"""

    def setup_method(self):
        self.events = EventManager()
        self.received = []
        self.events.subscribe(EventType.WORLD_STATE_CHANGED, self.received.append)
        self.model = WorldStateModel(self.events)

    def test_initial_state(self):
        assert self.model.state == WorldState.NOT_CONNECTED
        assert not self.model.on_world()

    def test_change_emits_event(self):
        self.model.set_state(WorldState.WORLD, "WC7")

        assert self.model.on_world()
        assert self.model.world_name == "WC7"
        assert len(self.received) == 1
        event = self.received[0]
        assert event.new_state == WorldState.WORLD
        assert event.old_state == WorldState.NOT_CONNECTED
        assert event.world_name == "WC7"

    def test_same_state_is_silent(self):
        self.model.set_state(WorldState.HUB)
        self.model.set_state(WorldState.HUB)

        assert len(self.received) == 1

    def test_world_switch_updates_name_only(self):
        self.model.set_state(WorldState.WORLD, "WC1")
        self.model.set_state(WorldState.WORLD, "WC2")

        assert self.model.world_name == "WC2"
        assert len(self.received) == 1

    def test_world_name_cleared_off_world(self):
        self.model.set_state(WorldState.WORLD, "WC1")
        self.model.set_state(WorldState.INTERIM, "WC1")

        assert self.model.world_name == ""
        assert self.received[-1].old_state == WorldState.WORLD
