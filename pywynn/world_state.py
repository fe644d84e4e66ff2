"""
World State Management

Tracks where the player currently is on Wynncraft.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .events import EventManager, EventType

logger = logging.getLogger(__name__)


class WorldState(Enum):
    """Player location on the server"""
    NOT_CONNECTED = "not_connected"
    CONNECTING = "connecting"
    INTERIM = "interim"  # Between worlds, e.g. while switching
    HUB = "hub"
    CHARACTER_SELECTION = "character_selection"
    WORLD = "world"


@dataclass
class WorldStateEvent:
    """Payload for WORLD_STATE_CHANGED"""
    new_state: WorldState
    old_state: WorldState
    world_name: str = ""


class WorldStateModel:
    """Holds the current world state and announces changes"""

    def __init__(self, events: EventManager):
        self.events = events
        self.state = WorldState.NOT_CONNECTED
        self.world_name = ""

    def on_world(self) -> bool:
        return self.state == WorldState.WORLD

    def set_state(self, new_state: WorldState, world_name: str = ""):
        """Change state, emitting WORLD_STATE_CHANGED if it differs"""
        if new_state == self.state and world_name == self.world_name:
            return

        old_state = self.state
        self.state = new_state
        self.world_name = world_name if new_state == WorldState.WORLD else ""

        logger.debug(f"World state: {old_state.value} -> {new_state.value} {self.world_name}")
        if new_state != old_state:
            self.events.emit(EventType.WORLD_STATE_CHANGED,
                             WorldStateEvent(new_state, old_state, self.world_name))
