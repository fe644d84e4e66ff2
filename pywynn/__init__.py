"""
pywynn - Wynncraft friend list tracking from chat

Usage:
    from pywynn import Client, EventType, WorldState

    client = Client(send_command=bridge.run_command)
    client.on(EventType.FRIEND_JOINED, lambda e: print(f"{e.player} joined {e.server}"))

    client.join("Salted")
    client.set_world_state(WorldState.WORLD, "WC1")   # sends /friend list
    client.receive_chat("Salted's friends (2): Alice, Bob")

    client.friends.is_friend("Alice")   # True
    client.friends.get_friends()        # frozenset({'Alice', 'Bob'})

Or plug the model into your own event manager:
    from pywynn import EventManager, WorldStateModel, FriendsModel

    events = EventManager()
    world = WorldStateModel(events)
    friends = FriendsModel(events, world, host)   # host: CommandHost
"""

__version__ = "1.0.0"

from .chat import ChatMessageReceived, MessageType, strip_formatting
from .client import Client
from .config import ClientConfig, ConfigValidationError
from .events import (
    EventManager,
    EventPriority,
    EventType,
    FriendEvent,
    FriendListEvent,
    RelationsChangeType,
    RelationsUpdate,
)
from .friends import FriendsModel
from .interfaces import CommandHost
from .world_state import WorldState, WorldStateEvent, WorldStateModel

__all__ = [
    "Client",
    "ClientConfig",
    "ConfigValidationError",
    "CommandHost",
    "ChatMessageReceived",
    "MessageType",
    "strip_formatting",
    "EventManager",
    "EventPriority",
    "EventType",
    "FriendEvent",
    "FriendListEvent",
    "RelationsChangeType",
    "RelationsUpdate",
    "FriendsModel",
    "WorldState",
    "WorldStateEvent",
    "WorldStateModel",
]
