"""
pywynn - Events
Simple event system with handler priorities.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Tuple

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event types"""
    # Host events
    CHAT_MESSAGE = "chat_message"
    WORLD_STATE_CHANGED = "world_state_changed"
    AUTHENTICATED = "authenticated"

    # Friend events
    FRIEND_ADDED = "friend_added"
    FRIEND_REMOVED = "friend_removed"
    FRIEND_LIST_UPDATED = "friend_list_updated"
    FRIEND_JOINED = "friend_joined"
    FRIEND_LEFT = "friend_left"
    RELATIONS_UPDATED = "relations_updated"


class EventPriority(Enum):
    """Handler ordering, highest runs first"""
    HIGHEST = 4
    HIGH = 3
    NORMAL = 2
    LOW = 1
    LOWEST = 0


class RelationsChangeType(Enum):
    """How a relations update should be applied to a remote copy of the list"""
    ADD = "add"
    REMOVE = "remove"
    RELOAD = "reload"  # Replace everything with the given players


@dataclass
class FriendEvent:
    """Payload for added, removed, joined and left events"""
    player: str
    server: Optional[str] = None
    class_name: Optional[str] = None


@dataclass
class FriendListEvent:
    """Payload for FRIEND_LIST_UPDATED"""
    friends: FrozenSet[str] = field(default_factory=frozenset)


@dataclass
class RelationsUpdate:
    """Payload for RELATIONS_UPDATED"""
    players: FrozenSet[str]
    change_type: RelationsChangeType


class EventManager:
    """Priority-ordered event manager"""

    def __init__(self):
        self._handlers: Dict[EventType, List[Tuple[EventPriority, Callable]]] = {}

    def subscribe(self, event_type: EventType, handler: Callable,
                  priority: EventPriority = EventPriority.NORMAL):
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append((priority, handler))
        # Stable sort keeps subscription order within a priority
        handlers.sort(key=lambda entry: entry[0].value, reverse=True)

    def unsubscribe(self, event_type: EventType, handler: Callable):
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        self._handlers[event_type] = [
            (priority, h) for priority, h in handlers if h != handler
        ]

    def has_subscribers(self, event_type: EventType) -> bool:
        return bool(self._handlers.get(event_type))

    def emit(self, event_type: EventType, data: Any = None):
        """Emit an event to all subscribers"""
        for _, handler in list(self._handlers.get(event_type, ())):
            try:
                handler(data)
            except Exception:
                logger.exception(f"Event handler error for '{event_type.value}'")

    def clear(self):
        """Clear all event subscriptions"""
        self._handlers.clear()
