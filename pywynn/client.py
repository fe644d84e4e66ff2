"""
pywynn - Client
Host facade that feeds chat, world state and authentication into the models.

The game itself is not modelled here. Whatever owns the real connection (a mod
bridge, a log tailer, a test) pushes chat lines and state changes in, and
provides a callable that actually sends commands.
"""

import logging
import time
from collections import deque
from typing import Callable, Deque, List, Optional

from .chat import ChatMessageReceived, MessageType
from .config import ClientConfig
from .events import EventManager, EventPriority, EventType
from .friends import FriendsModel
from .interfaces import CommandHost
from .world_state import WorldState, WorldStateModel

logger = logging.getLogger(__name__)


class Client(CommandHost):
    """
    Minimal host for the friends model.

    Usage:
        client = Client(send_command=bridge.run_command)
        client.join("Salted")
        client.set_world_state(WorldState.WORLD, "WC1")  # sends /friend list
        client.receive_chat("Salted's friends (2): Alice, Bob")
        client.friends.is_friend("Alice")
    """

    def __init__(self, send_command: Optional[Callable[[str], object]] = None,
                 config: Optional[ClientConfig] = None,
                 clock: Callable[[], float] = time.time):
        """
        Create a new client.

        Args:
            send_command: Called with the command text (no leading '/')
            config: Client configuration (defaults are used if omitted)
            clock: Time source in seconds, used for request debouncing
        """
        self.config = (config or ClientConfig()).validate()
        self._sender = send_command
        self._clock = clock

        self.player_name: Optional[str] = None

        # Commands we forwarded to the host, oldest first
        self.sent_commands: List[str] = []

        # Chat lines that were not canceled
        self.chat_history: Deque[ChatMessageReceived] = deque(maxlen=self.config.chat_history_size)

        self.events = EventManager()
        self.world_state = WorldStateModel(self.events)
        self.friends = FriendsModel(self.events, self.world_state, self, self.config, clock)

    # =========================================================================
    # Player
    # =========================================================================

    @property
    def has_player(self) -> bool:
        return self.player_name is not None

    def join(self, player_name: str):
        """Mark the local player as present in the game"""
        self.player_name = player_name

    def leave(self):
        """Player entity is gone, drops back to NOT_CONNECTED"""
        self.player_name = None
        self.set_world_state(WorldState.NOT_CONNECTED)

    # =========================================================================
    # Host -> models
    # =========================================================================

    def receive_chat(self, coded: str, message_type: MessageType = MessageType.FOREGROUND) -> bool:
        """
        Deliver a coded chat line to all subscribers.

        Returns:
            True if the line should be displayed (no handler canceled it)
        """
        message = ChatMessageReceived(coded, message_type, self._clock())
        self.events.emit(EventType.CHAT_MESSAGE, message)

        if message.canceled:
            logger.debug(f"Chat hidden: {message.unformatted}")
            return False

        self.chat_history.append(message)
        return True

    def set_world_state(self, state: WorldState, world_name: str = ""):
        self.world_state.set_state(state, world_name)

    def authenticate(self):
        """Signal that the external social service accepted our login"""
        self.events.emit(EventType.AUTHENTICATED)

    def on(self, event_type: EventType, handler: Callable,
           priority: EventPriority = EventPriority.NORMAL):
        """Subscribe to an event"""
        self.events.subscribe(event_type, handler, priority)

    # =========================================================================
    # Models -> host
    # =========================================================================

    def send_command(self, command: str) -> bool:
        """
        Send a command through the host.

        Returns:
            True if the command was handed to the sender
        """
        if self._sender is None:
            logger.warning(f"No command sender configured, dropping '/{command}'")
            return False

        if not self.has_player:
            logger.warning(f"No player in game, dropping '/{command}'")
            return False

        self._sender(command)
        self.sent_commands.append(command)
        logger.debug(f"Sent command: /{command}")
        return True

    def close(self):
        self.friends.close()
        self.events.clear()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
