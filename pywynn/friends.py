"""
Friends Model

Keeps the player's Wynncraft friend list in sync by scraping chat. The server
has no structured API for friends, so the list is requested with the
"friend list" command and read back from the chat reply, then kept up to date
from the add/remove confirmations.
"""

import logging
import re
import time
from typing import Callable, FrozenSet, Optional, Set

from .chat import ChatMessageReceived, MessageType
from .config import ClientConfig
from .events import (
    EventManager,
    EventPriority,
    EventType,
    FriendEvent,
    FriendListEvent,
    RelationsChangeType,
    RelationsUpdate,
)
from .interfaces import CommandHost
from .world_state import WorldState, WorldStateEvent, WorldStateModel

logger = logging.getLogger(__name__)

# Patterns are named FRIEND_<ACTION>[_<DETAIL>] and always match a whole line.
# FRIEND_LIST runs against unformatted text, everything else against coded text.
FRIEND_LIST = re.compile(r".+'s? friends \(.+\): (.*)")
FRIEND_LIST_FAIL_1 = re.compile(r"§eWe couldn't find any friends\.")
FRIEND_LIST_FAIL_2 = re.compile(r"§eTry typing §r§6/friend add Username§r§e!")
FRIEND_REMOVE = re.compile(r"§e(.+) has been removed from your friends!")
FRIEND_ADD = re.compile(r"§e(.+) has been added to your friends!")

FRIEND_JOIN = re.compile(
    r"(?:§a|§r§7)(?:§o)?(?P<player>.+)§r(?:§2|§8(?:§o)?) has logged into server "
    r"§r(?:§a|§7(?:§o)?)(?P<server>.+)§r(?:§2|§8(?:§o)?) as "
    r"(?:§r§a|§r§7(?:§o)?)an? (?P<class>.+)"
)
FRIEND_LEAVE = re.compile(r"(?:§a|§r§7)(.+) left the game\.")


class FriendsModel:
    """Tracks the friend list and re-publishes friend activity as events"""

    def __init__(self, events: EventManager, world_state: WorldStateModel,
                 host: CommandHost, config: Optional[ClientConfig] = None,
                 clock: Callable[[], float] = time.time):
        self.events = events
        self.world_state = world_state
        self.host = host
        self.config = config or ClientConfig()
        self._clock = clock

        self._expecting_friend_message = False
        self._last_friend_request: Optional[float] = None
        self._friends: Set[str] = set()

        events.subscribe(EventType.AUTHENTICATED, self._on_authenticated)
        events.subscribe(EventType.WORLD_STATE_CHANGED, self._on_world_state_change)
        # Runs before anything else sees the chat so replies can be hidden
        events.subscribe(EventType.CHAT_MESSAGE, self._on_chat_received, EventPriority.HIGHEST)

        self.reset_data()

    @property
    def friends(self) -> FrozenSet[str]:
        return frozenset(self._friends)

    @property
    def expecting_friend_message(self) -> bool:
        return self._expecting_friend_message

    def is_friend(self, player_name: str) -> bool:
        return player_name in self._friends

    def get_friends(self) -> FrozenSet[str]:
        return self.friends

    def close(self):
        """Detach from the event manager"""
        self.events.unsubscribe(EventType.AUTHENTICATED, self._on_authenticated)
        self.events.unsubscribe(EventType.WORLD_STATE_CHANGED, self._on_world_state_change)
        self.events.unsubscribe(EventType.CHAT_MESSAGE, self._on_chat_received)

    # =========================================================================
    # Requests
    # =========================================================================

    def request_data(self) -> bool:
        """
        Send "/friend list" and wait for the reply in chat.

        Skipped when there is no player, or when the last request was less
        than request_cooldown seconds ago.

        Returns:
            True if the command was sent
        """
        if not self.host.has_player:
            return False

        now = self._clock()
        if (self._last_friend_request is not None
                and now - self._last_friend_request < self.config.request_cooldown):
            logger.info("Skipping friend list request because it was requested "
                        f"less than {int(self.config.request_cooldown * 1000)}ms ago.")
            return False

        if not self.host.send_command(self.config.friend_list_command):
            logger.warning("Could not send friend list request, host dropped the command.")
            return False

        self._expecting_friend_message = True
        self._last_friend_request = now
        logger.info("Requested friend list from Wynncraft.")
        return True

    def reset_data(self):
        self._friends = set()
        self._post_relations(self._friends, RelationsChangeType.RELOAD)

    # =========================================================================
    # Event handlers
    # =========================================================================

    def _on_authenticated(self, _data=None):
        if not self.world_state.on_world():
            return

        self.request_data()

    def _on_world_state_change(self, event: WorldStateEvent):
        if event.new_state == WorldState.WORLD:
            self.request_data()
        else:
            self.reset_data()

    def _on_chat_received(self, message: ChatMessageReceived):
        if message.message_type != MessageType.FOREGROUND:
            return

        coded = message.coded

        match = FRIEND_JOIN.fullmatch(coded)
        if match:
            self.events.emit(EventType.FRIEND_JOINED, FriendEvent(
                match.group("player"), match.group("server"), match.group("class")))
        else:
            match = FRIEND_LEAVE.fullmatch(coded)
            if match:
                self.events.emit(EventType.FRIEND_LEFT, FriendEvent(match.group(1)))

        if self._try_parse_friend_messages(coded):
            return

        if not self._expecting_friend_message:
            return

        if self._try_parse_friend_list(message.unformatted) or self._try_parse_no_friend_list(coded):
            message.cancel()
            self._expecting_friend_message = False
            return

        # First line of the two line "no friends" reply, keep waiting for the second
        if FRIEND_LIST_FAIL_1.fullmatch(coded):
            message.cancel()

    # =========================================================================
    # Parsing
    # =========================================================================

    def _try_parse_no_friend_list(self, coded: str) -> bool:
        if FRIEND_LIST_FAIL_2.fullmatch(coded):
            logger.info("Friend list is empty.")
            return True

        return False

    def _try_parse_friend_messages(self, coded: str) -> bool:
        match = FRIEND_REMOVE.fullmatch(coded)
        if match:
            player = match.group(1)
            logger.info(f"Player has removed friend: {player}")

            self._friends.discard(player)
            self._post_relations({player}, RelationsChangeType.REMOVE)
            self.events.emit(EventType.FRIEND_REMOVED, FriendEvent(player))
            return True

        match = FRIEND_ADD.fullmatch(coded)
        if match:
            player = match.group(1)
            logger.info(f"Player has added friend: {player}")

            self._friends.add(player)
            self._post_relations({player}, RelationsChangeType.ADD)
            self.events.emit(EventType.FRIEND_ADDED, FriendEvent(player))
            return True

        return False

    def _try_parse_friend_list(self, unformatted: str) -> bool:
        match = FRIEND_LIST.fullmatch(unformatted)
        if not match:
            return False

        friend_list = match.group(1).split(", ")

        self._friends = set(friend_list)
        self._post_relations(self._friends, RelationsChangeType.RELOAD)
        self.events.emit(EventType.FRIEND_LIST_UPDATED, FriendListEvent(self.friends))

        logger.info(f"Successfully updated friend list, user has {len(friend_list)} friends.")
        return True

    def _post_relations(self, players: Set[str], change_type: RelationsChangeType):
        self.events.emit(EventType.RELATIONS_UPDATED,
                         RelationsUpdate(frozenset(players), change_type))
